"""Translation statistics model."""

from pydantic import BaseModel


class TranslationStats(BaseModel):
    """Progress of a translation dictionary."""

    total: int
    translated: int
    untranslated: int
    percentage: float  # Translated share, 0-100, two decimals
