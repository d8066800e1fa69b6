"""Translation data models."""

from lingo.models.stats import TranslationStats
from lingo.models.sync_report import SyncReport
from lingo.models.translation_file import TranslationFile

__all__ = [
    "SyncReport",
    "TranslationFile",
    "TranslationStats",
]
