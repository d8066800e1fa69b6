"""Loaded translation file model."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class TranslationFile:
    """A translation file as read from disk.

    The raw content is kept next to the parsed mapping because duplicate keys
    only exist in the raw text; parsing keeps the last occurrence.

    Attributes:
        path: Location of the JSON file
        content: Raw, unparsed file content
        translations: Parsed key to translation mapping

    """

    path: Path
    content: str
    translations: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        """Return the number of parsed entries."""
        return len(self.translations)
