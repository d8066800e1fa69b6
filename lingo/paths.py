"""Locate translation files and format paths and keys for display."""

from pathlib import Path

from lingo.config import Settings
from lingo.constants import TRUNCATE_LENGTH


def looks_like_path(value: str) -> bool:
    """Check if a locale argument is already a file path."""
    return "/" in value or "\\" in value or value.endswith(".json")


def locale_candidates(locale: str, settings: Settings) -> list[Path]:
    """Conventional locations of ``<locale>.json``, most preferred first."""
    return [
        settings.root / "lang" / f"{locale}.json",
        settings.lang_dir / f"{locale}.json",
        settings.resource_dir / "lang" / f"{locale}.json",
    ]


def resolve_file_path(locale: str, settings: Settings) -> Path:
    """Resolve a locale code or explicit path to a translation file.

    Args:
        locale: Locale code such as ``id``, or a path such as ``lang/id.json``
        settings: Provides the application root and lang directory

    Returns:
        The first existing conventional location, or ``<root>/lang/<locale>.json``

    """
    if looks_like_path(locale):
        return Path(locale)

    candidates = locale_candidates(locale, settings)
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return candidates[0]


def truncate(text: str, length: int = TRUNCATE_LENGTH) -> str:
    """Shorten text for display."""
    return text[:length] + "..." if len(text) > length else text
