"""Chainable builder over the dictionary and reconciler services.

Example:
    LingoBuilder.make(translations).add_missing(keys).sort_keys().save("lang/id.json")
    LingoBuilder.for_locale("id").sync_with().save()

"""

import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from lingo.config import Settings
from lingo.models.stats import TranslationStats
from lingo.services import dictionary, extractor, reconciler

logger = logging.getLogger(__name__)


class LingoBuilder:
    """Holds one translation dictionary and applies operations in place.

    Every operation replaces the held dictionary and returns the builder, so
    calls can be chained. When a locale is set, ``save()`` writes to
    ``<lang_dir>/<locale>.json`` by default.
    """

    def __init__(
        self,
        translations: Mapping[str, str] | None = None,
        locale: str | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            translations: Starting dictionary
            locale: Locale code used for the default save path
            settings: Application layout, defaults read from the environment

        """
        self.translations: dict[str, str] = dict(translations or {})
        self.locale = locale
        self.settings = settings or Settings()

    # Constructors
    @classmethod
    def make(cls, translations: Mapping[str, str] | None = None, settings: Settings | None = None) -> "LingoBuilder":
        """Create a builder from a dictionary."""
        return cls(translations, settings=settings)

    @classmethod
    def for_locale(cls, locale: str, settings: Settings | None = None) -> "LingoBuilder":
        """Create a builder from ``<lang_dir>/<locale>.json``."""
        return cls(settings=settings).set_locale(locale)

    @classmethod
    def from_file(cls, path: str | Path, settings: Settings | None = None) -> "LingoBuilder":
        """Create a builder from a JSON file.

        Relative paths are looked up in the lang directory. A file that cannot
        be loaded gives an empty builder.
        """
        builder = cls(settings=settings)
        file_path = Path(path)
        if not file_path.is_absolute():
            file_path = builder.settings.lang_dir / file_path

        loaded = dictionary.load(file_path)
        if loaded is not None:
            builder.translations = loaded.translations
        return builder

    def _locale_file(self) -> Path | None:
        if self.locale is None:
            return None
        return self.settings.lang_dir / f"{self.locale}.json"

    def set_locale(self, locale: str) -> "LingoBuilder":
        """Set the locale and load its file if it exists.

        An existing file that cannot be loaded empties the builder.
        """
        self.locale = locale
        file_path = self._locale_file()
        if file_path.is_file():
            loaded = dictionary.load(file_path)
            self.translations = loaded.translations if loaded is not None else {}
        return self

    # Transformations
    def remove_duplicates(self) -> "LingoBuilder":
        """Re-read the locale file, keeping the last of any repeated key.

        Does nothing without a locale or when the file is missing.
        """
        file_path = self._locale_file()
        if file_path is not None and file_path.is_file():
            self.translations = dictionary.remove_duplicates(file_path.read_text(encoding="utf-8"))
        return self

    def sort_keys(self, ascending: bool = True) -> "LingoBuilder":
        """Sort keys, A-Z by default."""
        self.translations = dictionary.sort_keys(self.translations, ascending)
        return self

    def clean(self) -> "LingoBuilder":
        """Remove empty values and sort keys."""
        self.translations = dictionary.clean(self.translations)
        return self

    def add_missing(self, keys: Iterable[str]) -> "LingoBuilder":
        """Add keys not yet present, with the key as value."""
        self.translations = reconciler.add_missing(self.translations, keys)
        return self

    def remove_unused(self, used_keys: Iterable[str]) -> "LingoBuilder":
        """Keep only the given keys."""
        self.translations = reconciler.remove_unused(self.translations, used_keys)
        return self

    def _scan(self, scan_path: str | Path | None) -> list[str]:
        path = scan_path if scan_path is not None else self.settings.default_scan_path
        keys = list(dict.fromkeys(extractor.scan(path, self.settings.extensions, self.settings.root)))
        logger.debug("Found %d keys in %s", len(keys), path)
        return keys

    def sync_with(self, scan_path: str | Path | None = None) -> "LingoBuilder":
        """Scan source files, then add missing and remove unused keys."""
        used_keys = self._scan(scan_path)
        return self.add_missing(used_keys).remove_unused(used_keys)

    def scan_and_add(self, scan_path: str | Path | None = None) -> "LingoBuilder":
        """Scan source files and add missing keys."""
        return self.add_missing(self._scan(scan_path))

    def scan_and_remove(self, scan_path: str | Path | None = None) -> "LingoBuilder":
        """Scan source files and remove unused keys."""
        return self.remove_unused(self._scan(scan_path))

    def remove_empty(self) -> "LingoBuilder":
        """Remove empty and null values."""
        self.translations = dictionary.remove_empty(self.translations)
        return self

    def only_untranslated(self) -> "LingoBuilder":
        """Keep only untranslated entries."""
        self.translations = dictionary.untranslated(self.translations)
        return self

    def only_translated(self) -> "LingoBuilder":
        """Keep only translated entries."""
        self.translations = dictionary.translated(self.translations)
        return self

    def tap(self, callback: Callable[[dict[str, str]], Any]) -> "LingoBuilder":
        """Pass a copy of the translations to a callback without changing them."""
        callback(dict(self.translations))
        return self

    def transform(self, callback: Callable[[dict[str, str]], Mapping[str, str]]) -> "LingoBuilder":
        """Replace the translations with the callback's result."""
        self.translations = dict(callback(dict(self.translations)))
        return self

    def merge(self, translations: Mapping[str, str]) -> "LingoBuilder":
        """Merge another dictionary, its values win."""
        self.translations = dictionary.merge(self.translations, translations)
        return self

    # Output
    def save(self, path: str | Path | None = None, sort: bool = True) -> bool:
        """Save the translations as JSON.

        Args:
            path: Destination, defaults to the locale file
            sort: Sort keys before writing

        Returns:
            True if the file was written

        Raises:
            ValueError: If no path is given and no locale is set

        """
        file_path = Path(path) if path is not None else self._locale_file()
        if file_path is None:
            msg = "No file path provided. Either pass a path or use set_locale()."
            raise ValueError(msg)

        return dictionary.save(file_path, self.translations, sort)

    def to_json(self, sort: bool = True) -> str:
        """Serialize to formatted JSON."""
        return dictionary.to_json(self.translations, sort)

    def get(self) -> dict[str, str]:
        """Return the translations."""
        return self.translations

    def to_dict(self) -> dict[str, str]:
        """Return a copy of the translations."""
        return dict(self.translations)

    def stats(self) -> TranslationStats:
        """Translation statistics."""
        return dictionary.stats(self.translations)

    def count(self) -> int:
        """Number of entries."""
        return len(self.translations)

    def is_empty(self) -> bool:
        """Check if there are no entries."""
        return not self.translations

    def is_not_empty(self) -> bool:
        """Check if there is at least one entry."""
        return not self.is_empty()

    def __len__(self) -> int:
        """Return the number of entries."""
        return self.count()

    def __repr__(self) -> str:
        """Return string representation."""
        return f"LingoBuilder(locale={self.locale!r}, entries={self.count()})"


def lingo(translations: Mapping[str, str] | None = None, settings: Settings | None = None) -> LingoBuilder:
    """Shortcut for ``LingoBuilder.make``."""
    return LingoBuilder.make(translations, settings=settings)
