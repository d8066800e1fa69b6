"""Operations on translation dictionaries and their JSON files.

Every operation returns a new dictionary; inputs are left untouched.
"""

import json
import logging
import re
from collections import Counter
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from lingo.constants import JSON_INDENT
from lingo.models.stats import TranslationStats
from lingo.models.translation_file import TranslationFile

logger = logging.getLogger(__name__)

# Lexical: an escaped quote followed by a colon inside a string can skew counts.
_KEY_PATTERN = re.compile(r'"([^"]+)"\s*:')
_DIGITS = re.compile(r"(\d+)")


def _natural_key(text: str) -> list[int | str]:
    # re.split with a capture group alternates text and digit chunks
    return [int(chunk) if index % 2 else chunk.casefold() for index, chunk in enumerate(_DIGITS.split(text))]


def sort_keys(dictionary: Mapping[str, str], ascending: bool = True) -> dict[str, str]:
    """Sort by key in case-insensitive natural order.

    ``item2`` sorts before ``item10``.

    Args:
        dictionary: Translations to sort
        ascending: A-Z if true, Z-A otherwise

    Returns:
        Sorted copy

    """
    # raw key breaks ties so descending is exactly ascending reversed
    ordered = sorted(dictionary, key=lambda key: (_natural_key(key), key), reverse=not ascending)
    return {key: dictionary[key] for key in ordered}


def untranslated(dictionary: Mapping[str, str]) -> dict[str, str]:
    """Entries whose value equals the key."""
    return {key: value for key, value in dictionary.items() if key == value}


def has_untranslated(dictionary: Mapping[str, str]) -> bool:
    """Check if any entry is still untranslated."""
    return bool(untranslated(dictionary))


def translated(dictionary: Mapping[str, str]) -> dict[str, str]:
    """Entries whose value differs from the key."""
    return {key: value for key, value in dictionary.items() if key != value}


def stats(dictionary: Mapping[str, str]) -> TranslationStats:
    """Count translated and untranslated entries.

    The percentage is rounded half up to two decimals and is 0 for an empty
    dictionary.
    """
    total = len(dictionary)
    untranslated_count = len(untranslated(dictionary))
    translated_count = total - untranslated_count
    percentage = 0.0
    if total > 0:
        exact = Decimal(translated_count * 100) / Decimal(total)
        percentage = float(exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

    return TranslationStats(
        total=total,
        translated=translated_count,
        untranslated=untranslated_count,
        percentage=percentage,
    )


def remove_empty(dictionary: Mapping[str, str | None]) -> dict[str, str]:
    """Drop entries with an empty or null value, keeping order."""
    return {key: value for key, value in dictionary.items() if value is not None and value != ""}


def clean(dictionary: Mapping[str, str]) -> dict[str, str]:
    """Drop empty values and sort keys ascending."""
    return sort_keys({key: value for key, value in dictionary.items() if value != ""})


def merge(dictionary: Mapping[str, str], other: Mapping[str, str]) -> dict[str, str]:
    """Merge two dictionaries, values from ``other`` win."""
    return {**dictionary, **other}


def duplicates(raw_text: str) -> dict[str, int]:
    """Find keys that occur more than once in raw JSON text.

    Parsed mappings cannot hold duplicate keys, so this works on the raw
    file content with a lexical ``"key":`` match rather than a parser. Keys
    or values containing an escaped quote right before a colon can be
    miscounted.

    Args:
        raw_text: Unparsed JSON file content

    Returns:
        Duplicate keys mapped to their occurrence count

    """
    counts = Counter(_KEY_PATTERN.findall(raw_text))
    return {key: count for key, count in counts.items() if count > 1}


def has_duplicates(raw_text: str) -> bool:
    """Check if raw JSON text repeats any key."""
    return bool(duplicates(raw_text))


def remove_duplicates(raw_text: str) -> dict[str, str]:
    """Parse raw JSON text, keeping the last occurrence of a repeated key.

    Returns an empty dictionary when the text is not a JSON object.
    """
    try:
        parsed = json.loads(raw_text)
    except json.JSONDecodeError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def to_json(dictionary: Mapping[str, str], sort: bool = True) -> str:
    """Serialize to indented JSON with non-ASCII characters left as is."""
    if sort:
        dictionary = sort_keys(dictionary)
    return json.dumps(dict(dictionary), indent=JSON_INDENT, ensure_ascii=False)


def load(path: str | Path) -> TranslationFile | None:
    """Read and parse a translation file.

    Returns:
        The loaded file, or None if it is missing, not valid JSON, or not an
        object of string values

    """
    file_path = Path(path)
    if not file_path.is_file():
        logger.debug("Translation file not found: %s", file_path)
        return None

    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.warning("Could not read translation file %s", file_path)
        return None

    try:
        translations = json.loads(content)
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in %s: %s", file_path, e)
        return None

    if not isinstance(translations, dict) or not all(isinstance(v, str) for v in translations.values()):
        logger.warning("%s is not an object of string values", file_path)
        return None

    return TranslationFile(path=file_path, content=content, translations=translations)


def save(path: str | Path, dictionary: Mapping[str, str], sort: bool = True) -> bool:
    """Write a dictionary as JSON.

    Args:
        path: Destination file
        dictionary: Translations to write
        sort: Sort keys before writing

    Returns:
        True if the file was written

    """
    file_path = Path(path)
    try:
        # encode before opening so an unencodable key never truncates the file
        data = (to_json(dictionary, sort) + "\n").encode("utf-8")
    except UnicodeEncodeError:
        logger.exception("Cannot encode translations for %s", file_path)
        return False

    try:
        file_path.write_bytes(data)
    except OSError:
        logger.exception("Error saving translations to %s", file_path)
        return False

    logger.debug("Saved %d translations to %s", len(dictionary), file_path)
    return True
