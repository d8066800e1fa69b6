"""Reconciliation of a translation dictionary against keys used in source."""

from collections.abc import Iterable, Mapping

from lingo.models.sync_report import SyncReport


def missing(dictionary: Mapping[str, str], found_keys: Iterable[str]) -> list[str]:
    """Keys referenced in source but absent from the dictionary.

    Args:
        dictionary: Existing translations
        found_keys: Keys found in source files

    Returns:
        Missing keys in the order of ``found_keys``, without repeats

    """
    result: dict[str, None] = {}
    for key in found_keys:
        if key not in dictionary:
            result.setdefault(key, None)
    return list(result)


def has_missing(dictionary: Mapping[str, str], found_keys: Iterable[str]) -> bool:
    """Check if any found key is missing from the dictionary."""
    return bool(missing(dictionary, found_keys))


def add_missing(dictionary: Mapping[str, str], found_keys: Iterable[str]) -> dict[str, str]:
    """Return a copy with every missing key added as its own value.

    A value equal to its key marks the entry as untranslated. Existing
    entries are never overwritten.
    """
    updated = dict(dictionary)
    for key in missing(dictionary, found_keys):
        updated[key] = key
    return updated


def unused(dictionary: Mapping[str, str], found_keys: Iterable[str]) -> list[str]:
    """Keys present in the dictionary but not referenced in source.

    With no found keys at all, every dictionary key is unused.
    """
    used = set(found_keys)
    return [key for key in dictionary if key not in used]


def has_unused(dictionary: Mapping[str, str], found_keys: Iterable[str]) -> bool:
    """Check if the dictionary holds keys not referenced in source."""
    return bool(unused(dictionary, found_keys))


def remove_unused(dictionary: Mapping[str, str], found_keys: Iterable[str]) -> dict[str, str]:
    """Return a copy holding only the entries referenced in source."""
    used = set(found_keys)
    return {key: value for key, value in dictionary.items() if key in used}


def reconcile(dictionary: Mapping[str, str], found_keys: Iterable[str]) -> SyncReport:
    """Compare a dictionary with found keys in one pass."""
    found = list(dict.fromkeys(found_keys))
    return SyncReport(
        found=found,
        missing=missing(dictionary, found),
        unused=unused(dictionary, found),
    )
