"""Translation key extraction from source files.

Recognizes these call shapes, with single or double quoted keys:

- ``__('key')``
- ``@lang('key')``
- ``trans('key')`` (not as part of a longer identifier)
- ``Lang::get('key')``

The key is the first string literal of the call, followed by ``,`` or ``)``.
A literal never crosses a line break and stops at its first closing quote.
"""

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from lingo.constants import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)

_LITERAL = r"""\s*(?:'([^'\n]*)'|"([^"\n]*)")\s*[,)]"""

KEY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"__\(" + _LITERAL),
    re.compile(r"@lang\(" + _LITERAL),
    re.compile(r"\btrans\(" + _LITERAL),
    re.compile(r"Lang::get\(" + _LITERAL),
)


def extract_keys(content: str) -> list[str]:
    """Extract translation keys from a block of text.

    Args:
        content: Source text in any language

    Returns:
        Matched keys, pattern by pattern, duplicates preserved

    """
    keys: list[str] = []
    for pattern in KEY_PATTERNS:
        for match in pattern.finditer(content):
            single, double = match.groups()
            keys.append(single if single is not None else double)
    return keys


def resolve_path(path: str | Path, base_path: str | Path = ".") -> Path:
    """Resolve a scan path against the application root.

    Absolute paths that exist are used as they are. Anything else is placed
    under ``base_path``.
    """
    candidate = Path(path)
    if candidate.is_absolute() and candidate.exists():
        return candidate

    relative = str(path).lstrip("/\\")
    return Path(base_path) / relative


def _matches_extension(filename: str, extensions: Iterable[str]) -> bool:
    return any(filename.endswith(f".{ext.lstrip('.')}") for ext in extensions)


def _read_source(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        logger.warning("Could not read %s, skipping", path)
        return None


def scan_directory(
    directory: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
) -> list[str]:
    """Scan a directory tree for translation keys.

    Args:
        directory: Directory to walk recursively
        extensions: File extensions to read, without the leading dot

    Returns:
        Unique keys in first-seen order, empty if the directory is missing

    """
    root = Path(directory)
    if not root.is_dir():
        return []

    extensions = tuple(extensions)
    found: dict[str, None] = {}
    scanned = 0

    for file_path in sorted(root.rglob("*")):
        if not file_path.is_file() or not _matches_extension(file_path.name, extensions):
            continue

        content = _read_source(file_path)
        if content is None:
            continue

        scanned += 1
        for key in extract_keys(content):
            found.setdefault(key, None)

    logger.debug("Scanned %d files in %s, found %d keys", scanned, root, len(found))
    return list(found)


def scan(
    path: str | Path,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    base_path: str | Path = ".",
) -> list[str]:
    """Scan a file or a directory for translation keys.

    A single file is read regardless of its extension. A path that is neither
    a file nor a directory yields no keys.

    Examples:
        scan("app/Filament")
        scan("app/Http/Controllers/Home.php")

    """
    resolved = resolve_path(path, base_path)

    if resolved.is_file():
        content = _read_source(resolved)
        return extract_keys(content) if content is not None else []

    if resolved.is_dir():
        return scan_directory(resolved, extensions)

    logger.debug("Nothing to scan at %s", resolved)
    return []
