"""sync: compare a translation file with keys used in source files."""

import argparse
import logging
from collections.abc import Iterable

from lingo.cli.output import FAILURE, SUCCESS, Output, load_translation_file
from lingo.config import Settings
from lingo.constants import SYNC_SAMPLE_SIZE
from lingo.models.sync_report import SyncReport
from lingo.services import dictionary, extractor, reconciler

logger = logging.getLogger(__name__)


def register(subparsers: argparse._SubParsersAction) -> None:
    """Add the sync sub-command."""
    parser = subparsers.add_parser(
        "sync",
        help="Sync translation file with source files (find missing/unused keys)",
    )
    parser.add_argument(
        "locale",
        nargs="?",
        help="Locale code (e.g. id) or path to a JSON file, defaults to the configured locale",
    )
    parser.add_argument(
        "--path",
        action="append",
        default=[],
        help="File or directory to scan, relative to the application root (repeatable)",
    )
    parser.add_argument(
        "--ext",
        action="append",
        default=[],
        help="File extension to scan in directories (repeatable)",
    )
    parser.add_argument("--add", action="store_true", help="Add missing keys to translation file")
    parser.add_argument("--remove", action="store_true", help="Remove unused keys from translation file")
    parser.add_argument("--dry-run", action="store_true", help="Show what would change without saving")
    parser.set_defaults(handler=run)


def collect_keys(paths: Iterable[str], extensions: Iterable[str], settings: Settings, out: Output) -> list[str]:
    """Scan every path and merge the keys, warning about missing paths."""
    extensions = tuple(extensions)
    found: list[str] = []

    for path in paths:
        if not extractor.resolve_path(path, settings.root).exists():
            out.warn(f"Path not found: {path}")
            continue
        found.extend(extractor.scan(path, extensions, settings.root))

    return list(dict.fromkeys(found))


def show_keys(title: str, keys: list[str], style: str, out: Output) -> None:
    """Print a titled sample of keys."""
    out.warn(title)
    out.bullets(keys, style=style, limit=SYNC_SAMPLE_SIZE)
    out.newline()


def show_summary(report: SyncReport, dictionary_size: int, out: Output) -> None:
    """Print key counts of a reconciliation."""
    out.details(
        [
            ("Keys found in source", str(len(report.found)), None),
            ("Keys in translation file", str(dictionary_size), None),
            ("Missing keys", str(len(report.missing)), "yellow"),
            ("Unused keys", str(len(report.unused)), "cyan"),
        ]
    )
    out.newline()


def run(args: argparse.Namespace, settings: Settings, out: Output) -> int:
    """Execute the sync command."""
    loaded = load_translation_file(args.locale or settings.locale, settings, out)
    if loaded is None:
        return FAILURE

    paths = args.path or [settings.default_scan_path]
    extensions = args.ext or settings.extensions

    out.newline()
    out.info(f"Syncing: {loaded.path}")
    for path in paths:
        out.info(f"Scanning: {path}")
    out.newline()

    found = collect_keys(paths, extensions, settings, out)
    report = reconciler.reconcile(loaded.translations, found)
    logger.debug(
        "Sync of %s: %d found, %d missing, %d unused",
        loaded.path,
        len(found),
        len(report.missing),
        len(report.unused),
    )

    show_summary(report, len(loaded), out)

    if report.in_sync():
        out.success("All translation keys are in sync!")
        out.newline()
        return SUCCESS

    translations = loaded.translations
    changed = False

    if report.missing:
        show_keys("Missing translation keys:", report.missing, "yellow", out)
        if not args.add:
            out.tip("Tip: Use --add to add missing keys")
        elif args.dry_run:
            out.tip(f"[dry-run] Would add {len(report.missing)} key(s)")
        else:
            translations = reconciler.add_missing(translations, report.found)
            changed = True
            out.success(f"Added {len(report.missing)} missing key(s)")
        out.newline()

    if report.unused:
        show_keys("Unused translation keys (not in source):", report.unused, "cyan", out)
        if not args.remove:
            out.tip("Tip: Use --remove to remove unused keys")
        elif not report.found:
            out.warn("No keys found in source, refusing to remove every key")
        elif args.dry_run:
            out.tip(f"[dry-run] Would remove {len(report.unused)} key(s)")
        else:
            translations = reconciler.remove_unused(translations, report.found)
            changed = True
            out.success(f"Removed {len(report.unused)} unused key(s)")
        out.newline()

    if changed:
        if not dictionary.save(loaded.path, translations, sort=True):
            out.error(f"Could not write {loaded.path}")
            return FAILURE
        out.success(f"File saved: {loaded.path}")
        out.newline()

    return SUCCESS
