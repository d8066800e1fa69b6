"""manage: all-in-one analysis and maintenance of a translation file.

Steps run in a fixed order, each on the result of the previous one:
remove duplicates, sort, scan, detailed statistics.
"""

import argparse
from pathlib import Path

from lingo.cli.commands.check import report_duplicates, report_untranslated
from lingo.cli.commands.stats import show_samples, show_stats
from lingo.cli.commands.sync import collect_keys, show_keys, show_summary
from lingo.cli.output import FAILURE, SUCCESS, Output, load_translation_file
from lingo.config import Settings
from lingo.services import dictionary, reconciler


def register(subparsers: argparse._SubParsersAction) -> None:
    """Add the manage sub-command."""
    parser = subparsers.add_parser("manage", help="Manage and analyze translation files")
    parser.add_argument("locale", help="Locale code (e.g. id) or path to a JSON file")
    parser.add_argument("--check", action="store_true", help="Check for issues (duplicates, untranslated)")
    parser.add_argument("--sort", action="store_true", help="Sort keys alphabetically and save")
    parser.add_argument(
        "--remove-duplicates",
        action="store_true",
        help="Remove duplicate keys from raw JSON and save",
    )
    parser.add_argument("--stats", action="store_true", help="Show detailed translation statistics")
    parser.add_argument("--scan", metavar="DIR", help="Scan directory for missing translation keys")
    parser.add_argument(
        "--add-missing",
        action="store_true",
        help="Add missing keys found with --scan to the translation file",
    )
    parser.add_argument(
        "--remove-unused",
        action="store_true",
        help="Remove keys not found with --scan from the translation file",
    )
    parser.set_defaults(handler=run)


def _save(path: Path, translations: dict[str, str], out: Output, message: str) -> bool:
    if not dictionary.save(path, translations):
        out.error(f"Could not write {path}")
        return False
    out.success(message)
    out.newline()
    return True


def run(args: argparse.Namespace, settings: Settings, out: Output) -> int:
    """Execute the manage command."""
    loaded = load_translation_file(args.locale, settings, out)
    if loaded is None:
        return FAILURE

    out.newline()
    out.info(f"Analyzing: {loaded.path}")
    out.newline()

    translations = loaded.translations
    show_stats(translations, out)

    if args.check:
        report_duplicates(loaded.content, out)
        report_untranslated(translations, out)

    if args.remove_duplicates:
        found_duplicates = dictionary.duplicates(loaded.content)
        if found_duplicates:
            translations = dictionary.remove_duplicates(loaded.content)
            message = f"Removed {len(found_duplicates)} duplicate key(s) and saved: {loaded.path}"
            if not _save(loaded.path, translations, out, message):
                return FAILURE
        else:
            out.success("No duplicate keys to remove")
            out.newline()

    if args.sort:
        translations = dictionary.sort_keys(translations)
        if not _save(loaded.path, translations, out, f"File sorted and saved: {loaded.path}"):
            return FAILURE

    if args.scan:
        out.info(f"Scanning: {args.scan}")
        out.newline()
        found = collect_keys([args.scan], settings.extensions, settings, out)
        report = reconciler.reconcile(translations, found)
        show_summary(report, len(translations), out)

        if report.missing:
            show_keys("Missing translation keys:", report.missing, "yellow", out)
        if report.unused:
            show_keys("Unused translation keys (not in source):", report.unused, "cyan", out)

        changed = False
        if args.add_missing and report.missing:
            translations = reconciler.add_missing(translations, report.found)
            changed = True
            out.success(f"Added {len(report.missing)} missing key(s)")
        if args.remove_unused and report.unused:
            if report.found:
                translations = reconciler.remove_unused(translations, report.found)
                changed = True
                out.success(f"Removed {len(report.unused)} unused key(s)")
            else:
                out.warn("No keys found in source, refusing to remove every key")

        if changed and not _save(loaded.path, translations, out, f"File saved: {loaded.path}"):
            return FAILURE

    if args.stats:
        show_stats(translations, out)
        show_samples(translations, out)

    return SUCCESS
