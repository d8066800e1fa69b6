"""check: report duplicate keys and untranslated entries."""

import argparse
from collections.abc import Mapping

from lingo.cli.output import FAILURE, SUCCESS, Output, load_translation_file
from lingo.config import Settings
from lingo.constants import CHECK_SAMPLE_SIZE
from lingo.services import dictionary


def register(subparsers: argparse._SubParsersAction) -> None:
    """Add the check sub-command."""
    parser = subparsers.add_parser(
        "check",
        help="Check translation file for duplicates and untranslated items",
    )
    parser.add_argument(
        "locale",
        nargs="?",
        help="Locale code (e.g. id) or path to a JSON file, defaults to the configured locale",
    )
    parser.set_defaults(handler=run)


def report_duplicates(raw_text: str, out: Output) -> bool:
    """Print duplicate keys found in raw JSON. Returns True if any."""
    found = dictionary.duplicates(raw_text)

    if not found:
        out.success("No duplicate keys found")
        out.newline()
        return False

    out.error("Duplicate keys found:")
    out.bullets([f"{key} (appears {count} times)" for key, count in found.items()], style="red")
    out.tip("Tip: Use `lingo clean` to fix issues")
    out.newline()
    return True


def report_untranslated(translations: Mapping[str, str], out: Output) -> bool:
    """Print untranslated entries. Returns True if any."""
    pending = dictionary.untranslated(translations)

    if not pending:
        out.success("All items are translated")
        out.newline()
        return False

    out.warn(f"{len(pending)} untranslated items (key = value):")
    out.bullets(pending, limit=CHECK_SAMPLE_SIZE)
    out.newline()
    return True


def run(args: argparse.Namespace, settings: Settings, out: Output) -> int:
    """Execute the check command."""
    loaded = load_translation_file(args.locale or settings.locale, settings, out)
    if loaded is None:
        return FAILURE

    out.newline()
    out.info(f"Checking: {loaded.path}")
    out.newline()

    has_duplicates = report_duplicates(loaded.content, out)
    has_untranslated = report_untranslated(loaded.translations, out)

    if not has_duplicates and not has_untranslated:
        out.success("No issues found!")
        out.newline()

    # Informational only, issues do not fail the command
    return SUCCESS
