"""stats: show translation progress."""

import argparse
from collections.abc import Mapping

from lingo.cli.output import FAILURE, SUCCESS, Output, load_translation_file
from lingo.config import Settings
from lingo.constants import STATS_SAMPLE_SIZE
from lingo.paths import truncate
from lingo.services import dictionary


def register(subparsers: argparse._SubParsersAction) -> None:
    """Add the stats sub-command."""
    parser = subparsers.add_parser("stats", help="Show translation file statistics")
    parser.add_argument("locale", help="Locale code (e.g. id) or path to a JSON file")
    parser.add_argument(
        "--detailed",
        action="store_true",
        help="Show sample translated and untranslated items",
    )
    parser.add_argument("--json", action="store_true", help="Print statistics as JSON")
    parser.set_defaults(handler=run)


def show_stats(translations: Mapping[str, str], out: Output) -> None:
    """Print totals and progress."""
    summary = dictionary.stats(translations)
    out.details(
        [
            ("Total keys", str(summary.total), None),
            ("Translated", str(summary.translated), "green"),
            ("Untranslated", str(summary.untranslated), "yellow"),
            ("Progress", f"{summary.percentage}%", "cyan"),
        ]
    )
    out.newline()


def show_samples(translations: Mapping[str, str], out: Output) -> None:
    """Print a few translated and untranslated entries."""
    done = list(dictionary.translated(translations).items())[:STATS_SAMPLE_SIZE]
    pending = list(dictionary.untranslated(translations))[:STATS_SAMPLE_SIZE]

    if done:
        out.line("Sample translated items:", style="green")
        for key, value in done:
            out.line(f"  {truncate(key, 30)} → {truncate(value, 30)}")
        out.newline()

    if pending:
        out.line("Sample untranslated items:", style="yellow")
        for key in pending:
            out.line(f"  {truncate(key, 50)}", style="yellow")
        out.newline()


def run(args: argparse.Namespace, settings: Settings, out: Output) -> int:
    """Execute the stats command."""
    loaded = load_translation_file(args.locale, settings, out)
    if loaded is None:
        return FAILURE

    if args.json:
        out.console.print_json(dictionary.stats(loaded.translations).model_dump_json())
        return SUCCESS

    out.newline()
    out.info(f"Statistics: {loaded.path}")
    out.newline()

    show_stats(loaded.translations, out)
    if args.detailed:
        show_samples(loaded.translations, out)

    return SUCCESS
