"""clean: remove duplicates and empty values, sort keys and save."""

import argparse

from lingo.cli.output import FAILURE, SUCCESS, Output, load_translation_file
from lingo.config import Settings
from lingo.services import dictionary


def register(subparsers: argparse._SubParsersAction) -> None:
    """Add the clean sub-command."""
    parser = subparsers.add_parser(
        "clean",
        help="Clean translation file (remove duplicates, empty values, and sort keys)",
    )
    parser.add_argument(
        "locale",
        nargs="?",
        help="Locale code (e.g. id) or path to a JSON file, defaults to the configured locale",
    )
    parser.add_argument(
        "--keep-empty",
        action="store_true",
        help="Keep empty values instead of removing them",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, settings: Settings, out: Output) -> int:
    """Execute the clean command."""
    loaded = load_translation_file(args.locale or settings.locale, settings, out)
    if loaded is None:
        return FAILURE

    out.newline()
    out.info(f"Cleaning: {loaded.path}")
    out.newline()

    original_count = len(loaded)

    # Duplicates are only visible in the raw content
    duplicate_keys = dictionary.duplicates(loaded.content)
    translations = dictionary.remove_duplicates(loaded.content)

    empty_count = 0
    if not args.keep_empty:
        before = len(translations)
        translations = {key: value for key, value in translations.items() if value != ""}
        empty_count = before - len(translations)

    translations = dictionary.sort_keys(translations)

    if not dictionary.save(loaded.path, translations, sort=False):
        out.error(f"Could not write {loaded.path}")
        return FAILURE

    out.details(
        [
            ("Original keys", str(original_count), None),
            ("Duplicates removed", str(len(duplicate_keys)), "yellow"),
            ("Empty values removed", str(empty_count), "yellow"),
            ("Final keys", str(len(translations)), "green"),
        ]
    )
    out.newline()
    out.success(f"File cleaned and saved: {loaded.path}")
    out.newline()
    return SUCCESS
