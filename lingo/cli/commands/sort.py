"""sort: sort translation file keys and save."""

import argparse

from lingo.cli.output import FAILURE, SUCCESS, Output, load_translation_file
from lingo.config import Settings
from lingo.services import dictionary


def register(subparsers: argparse._SubParsersAction) -> None:
    """Add the sort sub-command."""
    parser = subparsers.add_parser("sort", help="Sort translation file keys alphabetically")
    parser.add_argument("locale", help="Locale code (e.g. id) or path to a JSON file")
    parser.add_argument("--desc", action="store_true", help="Sort in descending order (Z-A)")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, settings: Settings, out: Output) -> int:
    """Execute the sort command."""
    loaded = load_translation_file(args.locale, settings, out)
    if loaded is None:
        return FAILURE

    out.newline()

    ascending = not args.desc
    ordered = dictionary.sort_keys(loaded.translations, ascending)

    if not dictionary.save(loaded.path, ordered, sort=False):
        out.error(f"Could not write {loaded.path}")
        return FAILURE

    direction = "A-Z" if ascending else "Z-A"
    out.success(f"File sorted ({direction}) and saved: {loaded.path}")
    out.newline()
    return SUCCESS
