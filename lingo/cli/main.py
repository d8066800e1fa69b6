"""Command-line entry point.

Usage:
    lingo check id
    lingo sync id --path resources/views --path app --add --remove --dry-run
    lingo stats lang/id.json --detailed
"""

import argparse
import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from lingo import __version__
from lingo.cli.commands import COMMANDS
from lingo.cli.output import Output
from lingo.config import Settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="lingo",
        description="Manage JSON translation files and keep them in sync with source code",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--base-path", help="Application root (default: LINGO_BASE_PATH or .)")
    parser.add_argument("--lang-path", help="Directory of locale JSON files (default: <base-path>/lang)")
    parser.add_argument("--log-level", help="Logging level (default: LINGO_LOG_LEVEL or WARNING)")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    for command in COMMANDS:
        command.register(subparsers)

    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from the environment, overridden by global options."""
    overrides = {
        "base_path": args.base_path,
        "lang_path": args.lang_path,
        "log_level": args.log_level,
    }
    return Settings(**{key: value for key, value in overrides.items() if value is not None})


def configure_logging(level: str) -> None:
    """Send log records to stderr so they stay apart from command output."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("lingo").setLevel(level.upper())


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the CLI and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings(args)
    configure_logging(settings.log_level)
    logger.debug("Running %s with base path %s", args.command, settings.root)

    return args.handler(args, settings, Output(console))


if __name__ == "__main__":
    sys.exit(main())
