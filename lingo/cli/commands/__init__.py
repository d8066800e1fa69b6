"""CLI sub-commands.

Each module exposes ``register(subparsers)`` and ``run(args, settings, out)``.
"""

from lingo.cli.commands import check, clean, manage, sort, stats, sync

COMMANDS = (check, clean, sort, stats, sync, manage)

__all__ = ["COMMANDS"]
