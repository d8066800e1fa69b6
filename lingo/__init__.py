"""Manage JSON translation files and keep them in sync with source code."""

from lingo.builder import LingoBuilder, lingo
from lingo.config import Settings

__all__ = ["LingoBuilder", "Settings", "lingo"]

__version__ = "1.0.0"
