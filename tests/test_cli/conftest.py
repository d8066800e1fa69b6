"""Pytest configuration for CLI tests."""

import io
import json
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from lingo.cli.main import main


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    """A temporary application with lang/ and resources/views/."""
    (tmp_path / "lang").mkdir()
    (tmp_path / "resources" / "views").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def write_json(app_root: Path) -> Callable[..., Path]:
    """Write a translation file, from a dict or raw text."""

    def _write(translations: dict[str, str] | str, name: str = "id.json") -> Path:
        file_path = app_root / "lang" / name
        content = translations if isinstance(translations, str) else json.dumps(translations, indent=4)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def run_cli(app_root: Path) -> Callable[..., tuple[int, str]]:
    """Run the CLI against the temporary application and capture output."""

    def _run(*args: str) -> tuple[int, str]:
        buffer = io.StringIO()
        console = Console(file=buffer, width=200, force_terminal=False, color_system=None)
        code = main(["--base-path", str(app_root), *args], console=console)
        return code, buffer.getvalue()

    return _run
