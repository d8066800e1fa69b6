"""Console output and translation file loading shared by the commands."""

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from lingo.config import Settings
from lingo.models.translation_file import TranslationFile
from lingo.paths import resolve_file_path, truncate
from lingo.services import dictionary

SUCCESS = 0
FAILURE = 1


class Output:
    """Thin wrapper around a rich console with the command message styles.

    Text passed in is escaped, so keys containing ``[`` are printed verbatim.
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Console to print to, stdout by default

        """
        self.console = console or Console()

    def newline(self) -> None:
        """Print an empty line."""
        self.console.print()

    def line(self, text: str, style: str | None = None) -> None:
        """Print plain text, optionally styled."""
        self.console.print(escape(text), style=style)

    def info(self, text: str) -> None:
        """Print an informational message."""
        self.console.print(f"[bold blue]INFO[/bold blue] {escape(text)}")

    def success(self, text: str) -> None:
        """Print a success message."""
        self.console.print(f"[green]✓ {escape(text)}[/green]")

    def warn(self, text: str) -> None:
        """Print a warning."""
        self.console.print(f"[bold yellow]WARN[/bold yellow] {escape(text)}")

    def error(self, text: str) -> None:
        """Print an error."""
        self.console.print(f"[bold red]ERROR[/bold red] {escape(text)}")

    def tip(self, text: str) -> None:
        """Print a dimmed hint."""
        self.console.print(escape(text), style="dim")

    def details(self, rows: Iterable[tuple[str, str, str | None]]) -> None:
        """Print label/value rows as a two column table."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("label")
        table.add_column("value", justify="right")
        for label, value, style in rows:
            table.add_row(escape(label), escape(value), style=style)
        self.console.print(table)

    def bullets(self, items: Iterable[str], style: str = "yellow", limit: int | None = None) -> None:
        """Print a bullet list, truncating long items and the list itself."""
        items = list(items)
        shown = items if limit is None else items[:limit]
        for item in shown:
            self.console.print(f"  [{style}]•[/{style}] {escape(truncate(item))}")
        if limit is not None and len(items) > limit:
            self.tip(f"  ... and {len(items) - limit} more")


def load_translation_file(locale: str, settings: Settings, out: Output) -> TranslationFile | None:
    """Resolve and load a translation file, reporting failures.

    Returns:
        The loaded file, or None after printing an error

    """
    file_path = resolve_file_path(locale, settings)

    if not file_path.is_file():
        out.error(f"File not found: {file_path}")
        out.newline()
        out.tip("Tip: You can specify locale (e.g., id) or full path (e.g., lang/id.json)")
        return None

    loaded = dictionary.load(file_path)
    if loaded is None:
        out.error(f"Invalid JSON file: {file_path}")
        return None

    return loaded
