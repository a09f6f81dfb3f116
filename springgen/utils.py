"""Shared console helpers for springgen.

Provides the Rich console used for all user-facing output together with a
few formatting helpers (status lines, key/value summaries and tree
listings).
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from springgen.filetree import EntryKind, TreeEntry, content_type_of

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_entries_table(entries: list[TreeEntry], title: str = "Files") -> None:
    """Print a flattened tree listing, indented by depth.

    Folders are shown in bold with a trailing ``/``; files get their
    content type in a second column.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Path", no_wrap=True)
    table.add_column("Type", style="dim")

    for entry in entries:
        depth = entry.path.count("/")
        name = entry.path.rsplit("/", 1)[-1]
        indent = "  " * depth
        if entry.kind is EntryKind.FOLDER:
            table.add_row(f"{indent}[bold]{name}/[/bold]", "folder")
        else:
            table.add_row(f"{indent}{name}", content_type_of(name).value)

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
