"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {msg}")

    def objects_table(self, objects: Iterable[Any], title: str = "Objects") -> None:
        """
        Render a table of catalog objects.

        Expects objects with .type .schema .name (like objmatch.core.models.CatalogObject)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Type", style="meta", no_wrap=True)
        t.add_column("Schema", style="ok")
        t.add_column("Name")

        for o in objects:
            t.add_row(o.type or "", o.schema or "", o.name or "")

        console.print(t)


out = Out()
