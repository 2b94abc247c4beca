"""Tabular printer using rich."""

from typing import Iterable

from rich.console import Console
from rich.table import Table

from .base import Event, Printer


class TablePrinter(Printer):
    """Collects all events and renders them as a single table."""

    def print_events(self, events: Iterable[Event]) -> None:
        table = Table(box=None)
        table.add_column("Type", style="cyan")
        table.add_column("Message")
        table.add_column("Details", style="dim")

        for event in events:
            details = ", ".join(f"{k}={v}" for k, v in event.fields.items())
            table.add_row(event.type, event.message, details)

        Console(file=self.stream, width=120).print(table)
