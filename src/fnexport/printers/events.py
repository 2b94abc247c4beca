"""Human-readable printer: one line per event."""

from typing import Iterable

from .base import Event, Printer


class EventsPrinter(Printer):
    def print_events(self, events: Iterable[Event]) -> None:
        for event in events:
            details = " ".join(f"{k}={v}" for k, v in event.fields.items())
            line = f"{event.type}: {event.message}"
            if details:
                line += f" ({details})"
            self.stream.write(line + "\n")
