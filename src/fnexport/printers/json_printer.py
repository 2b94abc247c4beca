"""JSON lines printer."""

import json
from typing import Iterable

from .base import Event, Printer


class JSONPrinter(Printer):
    def print_events(self, events: Iterable[Event]) -> None:
        for event in events:
            record = {"type": event.type, "message": event.message, **event.fields}
            self.stream.write(json.dumps(record, default=str) + "\n")
