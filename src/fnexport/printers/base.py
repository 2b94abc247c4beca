"""
Printer interface and progress event record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, TextIO


@dataclass(frozen=True)
class Event:
    """A progress or result event reported by a command."""

    type: str
    message: str
    fields: Dict[str, Any] = field(default_factory=dict)


class Printer(ABC):
    """Renders a stream of events to an output sink."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    @abstractmethod
    def print_events(self, events: Iterable[Event]) -> None:
        """Render all events."""
        pass
