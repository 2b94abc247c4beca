"""
Printers for command progress and results.

get_printer() picks a renderer by name; unknown names fall back to the
events printer instead of failing.
"""

from typing import Final, TextIO

from fnexport.shared.infrastructure.logging import get_logger

from .base import Event, Printer
from .events import EventsPrinter
from .json_printer import JSONPrinter
from .table import TablePrinter

logger = get_logger(__name__)

EVENTS_PRINTER: Final[str] = "events"
TABLE_PRINTER: Final[str] = "table"
JSON_PRINTER: Final[str] = "json"

_PRINTERS: Final[dict[str, type[Printer]]] = {
    EVENTS_PRINTER: EventsPrinter,
    TABLE_PRINTER: TablePrinter,
    JSON_PRINTER: JSONPrinter,
}


def get_printer(printer_type: str, stream: TextIO) -> Printer:
    """Return the printer for printer_type, or the default printer."""
    printer_cls = _PRINTERS.get((printer_type or "").lower().strip())
    if printer_cls is None:
        logger.debug("printer_fallback", requested=printer_type, used=default_printer())
        printer_cls = _PRINTERS[default_printer()]
    return printer_cls(stream)


def supported_printers() -> list[str]:
    return [EVENTS_PRINTER, TABLE_PRINTER, JSON_PRINTER]


def default_printer() -> str:
    return EVENTS_PRINTER


__all__ = [
    "Event",
    "Printer",
    "EventsPrinter",
    "TablePrinter",
    "JSONPrinter",
    "get_printer",
    "supported_printers",
    "default_printer",
    "EVENTS_PRINTER",
    "TABLE_PRINTER",
    "JSON_PRINTER",
]
