"""
Source command - materialize resources from stdin into a package.

Examples:
    kustomize build overlays/prod | fnexport source prod
    cat all.yaml | fnexport source out --pattern "%k_%n.yaml" --output-format table
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console

from fnexport.printers import get_printer, supported_printers
from fnexport.shared.domain.exceptions import FnExportError
from fnexport.shared.infrastructure.config import settings
from fnexport.source import materialize

console = Console(stderr=True)


def source_command(
    dir: Path = typer.Argument(..., help="Package directory to write"),
    pattern: str = typer.Option(
        settings.default_filename_pattern,
        "--pattern",
        help="Filename pattern: %k kind, %n name, %s namespace",
    ),
    output_format: str = typer.Option(
        settings.default_printer,
        "--output-format",
        "-f",
        help="Progress output: " + ", ".join(supported_printers()),
    ),
) -> None:
    """
    Read resources from stdin and write them into DIR.
    """
    try:
        result = materialize(dir, sys.stdin, pattern=pattern)
    except FnExportError as e:
        console.print(f"[red]Source failed:[/red] {e}")
        raise typer.Exit(1)

    get_printer(output_format, sys.stdout).print_events(result.events())
