"""
Export command - generate a CI pipeline manifest.

Examples:
    fnexport export resources --workflow tekton
    fnexport export . -w github-actions --fn-path functions -o .github/workflows/kpt.yaml
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from fnexport.export.application.exporter import PipelineExporter
from fnexport.export.orchestrators import OrchestratorRegistry
from fnexport.shared.domain.exceptions import FnExportError, ValidationError
from fnexport.shared.infrastructure.config import settings

console = Console(stderr=True)


def to_workspace_relative(path: str, workspace: Optional[Path] = None) -> str:
    """
    Make an absolute path relative to the workspace (current directory).

    Raises:
        ValidationError: If an absolute path lies outside the workspace
    """
    if not Path(path).is_absolute():
        return path

    workspace = (workspace or Path.cwd()).resolve()
    try:
        return Path(path).resolve().relative_to(workspace).as_posix()
    except ValueError:
        raise ValidationError(f"Path is outside the workspace {workspace}: {path}")


def export_command(
    dir: str = typer.Argument(..., help="Directory of configuration, relative to the workspace root"),
    workflow: str = typer.Option(
        settings.default_orchestrator,
        "--workflow",
        "-w",
        help="CI engine: " + ", ".join(o.value for o in OrchestratorRegistry.available()),
    ),
    fn_paths: Optional[List[str]] = typer.Option(
        None, "--fn-path", help="Extra function-search path (repeatable, order kept)"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write manifest to file instead of stdout"),
    image: Optional[str] = typer.Option(None, "--image", help="Override the function runner image"),
) -> None:
    """
    Export a CI pipeline that runs functions against DIR.
    """
    try:
        exporter = PipelineExporter(workflow)
        config = exporter.build_config(
            dir=to_workspace_relative(dir),
            fn_paths=[to_workspace_relative(p) for p in fn_paths or []],
            image=image,
        )

        if output:
            written = exporter.export_to_file(config, output)
            console.print(f"[green]Wrote {exporter.orchestrator.value} pipeline to[/green] {written}")
        else:
            exporter.export_to_stream(config, sys.stdout)
    except ValidationError as e:
        console.print(f"[red]Validation Error:[/red] {e}")
        raise typer.Exit(1)
    except FnExportError as e:
        console.print(f"[red]Export failed:[/red] {e}")
        raise typer.Exit(1)
