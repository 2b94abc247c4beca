"""
fn-export CLI
Main entry point for the command-line interface

Usage:
    fnexport export <dir> --workflow tekton   # Print a Tekton pipeline
    fnexport source <dir>                     # Materialize stdin into a package
    fnexport version                          # Show version
"""

import sys

import typer
from rich.console import Console
from rich.panel import Panel

from fnexport import __version__
from fnexport.cli.commands.export import export_command
from fnexport.cli.commands.source import source_command
from fnexport.shared.infrastructure.config import settings
from fnexport.shared.infrastructure.logging import configure_logging

app = typer.Typer(
    name="fnexport",
    help="fn-export - Generate CI pipelines that run containerized functions",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
) -> None:
    """Configure logging before any command runs."""
    config = settings.model_copy(update={"log_level": "DEBUG"}) if verbose else settings
    configure_logging(stream=sys.stderr, config=config)


# Register commands
app.command("export", help="Export a CI pipeline manifest")(export_command)
app.command("source", help="Materialize resources from stdin into a package")(source_command)


@app.command()
def version():
    """Show fn-export version information"""
    console.print(Panel.fit(
        "[bold cyan]fn-export[/bold cyan]\n"
        f"[dim]Version:[/dim] {__version__}\n",
        title="About fn-export",
        border_style="cyan"
    ))


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
