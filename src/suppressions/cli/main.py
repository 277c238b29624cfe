# src/suppressions/cli/main.py
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from suppressions.cli.common import CommonOptions, resolve_config_path
from suppressions.cli.constants import constants_app
from suppressions.core.config import load_settings
from suppressions.core.enums import Namespace
from suppressions.core.errors import ConfigError, SuppressionsError
from suppressions.core.export import registry_summary
from suppressions.core.loader import build_registry, load_document
from suppressions.core.logging import configure_logging, logger, setup_logfile

console = Console()

app = typer.Typer(
    help="suppressions: named @SuppressWarnings tokens for PMD and the Eclipse compiler",
    context_settings={"help_option_names": ["-h", "--help"]}
)

app.add_typer(constants_app, name="constants")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Configuration file path (default: auto-detect)"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Browse and export the named suppression tokens.

    Use 'suppressions COMMAND --help' to see options for specific commands.
    """
    if version:
        from suppressions.core.version import __version__
        typer.echo(f"suppressions version {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    config_path = resolve_config_path(config)
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        console.print(f"[bold red]✗ {exc}[/bold red]")
        raise typer.Exit(1)

    configure_logging("DEBUG" if verbose else settings.log_level)
    if settings.log_file:
        setup_logfile(str(settings.log_file), level="DEBUG" if verbose else settings.log_level)
    if config_path:
        logger.debug(f"Using configuration {config_path}")

    # Store global options in context for sub-commands to access
    ctx.obj = CommonOptions(settings=settings, config_path=config_path, verbose=verbose)


@app.command("check")
def check():
    """Load every namespace and verify the data is complete and collision-free."""
    failed = False
    for namespace in Namespace:
        # Re-read the data files; the cached registries would hide edits made since startup
        try:
            registry = build_registry(load_document(namespace))
        except SuppressionsError as exc:
            console.print(f"[bold red]✗ {namespace.value}:[/bold red] {escape(str(exc))}")
            failed = True
            continue
        summary = registry_summary(registry)
        console.print(
            f"[bold green]✓[/bold green] {namespace.value}: {summary['total']} constants, "
            f"{len(summary['groups'])} groups, {summary['aliases']} aliases"
        )
    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
