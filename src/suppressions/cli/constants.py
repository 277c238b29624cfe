# suppressions/cli/constants.py
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from suppressions.cli.common import get_options
from suppressions.core.enums import ExportFormat, Namespace, PmdRuleset
from suppressions.core.errors import UnknownConstantError
from suppressions.core.export import export_registry, render_table
from suppressions.core.loader import load_registry
from suppressions.core.logging import logger
from suppressions.core.registry import ConstantRegistry

console = Console()
err_console = Console(stderr=True)

constants_app = typer.Typer(help="Browse, look up and export suppression tokens.")

FILE_SUFFIXES = {
    ExportFormat.YAML: "yaml",
    ExportFormat.JSON: "json",
    ExportFormat.MARKDOWN: "md",
}


def _registry(ctx: typer.Context, namespace: Optional[Namespace]) -> ConstantRegistry:
    if namespace is None:
        namespace = get_options(ctx).settings.default_namespace
    return load_registry(namespace)


@constants_app.command("list")
def list_constants(
    ctx: typer.Context,
    namespace: Optional[Namespace] = typer.Option(None, "--namespace", "-n", help="pmd or compiler (default: from config)"),
    ruleset: Optional[PmdRuleset] = typer.Option(None, "--ruleset", "-r", help="Only PMD rules from this ruleset"),
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Case-insensitive filter on name, value and description"),
    plain: bool = typer.Option(False, "--plain", help="One NAME=value line per constant"),
):
    """List constants of a namespace."""
    registry = _registry(ctx, namespace)
    selected = registry.by_ruleset(ruleset) if ruleset else list(registry.constants)
    if search:
        matches = {c.name for c in registry.search(search)}
        selected = [c for c in selected if c.name in matches]
    logger.debug(f"Listing {len(selected)} of {len(registry)} {registry.namespace.value} constants")

    if plain:
        for const in selected:
            typer.echo(f"{const.name}={const.value}")
        return
    if not selected:
        console.print("[yellow]No constants match[/yellow]")
        return
    console.print(render_table(registry, constants=selected))


@constants_app.command("show")
def show_constant(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Constant name, e.g. GOD_CLASS"),
    namespace: Optional[Namespace] = typer.Option(None, "--namespace", "-n", help="pmd or compiler (default: from config)"),
    format: str = typer.Option("plain", "--format", "-f", help="Output format: plain|json|md"),
):
    """Show all metadata for a constant."""
    registry = _registry(ctx, namespace)
    try:
        const = registry.info(name)
    except UnknownConstantError as exc:
        err_console.print(f"[red]Constant not found:[/red] {exc}")
        raise typer.Exit(1)

    if format == "json":
        data = const.model_dump(mode="json")
        data["documentation_url"] = const.documentation_url
        typer.echo(json.dumps(data, indent=2))
    elif format == "md":
        typer.echo(
            f"## {const.name}\n\n"
            f"{const.description}\n\n"
            f"- **Value:** `{const.value}`\n"
            f"- **Namespace:** {const.namespace.value}\n"
            f"- **Ruleset:** {const.ruleset.value if const.ruleset else '-'}\n"
            f"- **Since:** {const.since or '-'}\n"
            f"- **Docs:** {const.documentation_url or '-'}"
        )
    elif format == "plain":
        typer.echo(const.value)
    else:
        raise typer.BadParameter(f"Unknown format {format!r}; choose plain, json or md", param_hint="--format")


@constants_app.command("value")
def find_by_value(
    ctx: typer.Context,
    token: str = typer.Argument(..., help="Literal token, e.g. PMD.GodClass"),
    namespace: Optional[Namespace] = typer.Option(None, "--namespace", "-n", help="pmd or compiler (default: from config)"),
):
    """Find the symbolic name for a literal suppression token."""
    registry = _registry(ctx, namespace)
    try:
        const = registry.find_by_value(token)
    except UnknownConstantError as exc:
        err_console.print(f"[red]Token not found:[/red] {exc}")
        raise typer.Exit(1)
    typer.echo(const.name)


@constants_app.command("export")
def export_constants(
    ctx: typer.Context,
    namespace: Optional[Namespace] = typer.Option(None, "--namespace", "-n", help="pmd or compiler (default: from config)"),
    format: Optional[ExportFormat] = typer.Option(None, "--format", "-f", help="yaml, json or md (default: from config)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Target file (default: <export_dir>/<namespace>.<ext>)"),
):
    """Write a reference document for a namespace."""
    settings = get_options(ctx).settings
    registry = _registry(ctx, namespace)
    fmt = format or settings.default_format
    if output is None:
        output = settings.export_dir / f"{registry.namespace.value}.{FILE_SUFFIXES[fmt]}"
    path = export_registry(registry, fmt, output)
    console.print(f"[bold green]✓ Wrote {len(registry)} constants to {path}[/bold green]")
