"""
Documentation and export helpers for constant registries.

Exports:
    - registry_summary: Counts per ruleset plus totals.
    - render_table: Rich table of a registry (optionally filtered).
    - print_registry: Pretty-print a registry to the terminal.
    - export_to_yaml / export_to_json / export_to_markdown: Write reference files.
    - export_registry: Dispatch on ExportFormat.
"""

import json
from itertools import groupby
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import yaml
from rich.console import Console
from rich.table import Table

from .enums import ExportFormat, Namespace, PmdRuleset
from .logging import logger
from .models import ConstantInfo
from .registry import ConstantRegistry
from .version import __date__, __version__

__all__ = [
    "registry_summary",
    "render_table",
    "print_registry",
    "registry_payload",
    "export_to_yaml",
    "export_to_json",
    "export_to_markdown",
    "export_registry",
]

UNGROUPED = "general"


def _group_key(const: ConstantInfo) -> str:
    return const.ruleset.value if const.ruleset else UNGROUPED


def registry_summary(registry: ConstantRegistry) -> Dict[str, Any]:
    """Return totals and per-ruleset counts for a registry."""
    per_group: Dict[str, int] = {}
    for const in registry.constants:
        key = _group_key(const)
        per_group[key] = per_group.get(key, 0) + 1
    return {
        "namespace": registry.namespace.value,
        "total": len(registry),
        "unique_values": len({c.value for c in registry.constants}),
        "aliases": len(registry.aliases),
        "groups": dict(sorted(per_group.items())),
    }


def render_table(
    registry: ConstantRegistry,
    ruleset: Optional[PmdRuleset] = None,
    constants: Optional[Iterable[ConstantInfo]] = None,
) -> Table:
    """Build a rich table of constants, filtered by ruleset or an explicit selection."""
    if constants is None:
        constants = registry.by_ruleset(ruleset) if ruleset else registry.constants
    table = Table(title=registry.title or registry.namespace.value)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", style="green", no_wrap=True)
    if registry.namespace is Namespace.PMD:
        table.add_column("Ruleset", style="dim")
    table.add_column("Description")
    for const in constants:
        row = [const.name, const.value]
        if registry.namespace is Namespace.PMD:
            row.append(_group_key(const))
        row.append(const.description)
        table.add_row(*row)
    return table


def print_registry(
    registry: ConstantRegistry,
    ruleset: Optional[PmdRuleset] = None,
    console: Optional[Console] = None,
) -> None:
    (console or Console()).print(render_table(registry, ruleset=ruleset))


def registry_payload(registry: ConstantRegistry) -> Dict[str, Any]:
    """Plain-data representation shared by the YAML and JSON exports."""
    data: Dict[str, Any] = {
        "version": __version__,
        "date": __date__,
        "namespace": registry.namespace.value,
        "tool": registry.tool,
        "reference": registry.reference,
        "constants": {},
    }
    for const in registry.constants:
        entry: Dict[str, Any] = {
            "value": const.value,
            "description": const.description,
        }
        if const.ruleset:
            entry["ruleset"] = const.ruleset.value
        if const.since:
            entry["since"] = const.since
        data["constants"][const.name] = entry
    if registry.aliases:
        data["aliases"] = dict(registry.aliases)
    return data


def export_to_yaml(registry: ConstantRegistry, filename: Union[str, Path]) -> Path:
    """Export all constants to YAML format for external tools."""
    path = Path(filename)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(registry_payload(registry), f, default_flow_style=False, sort_keys=False)
    return path


def export_to_json(registry: ConstantRegistry, filename: Union[str, Path]) -> Path:
    path = Path(filename)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(registry_payload(registry), f, indent=2)
        f.write("\n")
    return path


def _md_cell(text: str) -> str:
    return text.replace("|", r"\|").replace("\n", " ")


def export_to_markdown(registry: ConstantRegistry, filename: Union[str, Path]) -> Path:
    """Generate a Markdown reference of the registry, one table per ruleset."""
    lines = [f"# {registry.title or registry.namespace.value}", ""]
    if registry.reference:
        lines += [f"Reference: <{registry.reference}>", ""]
    lines += [f"{len(registry)} constants.", ""]

    constants = sorted(registry.constants, key=_group_key)
    for group, members in groupby(constants, key=_group_key):
        members = list(members)
        if group != UNGROUPED:
            lines += [f"## {group}", "", f"<{PmdRuleset(group).documentation_url}>", ""]
        elif registry.namespace is Namespace.PMD:
            lines += ["## general", ""]
        lines += [
            "| Name | Value | Since | Description |",
            "|------|-------|-------|-------------|",
        ]
        for const in members:
            lines.append(
                f"| `{const.name}` | `{const.value}` | {const.since or ''} | {_md_cell(const.description)} |"
            )
        lines.append("")

    if registry.aliases:
        lines += ["## Deprecated aliases", ""]
        for alias, target in registry.aliases.items():
            lines.append(f"- `{alias}` → `{target}`")
        lines.append("")

    path = Path(filename)
    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))
    return path


_EXPORTERS = {
    ExportFormat.YAML: export_to_yaml,
    ExportFormat.JSON: export_to_json,
    ExportFormat.MARKDOWN: export_to_markdown,
}


def export_registry(
    registry: ConstantRegistry,
    fmt: Union[ExportFormat, str],
    filename: Union[str, Path],
) -> Path:
    fmt = ExportFormat(fmt)
    path = Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    _EXPORTERS[fmt](registry, path)
    logger.info(f"Exported {len(registry)} {registry.namespace.value} constants to {path}")
    return path
