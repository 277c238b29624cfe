"""
Common CLI options and utilities shared across all suppressions commands.
"""
import typer
from pathlib import Path
from typing import List, Optional
from dataclasses import dataclass

from suppressions.core.config import Settings

DEFAULT_CONFIG_NAMES = [
    "suppressions.yml",
    "suppressions.yaml",
]


@dataclass
class CommonOptions:
    """Global options stored on the typer context for sub-commands."""
    settings: Settings
    config_path: Optional[Path] = None
    verbose: bool = False


def resolve_config_path(config: Optional[Path], search_dirs: Optional[List[Path]] = None) -> Optional[Path]:
    """
    Resolve configuration file path with smart defaults.

    Args:
        config: Explicit config path from user
        search_dirs: Directories to search (default: ./configs, then the working directory)

    Returns:
        Path to configuration file, or None when no file is present

    Raises:
        typer.BadParameter: If an explicit config file is not found
    """
    if config is not None:
        if not config.exists():
            raise typer.BadParameter(f"Configuration file not found: {config}")
        return config.resolve()

    if search_dirs is None:
        search_dirs = [
            Path.cwd() / "configs",
            Path.cwd(),
        ]

    for search_dir in search_dirs:
        if not search_dir.exists():
            continue
        for name in DEFAULT_CONFIG_NAMES:
            candidate = search_dir / name
            if candidate.exists():
                return candidate.resolve()
    return None


def get_options(ctx: typer.Context) -> CommonOptions:
    """Return the options set up by the main callback (defaults if run standalone)."""
    obj = ctx.find_object(CommonOptions)
    if obj is None:
        obj = CommonOptions(settings=Settings())
    return obj
