"""
Common CLI options and utilities shared across hypercube commands.
"""
import typer
from pathlib import Path
from typing import List, Optional


def resolve_config_path(config: Optional[Path], command_name: str, search_dirs: List[Path] = None) -> Optional[Path]:
    """
    Resolve configuration file path with smart defaults.

    Args:
        config: Explicit config path from user
        command_name: Name of the calling command
        search_dirs: Directories to search when no path is given (default: ./configs)

    Returns:
        Path to configuration file, or None when nothing was given or found

    Raises:
        typer.BadParameter: If an explicit config file does not exist
    """
    if config is not None:
        if config.exists():
            return config.resolve()
        raise typer.BadParameter(f"Configuration file not found: {config}")

    if search_dirs is None:
        search_dirs = [Path.cwd() / "configs"]

    default_names = [
        f"default_{command_name}.yml",
        f"default_{command_name}.yaml",
    ]

    for search_dir in search_dirs:
        if not search_dir.exists():
            continue
        for name in default_names:
            candidate = search_dir / name
            if candidate.exists():
                return candidate.resolve()

    return None


def parse_output_format(value: Optional[str]) -> Optional[str]:
    """Normalise a --format value, rejecting anything but plain/json."""
    if value is None:
        return None
    value = value.lower()
    if value not in ("plain", "json"):
        raise typer.BadParameter(f"Format must be 'plain' or 'json', got: {value}")
    return value
