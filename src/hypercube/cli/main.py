# src/hypercube/cli/main.py
import typer
from pathlib import Path
from typing import Optional
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hypercube.cli.common import parse_output_format, resolve_config_path
from hypercube.core.config import load_config
from hypercube.core.frames import run_animation
from hypercube.core.geometry import Hypercube
from hypercube.core.logging import configure_console, logger, setup_logfile

# Diagnostics go to stderr; stdout carries frames only
console = Console(stderr=True)

app = typer.Typer(
    help="Hypercube: rotate and project n-dimensional cubes",
    context_settings={"help_option_names": ["-h", "--help"]}
)


def _version_callback(value: bool):
    if value:
        from hypercube.core.version import __version__
        typer.echo(f"hypercube version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit", callback=_version_callback, is_eager=True)
):
    """
    Hypercube: n-dimensional rotation and perspective projection.

    Use 'hypercube COMMAND --help' to see options for specific commands.
    """
    configure_console(verbose)


@app.command("animate")
def animate(
    dimensions: Optional[int] = typer.Option(None, "--dimensions", "-d", help="Number of dimensions (default: 5)"),
    show: Optional[int] = typer.Option(None, "--show", "-s", help="Vertices to print per frame (default: 8)"),
    step: Optional[float] = typer.Option(None, "--step", help="Time step between frames (default: 0.2)"),
    t_end: Optional[float] = typer.Option(None, "--t-end", help="Exclusive end time (default: 2π)"),
    output_format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: plain|json"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML configuration file (default: ./configs/default_animate.yml)"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write logs to this file"),
):
    """Rotate a hypercube through t in [0, t_end) and print every projected frame."""
    log_sink = setup_logfile(str(log_file)) if log_file is not None else None
    try:
        _animate(dimensions, show, step, t_end, output_format, config)
    finally:
        if log_sink is not None:
            logger.remove(log_sink)


def _animate(dimensions, show, step, t_end, output_format, config):
    config_path = resolve_config_path(config, "animate")
    overrides = {
        "dimensions": dimensions,
        "vertices_to_show": show,
        "step": step,
        "t_end": t_end,
        "output_format": parse_output_format(output_format),
    }

    try:
        settings = load_config(config_path, overrides)
    except (ValidationError, ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]✗ Invalid configuration: {escape(str(e))}[/bold red]")
        raise typer.Exit(1)

    logger.info(f"Animating with {settings}")
    cube = Hypercube(settings.dimensions)
    run_animation(cube, settings, echo=typer.echo)


@app.command("info")
def info(
    dimensions: int = typer.Argument(5, help="Number of dimensions"),
):
    """Show the vertex, edge and rotation-plane counts of a hypercube."""
    cube = Hypercube(dimensions)

    table = Table(title=f"{cube.dimensions}-dimensional hypercube")
    table.add_column("Property", style="cyan")
    table.add_column("Count", style="green", justify="right")
    table.add_row("Dimensions", str(cube.dimensions))
    table.add_row("Vertices", str(cube.num_vertices))
    table.add_row("Edges", str(cube.num_edges))
    table.add_row("Rotation planes", str(cube.num_planes))

    Console().print(table)


if __name__ == "__main__":
    app()
