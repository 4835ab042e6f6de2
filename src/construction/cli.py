"""Command-line interface for construction."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from . import context
from .exceptions import ConstructionError
from .graph import GraphGenerator, GraphView
from .logger import setup_logger
from .report import render_report, render_yaml
from .scheduler import SchedulingService
from .unified_config import discover_config

# Exit status for any failure, matching the original construction tool
EXIT_FAILURE = 84

app = typer.Typer(
    name="construction",
    help="Critical-path scheduling for interdependent construction tasks",
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Report formats for the schedule command."""

    TEXT = "text"
    YAML = "yaml"


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show changes, 2=show all checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: construction_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for construction commands."""
    setup_logger(verbose)
    context.set_config_path(config)


@app.command()
def schedule(
    file: Annotated[Path, typer.Argument(help="File describing the tasks")],
    *,
    output_format: Annotated[
        OutputFormat, typer.Option("--format", "-f", help="Report format")
    ] = OutputFormat.TEXT,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Compute the critical-path schedule of a task file."""
    try:
        config = discover_config(file)
        result = SchedulingService(config.scheduler).schedule_file(file)
    except (ConstructionError, OSError, ValueError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(EXIT_FAILURE) from e

    if output_format == OutputFormat.YAML:
        rendered = render_yaml(result, config.report)
    else:
        rendered = render_report(result.graph, config.report)

    _write_output(rendered, output)


@app.command()
def graph(
    file: Annotated[Path, typer.Argument(help="File describing the tasks")],
    *,
    view: Annotated[
        GraphView, typer.Option("--view", help="Type of graph to generate")
    ] = GraphView.ALL,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
) -> None:
    """Generate the task dependency graph in DOT format."""
    try:
        config = discover_config(file)
        result = SchedulingService(config.scheduler).schedule_file(file)
    except (ConstructionError, OSError, ValueError) as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(EXIT_FAILURE) from e

    _write_output(GraphGenerator(result.graph).generate(view) + "\n", output)


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Output written to {output}")
    else:
        typer.echo(text, nl=False)


def main() -> int:
    """Main entry point."""
    # Typer handles sys.exit() internally
    app()
    return 0


if __name__ == "__main__":
    main()
