"""CLI application entry point for cadfeatures.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from cadfeatures import __version__
from cadfeatures.cli.output import (
    console,
    print_dimensions,
    print_drawing_info,
    print_error,
    print_header,
    print_holes,
    print_machining,
    print_step,
    print_summary,
)
from cadfeatures.config import (
    AnalyzerSettings,
    HoleFilterConfig,
    LoggingConfig,
    MachiningConfig,
)
from cadfeatures.config.settings import (
    COMPLEX_POLYLINE_THRESHOLD,
    DEFAULT_DIAMETER_TOLERANCE,
    DEFAULT_MAX_DIAMETER,
    DEFAULT_MIN_DIAMETER,
)
from cadfeatures.core import DrawingAnalyzer
from cadfeatures.utils import AnalysisLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="cadfeatures",
    help="Extract drill holes, machining indicators and dimensions from DXF drawings.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]cadfeatures[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Extract manufacturing features from 2D CAD drawings."""


@app.command()
def analyze(
    drawing: Annotated[
        Path,
        typer.Argument(
            help="Path to a DXF drawing",
            show_default=False,
        ),
    ],
    min_diameter: Annotated[
        float,
        typer.Option(
            "--min-diameter",
            help="Smallest circle diameter counted as a drill hole (mm)",
            min=0.0,
        ),
    ] = DEFAULT_MIN_DIAMETER,
    max_diameter: Annotated[
        float,
        typer.Option(
            "--max-diameter",
            help="Largest circle diameter counted as a drill hole (mm)",
        ),
    ] = DEFAULT_MAX_DIAMETER,
    tolerance: Annotated[
        float,
        typer.Option(
            "--tolerance",
            "-t",
            help="Rounding step when grouping holes by diameter (mm)",
        ),
    ] = DEFAULT_DIAMETER_TOLERANCE,
    polyline_threshold: Annotated[
        int,
        typer.Option(
            "--polyline-threshold",
            help="Polyline count above which the part needs complex machining",
            min=0,
        ),
    ] = COMPLEX_POLYLINE_THRESHOLD,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the full analysis result as JSON",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output (hole positions, layers)",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print the one-line summary",
        ),
    ] = False,
) -> None:
    """Analyze a DXF drawing and report its manufacturing features.

    Circles inside the diameter window are reported as drill holes grouped
    by diameter; arcs, splines and many polylines flag complex machining.

    Example:
        cadfeatures analyze panel.dxf --min-diameter 5
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        settings = AnalyzerSettings(
            holes=HoleFilterConfig(
                min_diameter=min_diameter,
                max_diameter=max_diameter,
                tolerance=tolerance,
            ),
            machining=MachiningConfig(complex_polyline_threshold=polyline_threshold),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        print_error(
            "Invalid options",
            details="; ".join(err["msg"] for err in e.errors()),
        )
        raise typer.Exit(code=1) from None

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet or as_json,
    )
    analyzer = DrawingAnalyzer(settings, analysis_logger=AnalysisLogger(logger))

    if not quiet and not as_json:
        print_header(__version__)
        print_step("Loading drawing")

    result = analyzer.analyze_file(drawing)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        raise typer.Exit(code=0 if result.success else 1)

    if not result.success:
        print_error(f"Could not analyze drawing: {result.error}")
        raise typer.Exit(code=1)

    summary = analyzer.describe(result)
    if quiet:
        typer.echo(summary)
        raise typer.Exit(code=0)

    print_drawing_info(
        path=str(drawing),
        entity_count=result.stats.total_entities,
        layer_count=len(result.stats.layers),
    )
    if verbose and result.stats.layers:
        console.print(f"  Layers: {', '.join(sorted(result.stats.layers))}", markup=False)

    print_step("Holes")
    print_holes(result, verbose=verbose)
    print_step("Machining")
    print_machining(result)
    print_step("Dimensions")
    print_dimensions(result)
    print_summary(summary)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
