"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from cadfeatures.core.summarizer import format_diameter
from cadfeatures.domain import AnalysisResult

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]cadfeatures[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_drawing_info(path: str, entity_count: int, layer_count: int) -> None:
    """Print drawing information.

    Args:
        path: Path to the drawing file
        entity_count: Number of entities in model space
        layer_count: Number of distinct layers
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(path)
    console.print(line)
    console.print(f"  {entity_count:,} entities {SYM_DOT} {layer_count} layers")


def print_holes(result: AnalysisResult, verbose: bool) -> None:
    """Print detected holes, one table row per diameter group.

    Args:
        result: Successful analysis result
        verbose: Whether to list hole positions
    """
    holes = result.holes
    if holes.count == 0:
        console.print("  No holes detected")
        return

    console.print(
        f"  [green]{holes.count}[/green] circles {SYM_DOT} "
        f"Ø{format_diameter(holes.diameter_min or 0.0)}"
        f"–{format_diameter(holes.diameter_max or 0.0)}mm"
    )
    if not holes.groups:
        console.print("  No circle within the drill-hole diameter window")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Diameter", justify="right")
    table.add_column("Count", justify="right")
    if verbose:
        table.add_column("Positions")

    for group in holes.groups:
        row = [f"Ø{format_diameter(group.diameter)}mm", str(group.count)]
        if verbose:
            row.append(", ".join(f"({h.x:g}, {h.y:g})" for h in group.holes))
        table.add_row(*row)

    console.print(table)


def print_machining(result: AnalysisResult) -> None:
    """Print complex-machining indicators."""
    machining = result.machining
    flag = "[yellow]complex[/yellow]" if machining.has_complex_shapes else "[green]simple[/green]"
    console.print(
        f"  {flag} {SYM_DOT} {machining.arc_count} arcs {SYM_DOT} "
        f"{machining.polyline_count} polylines {SYM_DOT} {machining.spline_count} splines"
    )


def print_dimensions(result: AnalysisResult) -> None:
    """Print the bounding box."""
    box = result.bounding_box
    if box is None:
        console.print("  No coordinate-bearing entities")
        return
    console.print(f"  {box.width:.1f} × {box.height:.1f} mm")
    console.print(
        f"  [dim]({box.min_x:g}, {box.min_y:g}) → ({box.max_x:g}, {box.max_y:g})[/dim]"
    )


def print_summary(summary: str) -> None:
    """Print the one-line digest."""
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {summary}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
