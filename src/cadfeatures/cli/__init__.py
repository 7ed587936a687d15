"""Command-line interface for cadfeatures.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Hole table grouped by diameter
- Verbose/quiet output modes
- JSON output of the full analysis result
"""

from cadfeatures.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
