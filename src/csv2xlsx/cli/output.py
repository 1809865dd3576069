#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Console message helpers for the csv2xlsx CLI."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Return True when rich formatting should be used.

    Requires ``--rich``; the output stream (stdout by default) must also be a
    terminal unless ``--force-rich`` is given.
    """
    if not getattr(args, "rich", False):
        return False
    if getattr(args, "force_rich", False):
        return True

    target = stream if stream is not None else sys.stdout
    try:
        return bool(target.isatty())
    except (AttributeError, OSError, ValueError):
        return False


def print_converted(source: str, output: object, use_rich: bool) -> None:
    """Print the confirmation line for a converted file to stdout."""
    if use_rich:
        Console().print(f"[green]Converted[/green] {escape(source)} -> [bold]{escape(str(output))}[/bold]", highlight=False)
    else:
        print(f"Converted {source} -> {output}")


def print_error(message: str) -> None:
    """Print an ``Error:`` line to stderr."""
    print(f"Error: {message}", file=sys.stderr)
