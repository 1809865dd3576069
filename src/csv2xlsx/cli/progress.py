#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Batch progress display and end-of-batch reporting for the CLI.

:class:`BatchReporter` is both a context manager that owns the progress
display and the :data:`~csv2xlsx.progress.ProgressCallback` handed to
:func:`csv2xlsx.api.convert_files`. With rich output it drives a rich progress
bar; otherwise it writes one plain line per file to stderr.
"""

from __future__ import annotations

import sys
from typing import Any

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table

from csv2xlsx.api import BatchResult
from csv2xlsx.progress import ProgressEvent


class BatchReporter:
    """Show per-file progress for a batch conversion and summarize it.

    Parameters
    ----------
    use_rich : bool
        Render a rich progress bar and tables instead of plain text
    total : int
        Number of files expected in the batch
    description : str, default "Converting CSV files"
        Label shown next to the progress bar

    Examples
    --------
    >>> with BatchReporter(use_rich=False, total=2) as reporter:
    ...     result = convert_files(["a.csv", "b.csv"], progress_callback=reporter)
    >>> reporter.report(result)

    """

    def __init__(self, use_rich: bool, total: int, description: str = "Converting CSV files"):
        self.use_rich = use_rich
        self.total = total
        self.description = description
        self._console: Console | None = Console(stderr=True) if use_rich else None
        self._progress: Progress | None = None
        self._task_id: Any = None
        self._done = 0

    @property
    def current(self) -> int:
        """Number of files finished so far, failed ones included."""
        return self._done

    def __enter__(self) -> BatchReporter:
        if self._console is not None:
            self._progress = Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                console=self._console,
            )
            self._progress.start()
            self._task_id = self._progress.add_task(f"[cyan]{self.description}...", total=self.total)
        else:
            print(f"{self.description} ({self.total} files)...", file=sys.stderr)
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None

    def __call__(self, event: ProgressEvent) -> None:
        """Handle a batch progress event."""
        source = event.metadata.get("file", "")
        if event.event_type == "item_done":
            self._advance(f"[OK] {source} -> {event.metadata.get('output_path', '')}", "green")
        elif event.event_type == "error":
            self._advance(f"[ERROR] {source}: {event.metadata.get('error', 'Unknown error')}", "red")

    def _advance(self, line: str, colour: str) -> None:
        self._done += 1
        if self._console is not None:
            self._console.print(line, style=colour, markup=False, highlight=False)
            if self._progress is not None:
                self._progress.update(self._task_id, completed=self._done)
        else:
            print(line, file=sys.stderr)

    def report(self, result: BatchResult, show_summary: bool = True) -> None:
        """Print the batch summary and the list of failed files.

        Parameters
        ----------
        result : BatchResult
            Outcome of the batch
        show_summary : bool, default True
            Print the success/failure counts. The failure list is always
            printed when any file failed.

        """
        if show_summary:
            self._print_summary(result)
        if result.failed:
            self._print_failures(result)

    def _print_summary(self, result: BatchResult) -> None:
        counts = [("Successful", result.success_count), ("Failed", result.failure_count)]
        if result.skipped:
            counts.append(("Skipped", len(result.skipped)))
        counts.append(("Total", result.total))

        if self._console is not None:
            table = Table(title="Conversion Summary")
            table.add_column("Status", style="cyan", no_wrap=True)
            table.add_column("Count", style="magenta", justify="right")
            for label, count in counts:
                table.add_row(label, str(count))
            self._console.print(table)
            return

        print("\nConversion Summary", file=sys.stderr)
        print("=" * 40, file=sys.stderr)
        for label, count in counts:
            print(f"  {label + ':':<12}{count}", file=sys.stderr)

    def _print_failures(self, result: BatchResult) -> None:
        if self._console is not None:
            table = Table(title="Failed files")
            table.add_column("File", style="cyan")
            table.add_column("Error", style="red")
            for failure in result.failed:
                table.add_row(str(failure.path), failure.message)
            self._console.print(table)
            return

        print("\nFailed files", file=sys.stderr)
        print("-" * 60, file=sys.stderr)
        for failure in result.failed:
            print(f"  {failure.path}: {failure.message}", file=sys.stderr)


__all__ = ["BatchReporter"]
