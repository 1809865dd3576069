#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/csv2xlsx/progress.py
"""Progress callback system for CSV ingestion and batch conversion.

This module provides a standardized way to report conversion progress to
embedders (a CLI progress bar, an editor notification, a web UI) during
single-file ingestion and multi-file batches.

Examples
--------
Track a batch conversion:

    >>> from csv2xlsx import convert_files
    >>> from csv2xlsx.progress import ProgressEvent
    >>>
    >>> def on_progress(event: ProgressEvent) -> None:
    ...     print(event)
    >>>
    >>> result = convert_files(["a.csv", "b.csv"], progress_callback=on_progress)

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional

logger = logging.getLogger(__name__)

EventType = Literal["started", "item_done", "detected", "finished", "error"]


@dataclass
class ProgressEvent:
    """Progress event emitted during ingestion or batch conversion.

    Parameters
    ----------
    event_type : EventType
        Type of progress event:

        - "started": ingestion of a file or a batch has begun.
          ``total`` holds the number of files for batches.
        - "item_done": a file has been converted. ``metadata["item_type"]``
          is ``"file"`` and ``metadata["output_path"]`` the written path.
        - "detected": an ingestion decision was made.
          ``metadata["detected_type"]`` is ``"encoding"`` or ``"delimiter"``
          and ``metadata["value"]`` the detected value.
        - "finished": the operation completed.
        - "error": a file failed. ``metadata["error"]`` holds the message and
          ``metadata["file"]`` the source path. Batches continue afterwards.

    message : str
        Human-readable description of the event
    current : int, default 0
        Current progress position (files completed so far)
    total : int, default 0
        Total items to process. Set to 0 if unknown.
    metadata : dict, default empty
        Additional event-specific information

    Examples
    --------
    >>> ProgressEvent("item_done", "Converted data.csv", current=1, total=3, metadata={"item_type": "file"})

    """

    event_type: EventType
    message: str
    current: int = 0
    total: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable string representation."""
        progress = f"({self.current}/{self.total})" if self.total > 0 else ""
        return f"[{self.event_type.upper()}] {self.message} {progress}".strip()


ProgressCallback = Callable[[ProgressEvent], None]
"""Type alias for progress callback functions.

Callbacks should not raise; exceptions raised by a callback are logged and
otherwise ignored so they cannot interrupt a conversion.
"""


def emit_progress(
    callback: Optional[ProgressCallback],
    event_type: EventType,
    message: str,
    current: int = 0,
    total: int = 0,
    **metadata: Any,
) -> None:
    """Emit a progress event to ``callback`` if one is registered.

    Parameters
    ----------
    callback : ProgressCallback or None
        Receiver of the event; nothing happens when None
    event_type : EventType
        Type of progress event
    message : str
        Human-readable description of the event
    current : int, default 0
        Current progress position
    total : int, default 0
        Total items to process
    **metadata
        Additional event-specific information

    """
    if callback is None:
        return

    try:
        callback(ProgressEvent(event_type=event_type, message=message, current=current, total=total, metadata=metadata))
    except Exception as e:
        logger.warning(f"Progress callback raised exception: {e}", exc_info=True)
