"""
Zoom Timeline Utility Functions

This module samples the zoom engine over a timeline for previews. It can
build a per-frame zoom timeline, print it as a colored table, and save it to
a CSV file.

Functions:
    - build_zoom_timeline: Samples the zoom state at every frame.
    - print_zoom_timeline: Prints the timeline as an ASCII table.
    - save_zoom_timeline_to_csv: Saves the timeline to a CSV file.
    - color_txt: Colorizes a string.
"""

from __future__ import annotations

import csv
import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import NamedTuple

import numpy as np
from colored import attr, bg, fg
from halo import Halo

from zoomkit.cursor import CursorTrack
from zoomkit.domain import SegmentBounds, ZoomSegment
from zoomkit.interpolation import ZoomInterpolator
from zoomkit.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

CSV_HEADER = ["Time (s)", "Progress", "Amount", "Left", "Top", "Right", "Bottom"]


class ZoomTimelineEntry(NamedTuple):
    """One sampled frame of a zoom timeline."""

    timestamp_seconds: float
    t: float
    display_amount: float
    bounds: SegmentBounds


def build_zoom_timeline(
    segments: Sequence[ZoomSegment],
    track: CursorTrack | None = None,
    *,
    fps: float,
    duration: float | None = None,
    interpolator: ZoomInterpolator | None = None,
) -> list[ZoomTimelineEntry]:
    """
    Samples the zoom engine at every frame of a timeline.

    Arguments:
        segments (Sequence[ZoomSegment]): Ordered zoom segments.
        track (CursorTrack | None): Cursor samples for auto segments.
        fps (float): Frames per second to sample at.
        duration (float | None): Timeline length in seconds. Defaults to the
            last segment end plus one zoom transition.
        interpolator (ZoomInterpolator | None): Engine to sample.

    Returns:
        list[ZoomTimelineEntry]: One entry per frame, starting at 0 s.

    Raises:
        ValueError: If ``fps`` is not finite and positive, or the duration is
            not finite and non-negative.
    """
    if not (math.isfinite(fps) and fps > 0.0):
        raise ValueError(f"fps must be finite and positive, got {fps}.")

    interpolator = interpolator or ZoomInterpolator()
    if duration is None:
        last_end = max((segment.end for segment in segments), default=0.0)
        duration = last_end + interpolator.zoom_duration
    if not (math.isfinite(duration) and duration >= 0.0):
        raise ValueError(
            f"duration must be finite and non-negative, got {duration}."
        )

    frame_count = int(np.floor(duration * fps + 1e-9)) + 1
    timestamps = np.arange(frame_count, dtype=np.float64) / fps
    logger.info(
        "Sampling %s frames at %.2f fps over %.2f seconds.", frame_count, fps, duration
    )

    timeline: list[ZoomTimelineEntry] = []
    for timestamp in timestamps:
        zoom = interpolator.at(float(timestamp), segments, track)
        timeline.append(
            ZoomTimelineEntry(
                timestamp_seconds=float(timestamp),
                t=zoom.t,
                display_amount=zoom.display_amount,
                bounds=zoom.bounds,
            )
        )

    logger.debug("Zoom timeline built with %s entries.", len(timeline))
    return timeline


def _row(entry: ZoomTimelineEntry) -> list[float]:
    bounds = entry.bounds
    return [
        round(entry.timestamp_seconds, 3),
        round(entry.t, 4),
        round(entry.display_amount, 4),
        round(bounds.top_left.x, 4),
        round(bounds.top_left.y, 4),
        round(bounds.bottom_right.x, 4),
        round(bounds.bottom_right.y, 4),
    ]


def save_zoom_timeline_to_csv(
    timeline: Sequence[ZoomTimelineEntry], file_path: str | Path
) -> Path:
    """
    Saves the zoom timeline to a CSV file.

    Arguments:
        timeline (Sequence[ZoomTimelineEntry]): The sampled timeline.
        file_path (str | Path): Destination file.

    Returns:
        Path: The path to the saved CSV file.
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with Halo(
        text=f"Saving zoom timeline to {path}",
        spinner="dots",
        text_color="green",
    ):
        with path.open(mode="w", newline="", encoding="utf-8") as file:
            writer = csv.writer(file)
            writer.writerow(CSV_HEADER)
            for entry in timeline:
                writer.writerow(_row(entry))

    logger.info("Zoom timeline saved to %s", path)
    return path


def color_txt(string: str, fg_color: str, bg_color: str, padding: int = 0) -> str:
    """Colorizes a string, optionally left-justified to ``padding``."""
    if padding:
        string = string.ljust(padding)

    return f"{fg(fg_color)}{bg(bg_color)}{string}{attr('reset')}"


def print_zoom_timeline(timeline: Sequence[ZoomTimelineEntry]) -> None:
    """
    Prints the zoom timeline as a table, one frame per row.

    Arguments:
        timeline (Sequence[ZoomTimelineEntry]): The sampled timeline.
    """
    column_width = 10
    print(color_txt("Time", "black", "green", column_width), end="")
    print(color_txt("Progress", "black", "yellow", column_width), end="")
    print(color_txt("Amount", "black", "blue", column_width), end="")
    print(color_txt("Bounds", "black", "magenta", column_width))

    for entry in timeline:
        bounds = entry.bounds
        print(
            f"{entry.timestamp_seconds:.3f}s".ljust(column_width)
            + f"{entry.t:.4f}".ljust(column_width)
            + f"{entry.display_amount:.3f}x".ljust(column_width)
            + f"({bounds.top_left.x:.3f}, {bounds.top_left.y:.3f}) -> "
            f"({bounds.bottom_right.x:.3f}, {bounds.bottom_right.y:.3f})"
        )
