"""Cursor tracks and smoothed focus-point resolution for auto-zoom segments.

The resolver tries three strategies in order:

1. an exact lookup delegated to the track (``CursorTrack.position_at``),
2. when that succeeds, a triangular-kernel weighted average of the samples
   inside a smoothing window around the query time,
3. when it does not, a linear interpolation between the nearest samples on
   either side of the query time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

import numpy as np

from zoomkit.config import DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS
from zoomkit.domain import XY, CursorMoveEvent
from zoomkit.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)

PositionLookup = Callable[[float], XY | None]


class CursorTrack:
    """Ordered cursor samples with an exact position lookup.

    Args:
        moves: Cursor samples ordered by time.
        position_lookup: Optional replacement for the exact lookup. It
            receives a time in seconds and returns a position or ``None``.
    """

    def __init__(
        self,
        moves: Iterable[CursorMoveEvent],
        position_lookup: PositionLookup | None = None,
    ) -> None:
        self.moves: tuple[CursorMoveEvent, ...] = tuple(
            CursorMoveEvent(*move) for move in moves
        )
        self.times_seconds: np.ndarray = (
            np.array([move.time_ms for move in self.moves], dtype=np.float64) / 1000.0
        )
        self.xs: np.ndarray = np.array([move.x for move in self.moves], dtype=np.float64)
        self.ys: np.ndarray = np.array([move.y for move in self.moves], dtype=np.float64)
        self._position_lookup = position_lookup

    def __len__(self) -> int:
        return len(self.moves)

    def position_at(self, time: float) -> XY | None:
        """Returns the cursor position at ``time`` seconds, if known.

        Without a custom lookup this is the most recent sample recorded at or
        before ``time``.
        """
        if self._position_lookup is not None:
            return self._position_lookup(time)
        candidates = np.flatnonzero(self.times_seconds <= time)
        if candidates.size == 0:
            return None
        index = int(candidates[-1])
        return XY(float(self.xs[index]), float(self.ys[index]))


def exact_position(track: CursorTrack, time: float) -> XY | None:
    """Delegates to the track's exact lookup."""
    return track.position_at(time)


def windowed_average_position(
    track: CursorTrack, time: float, window: float
) -> XY | None:
    """Triangular-kernel weighted average of the samples around ``time``.

    Samples within ``[time - window/2, time + window/2]`` are weighted by
    ``1 - min(|dt| / (window/2), 1)``, so a sample at the query time has
    weight one and samples on the window edges have weight zero.

    Returns:
        The weighted average, or ``None`` when the window is empty or no
        sample carries weight.
    """
    half_window = window / 2.0
    if half_window <= 0.0:
        return None
    in_window = (track.times_seconds >= time - half_window) & (
        track.times_seconds <= time + half_window
    )
    if not np.any(in_window):
        return None

    distances = np.abs(time - track.times_seconds[in_window])
    weights = 1.0 - np.minimum(distances / half_window, 1.0)
    total_weight = float(np.sum(weights))
    if total_weight <= 0.0:
        return None

    return XY(
        float(np.sum(track.xs[in_window] * weights)) / total_weight,
        float(np.sum(track.ys[in_window] * weights)) / total_weight,
    )


def interpolated_position(track: CursorTrack, time: float) -> XY | None:
    """Linearly interpolates between the nearest samples around ``time``.

    The "before" side includes a sample recorded exactly at ``time``. With
    only one side available its sample is returned unchanged.
    """
    before = np.flatnonzero(track.times_seconds <= time)
    after = np.flatnonzero(track.times_seconds > time)

    before_index = (
        int(before[np.argmax(track.times_seconds[before])]) if before.size else None
    )
    after_index = (
        int(after[np.argmin(track.times_seconds[after])]) if after.size else None
    )

    if before_index is None and after_index is None:
        return None
    if after_index is None:
        return XY(float(track.xs[before_index]), float(track.ys[before_index]))
    if before_index is None:
        return XY(float(track.xs[after_index]), float(track.ys[after_index]))

    t1 = float(track.times_seconds[before_index])
    t2 = float(track.times_seconds[after_index])
    x1, y1 = float(track.xs[before_index]), float(track.ys[before_index])
    time_span = t2 - t1
    if time_span <= 0.0:
        return XY(x1, y1)

    factor = (time - t1) / time_span
    x2, y2 = float(track.xs[after_index]), float(track.ys[after_index])
    return XY(x1 + (x2 - x1) * factor, y1 + (y2 - y1) * factor)


def resolve_cursor_position(
    track: CursorTrack,
    time: float,
    window: float = DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS,
) -> XY | None:
    """Resolves a smoothed cursor focus point at ``time`` seconds.

    Returns:
        The focus point, or ``None`` when the track holds no usable data.
        Callers fall back to the frame center in that case.
    """
    exact = exact_position(track, time)
    if exact is None:
        position = interpolated_position(track, time)
        logger.debug("Cursor at %.3fs interpolated to %s", time, position)
        return position

    smoothed = windowed_average_position(track, time, window)
    if smoothed is None:
        logger.debug("No cursor samples in window at %.3fs, using exact %s", time, exact)
        return exact
    return smoothed
