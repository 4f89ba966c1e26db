"""Crop-rectangle computation for a single zoom segment."""

from __future__ import annotations

from zoomkit.config import DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS
from zoomkit.cursor import CursorTrack, resolve_cursor_position
from zoomkit.domain import FRAME_CENTER, XY, AutoMode, SegmentBounds, ZoomSegment


def focus_point(
    segment: ZoomSegment,
    time: float,
    track: CursorTrack | None = None,
    window: float = DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS,
) -> XY:
    """Returns the point a segment zooms toward at ``time``.

    Manual segments use their fixed point. Auto segments follow the smoothed
    cursor position, or the frame center without cursor data.
    """
    if isinstance(segment.mode, AutoMode):
        if track is None:
            return FRAME_CENTER
        position = resolve_cursor_position(track, time, window)
        return FRAME_CENTER if position is None else position
    return XY(float(segment.mode.x), float(segment.mode.y))


def segment_bounds(
    segment: ZoomSegment,
    time: float,
    track: CursorTrack | None = None,
    window: float = DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS,
) -> SegmentBounds:
    """Computes the crop rectangle for ``segment`` at full magnification.

    The rectangle is anchored so that the focus point maps onto itself in both
    the unzoomed and the zoomed coordinate spaces.
    """
    focus = focus_point(segment, time, track, window)
    center_diff = focus * segment.amount - focus
    return SegmentBounds(
        top_left=XY(0.0, 0.0) - center_diff,
        bottom_right=XY(segment.amount, segment.amount) - center_diff,
    )


def lerp_bounds(start: SegmentBounds, end: SegmentBounds, factor: float) -> SegmentBounds:
    """Blends two rectangles corner by corner."""
    return SegmentBounds(
        top_left=start.top_left * (1.0 - factor) + end.top_left * factor,
        bottom_right=start.bottom_right * (1.0 - factor) + end.bottom_right * factor,
    )
