"""Zoom interpolation across segment boundaries.

For a timeline instant the interpolator locates the active and previous
segments and blends their crop rectangles with eased transitions:

* after a segment ends, the view zooms back out to the full frame;
* when a segment starts, the view zooms in toward the segment focus;
* contiguous segments blend directly without dipping back to the full frame;
* a segment starting before the previous zoom-out has finished resumes the
  zoom-in from wherever that zoom-out had reached.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from zoomkit.bounds import lerp_bounds, segment_bounds
from zoomkit.config import ZoomSettings, get_settings
from zoomkit.cursor import CursorTrack
from zoomkit.domain import InterpolatedZoom, SegmentBounds, ZoomSegment
from zoomkit.easing import EasingFunction, easing_from_control_points
from zoomkit.segments import locate_segments
from zoomkit.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


class ZoomInterpolator:
    """Computes :class:`InterpolatedZoom` values for timeline instants.

    Args:
        settings: Engine tunables. Defaults to the environment settings.
        ease_in: Easing applied to zoom-in transitions. Defaults to the
            curve configured in ``settings``.
        ease_out: Easing applied to zoom-out transitions. Defaults to the
            curve configured in ``settings``.
    """

    def __init__(
        self,
        settings: ZoomSettings | None = None,
        ease_in: EasingFunction | None = None,
        ease_out: EasingFunction | None = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        self.ease_in = (
            ease_in
            if ease_in is not None
            else easing_from_control_points(self.settings.ease_in)
        )
        self.ease_out = (
            ease_out
            if ease_out is not None
            else easing_from_control_points(self.settings.ease_out)
        )

    @property
    def zoom_duration(self) -> float:
        return self.settings.zoom_duration_seconds

    def _bounds(
        self, segment: ZoomSegment, time: float, track: CursorTrack | None
    ) -> SegmentBounds:
        return segment_bounds(
            segment, time, track, self.settings.cursor_smoothing_window_seconds
        )

    def _ease_in_since(self, start: float, time: float) -> float:
        return self.ease_in(clamp01((time - start) / self.zoom_duration))

    def at(
        self,
        time: float,
        segments: Sequence[ZoomSegment],
        track: CursorTrack | None = None,
    ) -> InterpolatedZoom:
        """Returns the zoom state at ``time`` seconds.

        Segments must be sorted by start and must not overlap; this is not
        checked here (see :func:`zoomkit.segments.validate_segments`).
        """
        cursor = locate_segments(time, segments)
        default = SegmentBounds.default()
        previous, current = cursor.prev_segment, cursor.segment

        if previous is None and current is None:
            return InterpolatedZoom(t=0.0, bounds=default)

        if current is None:
            zoom_t = self.ease_out(clamp01((time - previous.end) / self.zoom_duration))
            return InterpolatedZoom(
                t=1.0 - zoom_t,
                bounds=lerp_bounds(self._bounds(previous, time, track), default, zoom_t),
            )

        zoom_t = self._ease_in_since(current.start, time)
        current_bounds = self._bounds(current, time, track)

        if previous is None:
            return InterpolatedZoom(
                t=zoom_t, bounds=lerp_bounds(default, current_bounds, zoom_t)
            )

        gap = current.start - previous.end
        if gap == 0.0:
            return InterpolatedZoom(
                t=1.0,
                bounds=lerp_bounds(
                    self._bounds(previous, time, track), current_bounds, zoom_t
                ),
            )

        if gap < self.zoom_duration:
            # Zoom in from wherever the interrupted zoom-out had reached.
            interrupted = self.at(current.start, cursor.segments, track)
            logger.debug(
                "Zoom-out interrupted at %.3fs with t=%.4f", current.start, interrupted.t
            )
            return InterpolatedZoom(
                t=interrupted.t * (1.0 - zoom_t) + zoom_t,
                bounds=lerp_bounds(interrupted.bounds, current_bounds, zoom_t),
            )

        return InterpolatedZoom(
            t=zoom_t, bounds=lerp_bounds(default, current_bounds, zoom_t)
        )


def interpolate_zoom(
    time: float,
    segments: Sequence[ZoomSegment],
    track: CursorTrack | None = None,
    *,
    ease_in: EasingFunction | None = None,
    ease_out: EasingFunction | None = None,
    settings: ZoomSettings | None = None,
) -> InterpolatedZoom:
    """Returns the zoom state at ``time`` using a one-off interpolator."""
    return ZoomInterpolator(settings, ease_in, ease_out).at(time, segments, track)
