"""Zoom segment lookup and optional segment-list validation."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from zoomkit.domain import ManualMode, ZoomSegment


@dataclass(frozen=True)
class SegmentsCursor:
    """Segments relevant to one timeline instant.

    Attributes:
        time: Query time in seconds.
        segment: Segment active at ``time`` (``start < time <= end``), if any.
        prev_segment: Most recently ended segment relative to ``time``.
        segments: Full ordered segment list the cursor was built from.
    """

    time: float
    segment: ZoomSegment | None
    prev_segment: ZoomSegment | None
    segments: Sequence[ZoomSegment]


def locate_segments(time: float, segments: Sequence[ZoomSegment]) -> SegmentsCursor:
    """Finds the active and previous segments for ``time``.

    A segment's start is excluded and its end included, so at exactly
    ``segment.start`` the timeline is still between segments.

    When a segment is active, the previous segment is its list predecessor.
    Otherwise it is the last segment, scanning backwards, that ended at or
    before ``time``.
    """
    for index, segment in enumerate(segments):
        if segment.start < time <= segment.end:
            return SegmentsCursor(
                time=time,
                segment=segment,
                prev_segment=segments[index - 1] if index > 0 else None,
                segments=segments,
            )

    prev_segment = next(
        (segment for segment in reversed(segments) if segment.end <= time),
        None,
    )
    return SegmentsCursor(
        time=time,
        segment=None,
        prev_segment=prev_segment,
        segments=segments,
    )


class SegmentValidationError(ValueError):
    """Raised when a zoom segment list violates the engine preconditions."""


def _validate_segment(index: int, segment: ZoomSegment) -> None:
    if not (math.isfinite(segment.start) and math.isfinite(segment.end)):
        raise SegmentValidationError(
            f"Segment {index} has non-finite bounds ({segment.start}, {segment.end})."
        )
    if segment.end <= segment.start:
        raise SegmentValidationError(
            f"Segment {index} must end after it starts "
            f"({segment.start} -> {segment.end})."
        )
    if not math.isfinite(segment.amount) or segment.amount < 1.0:
        raise SegmentValidationError(
            f"Segment {index} zoom amount must be a finite value >= 1, "
            f"got {segment.amount}."
        )
    if isinstance(segment.mode, ManualMode):
        x, y = segment.mode.x, segment.mode.y
        if not (0.0 <= x <= 1.0 and 0.0 <= y <= 1.0):
            raise SegmentValidationError(
                f"Segment {index} manual focus ({x}, {y}) is outside [0, 1]."
            )


def validate_segments(segments: Sequence[ZoomSegment]) -> tuple[ZoomSegment, ...]:
    """Returns segments sorted by start, checking the engine preconditions.

    This is an optional hardening pass meant to run once when a segment list
    is built, not per frame.

    Raises:
        SegmentValidationError: If a segment is malformed or two segments
            overlap. Segments that touch (``next.start == previous.end``) are
            accepted.
    """
    for index, segment in enumerate(segments):
        _validate_segment(index, segment)

    ordered = tuple(
        sorted(segments, key=lambda segment: (segment.start, segment.end))
    )
    for previous, incoming in zip(ordered, ordered[1:]):
        if incoming.start < previous.end:
            raise SegmentValidationError(
                f"Segments overlap: [{previous.start}, {previous.end}] and "
                f"[{incoming.start}, {incoming.end}]."
            )
    return ordered
