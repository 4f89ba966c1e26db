"""Domain data structures for zoom segments, cursor samples, and crop bounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True)
class XY:
    """A 2D point or vector in normalized frame coordinates."""

    x: float
    y: float

    def __add__(self, other: XY) -> XY:
        return XY(self.x + other.x, self.y + other.y)

    def __sub__(self, other: XY) -> XY:
        return XY(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> XY:
        return XY(self.x * factor, self.y * factor)

    __rmul__ = __mul__


FRAME_CENTER = XY(0.5, 0.5)


@dataclass(frozen=True)
class AutoMode:
    """Focus follows the recorded cursor track."""


@dataclass(frozen=True)
class ManualMode:
    """Focus is pinned to a fixed normalized point."""

    x: float
    y: float


ZoomMode = AutoMode | ManualMode


@dataclass(frozen=True)
class ZoomSegment:
    """A timeline interval magnified by ``amount`` toward a focus point.

    Attributes:
        start: Segment start in seconds (exclusive for activity checks).
        end: Segment end in seconds (inclusive for activity checks).
        amount: Magnification factor, 1.0 meaning no zoom.
        mode: Focus mode, either cursor-tracked or a fixed point.
    """

    start: float
    end: float
    amount: float
    mode: ZoomMode = AutoMode()


class CursorMoveEvent(NamedTuple):
    """A recorded cursor sample with time in milliseconds since recording start."""

    time_ms: float
    x: float
    y: float


@dataclass(frozen=True)
class SegmentBounds:
    """Normalized crop rectangle; may extend past [0, 1] while zoomed."""

    top_left: XY
    bottom_right: XY

    @classmethod
    def default(cls) -> SegmentBounds:
        """Returns the unzoomed full-frame rectangle."""
        return cls(XY(0.0, 0.0), XY(1.0, 1.0))

    @property
    def width(self) -> float:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> float:
        return self.bottom_right.y - self.top_left.y


@dataclass(frozen=True)
class InterpolatedZoom:
    """Zoom state at one instant.

    Attributes:
        t: Progress of the current transition relative to its own target
            magnification, in [0, 1].
        bounds: Crop rectangle to sample from the source frame.
    """

    t: float
    bounds: SegmentBounds

    @property
    def display_amount(self) -> float:
        """Multiplier applied to the display width and height."""
        return (self.bounds.bottom_right - self.bounds.top_left).x
