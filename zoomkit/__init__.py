from .domain import (
    XY,
    AutoMode,
    CursorMoveEvent,
    InterpolatedZoom,
    ManualMode,
    SegmentBounds,
    ZoomSegment,
)
from .config import ZoomSettings, get_settings, reload_settings
from .cursor import CursorTrack, resolve_cursor_position
from .bounds import segment_bounds
from .easing import cubic_bezier, linear
from .segments import SegmentValidationError, locate_segments, validate_segments
from .interpolation import ZoomInterpolator, interpolate_zoom
