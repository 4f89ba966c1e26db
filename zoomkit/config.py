"""Typed runtime settings for the zoom engine, loaded from the environment."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

BezierControlPoints = tuple[float, float, float, float]

DEFAULT_ZOOM_DURATION_SECONDS = 1.0
DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS = 0.15
DEFAULT_EASE_IN: BezierControlPoints = (0.1, 0.0, 0.3, 1.0)
DEFAULT_EASE_OUT: BezierControlPoints = (0.5, 0.0, 0.5, 1.0)
DEFAULT_PREVIEW_FPS = 30.0


@dataclass(frozen=True)
class ZoomSettings:
    """Engine tunables.

    Attributes:
        zoom_duration_seconds: Fixed length of every zoom-in/zoom-out transition.
        cursor_smoothing_window_seconds: Width of the cursor smoothing window.
        ease_in: Cubic-bezier control points for zoom-in transitions.
        ease_out: Cubic-bezier control points for zoom-out transitions.
        preview_fps: Sampling rate used when building preview timelines.
    """

    zoom_duration_seconds: float = DEFAULT_ZOOM_DURATION_SECONDS
    cursor_smoothing_window_seconds: float = DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS
    ease_in: BezierControlPoints = DEFAULT_EASE_IN
    ease_out: BezierControlPoints = DEFAULT_EASE_OUT
    preview_fps: float = DEFAULT_PREVIEW_FPS


def _read_positive_float(env_var: str, default: float) -> float:
    """Reads a positive finite float from the environment."""
    raw_value = os.getenv(env_var, "").strip()
    if not raw_value:
        return default
    try:
        value = float(raw_value)
    except ValueError as err:
        raise ValueError(f"{env_var} must be a float, got {raw_value!r}.") from err
    if not math.isfinite(value) or value <= 0.0:
        raise ValueError(f"{env_var} must be a positive finite float.")
    return value


def parse_control_points(raw_value: str) -> BezierControlPoints:
    """Parses ``"x1,y1,x2,y2"`` into cubic-bezier control points."""
    parts = [part.strip() for part in raw_value.split(",")]
    if len(parts) != 4:
        raise ValueError(
            f"Expected four comma-separated control points, got {raw_value!r}."
        )
    try:
        x1, y1, x2, y2 = (float(part) for part in parts)
    except ValueError as err:
        raise ValueError(f"Invalid control points {raw_value!r}.") from err
    return (x1, y1, x2, y2)


def _read_control_points(
    env_var: str, default: BezierControlPoints
) -> BezierControlPoints:
    raw_value = os.getenv(env_var, "").strip()
    if not raw_value:
        return default
    return parse_control_points(raw_value)


def _load_settings() -> ZoomSettings:
    load_dotenv()
    return ZoomSettings(
        zoom_duration_seconds=_read_positive_float(
            "ZOOMKIT_ZOOM_DURATION_SECONDS", DEFAULT_ZOOM_DURATION_SECONDS
        ),
        cursor_smoothing_window_seconds=_read_positive_float(
            "ZOOMKIT_CURSOR_SMOOTHING_WINDOW_SECONDS",
            DEFAULT_CURSOR_SMOOTHING_WINDOW_SECONDS,
        ),
        ease_in=_read_control_points("ZOOMKIT_EASE_IN", DEFAULT_EASE_IN),
        ease_out=_read_control_points("ZOOMKIT_EASE_OUT", DEFAULT_EASE_OUT),
        preview_fps=_read_positive_float("ZOOMKIT_PREVIEW_FPS", DEFAULT_PREVIEW_FPS),
    )


_SETTINGS: ZoomSettings | None = None


def reload_settings() -> ZoomSettings:
    """Re-reads settings from the environment and returns them."""
    global _SETTINGS
    _SETTINGS = _load_settings()
    return _SETTINGS


def get_settings() -> ZoomSettings:
    """Returns the current settings, loading them on first use."""
    if _SETTINGS is None:
        return reload_settings()
    return _SETTINGS
