"""Cubic-bezier easing curves used for zoom transitions."""

from __future__ import annotations

from collections.abc import Callable

from zoomkit.config import BezierControlPoints

EasingFunction = Callable[[float], float]

_NEWTON_ITERATIONS = 8
_NEWTON_MIN_SLOPE = 1e-6
_SUBDIVISION_PRECISION = 1e-7
_SUBDIVISION_MAX_ITERATIONS = 30


def linear(progress: float) -> float:
    """Identity easing."""
    return progress


def _coefficients(p1: float, p2: float) -> tuple[float, float, float]:
    """Polynomial coefficients of one bezier axis with endpoints 0 and 1."""
    a = 1.0 - 3.0 * p2 + 3.0 * p1
    b = 3.0 * p2 - 6.0 * p1
    c = 3.0 * p1
    return a, b, c


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFunction:
    """Builds a CSS ``cubic-bezier(x1, y1, x2, y2)`` timing function.

    The curve runs from (0, 0) to (1, 1). For a progress value the curve
    parameter is found by solving ``x(s) = progress`` with Newton-Raphson,
    falling back to bisection where the slope is too flat, and ``y(s)`` is
    returned.

    Raises:
        ValueError: If ``x1`` or ``x2`` lie outside [0, 1], which would make
            the curve non-monotonic in time.
    """
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise ValueError("Bezier x control points must be within [0, 1].")

    if x1 == y1 and x2 == y2:
        return linear

    ax, bx, cx = _coefficients(x1, x2)
    ay, by, cy = _coefficients(y1, y2)

    def sample_x(s: float) -> float:
        return ((ax * s + bx) * s + cx) * s

    def sample_y(s: float) -> float:
        return ((ay * s + by) * s + cy) * s

    def slope_x(s: float) -> float:
        return (3.0 * ax * s + 2.0 * bx) * s + cx

    def solve_parameter(progress: float) -> float:
        s = progress
        for _ in range(_NEWTON_ITERATIONS):
            error = sample_x(s) - progress
            if abs(error) < _SUBDIVISION_PRECISION:
                return s
            slope = slope_x(s)
            if abs(slope) < _NEWTON_MIN_SLOPE:
                break
            s -= error / slope
            if not 0.0 <= s <= 1.0:
                break

        low, high = 0.0, 1.0
        s = progress
        for _ in range(_SUBDIVISION_MAX_ITERATIONS):
            error = sample_x(s) - progress
            if abs(error) < _SUBDIVISION_PRECISION:
                break
            if error > 0.0:
                high = s
            else:
                low = s
            s = (low + high) / 2.0
        return s

    def ease(progress: float) -> float:
        if progress <= 0.0:
            return 0.0
        if progress >= 1.0:
            return 1.0
        return sample_y(solve_parameter(progress))

    return ease


def easing_from_control_points(points: BezierControlPoints) -> EasingFunction:
    """Builds a bezier easing function from an ``(x1, y1, x2, y2)`` tuple."""
    return cubic_bezier(*points)

