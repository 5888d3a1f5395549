"""Easing curves applied on top of linear phase ratios.

Easing only shapes how a renderer presents a phase; the timeline itself
always reasons about the linear ratio. All functions take a normalized
time t (0.0 to 1.0). Back-style bezier presets may overshoot [0, 1].
"""

from enum import Enum, auto
from typing import Callable


class Easing(Enum):
    """Available easing curve types."""

    LINEAR = auto()

    EASE_IN_CUBIC = auto()
    EASE_OUT_CUBIC = auto()

    # Cubic-bezier presets used by the presentation scenes
    SMOOTH = auto()
    BOUNCE = auto()
    ELASTIC = auto()
    SNAP = auto()


EasingFunc = Callable[[float], float]


class CubicBezier:
    """CSS-style ``cubic-bezier(x1, y1, x2, y2)`` timing curve.

    Solves x(s) = t for the curve parameter s with Newton iterations,
    falling back to bisection when the slope is too flat.
    """

    _NEWTON_ITERATIONS = 8
    _EPSILON = 1e-7

    def __init__(self, x1: float, y1: float, x2: float, y2: float):
        self.points = (x1, y1, x2, y2)
        # Polynomial coefficients for x(s) and y(s)
        self._cx = 3.0 * x1
        self._bx = 3.0 * (x2 - x1) - self._cx
        self._ax = 1.0 - self._cx - self._bx
        self._cy = 3.0 * y1
        self._by = 3.0 * (y2 - y1) - self._cy
        self._ay = 1.0 - self._cy - self._by

    def __repr__(self) -> str:
        return "CubicBezier(%s, %s, %s, %s)" % self.points

    def _sample_x(self, s: float) -> float:
        return ((self._ax * s + self._bx) * s + self._cx) * s

    def _sample_y(self, s: float) -> float:
        return ((self._ay * s + self._by) * s + self._cy) * s

    def _slope_x(self, s: float) -> float:
        return (3.0 * self._ax * s + 2.0 * self._bx) * s + self._cx

    def _solve_x(self, x: float) -> float:
        s = x
        for _ in range(self._NEWTON_ITERATIONS):
            error = self._sample_x(s) - x
            if abs(error) < self._EPSILON:
                return s
            slope = self._slope_x(s)
            if abs(slope) < 1e-6:
                break
            s -= error / slope

        low, high = 0.0, 1.0
        s = x
        while low < high:
            value = self._sample_x(s)
            if abs(value - x) < self._EPSILON:
                return s
            if x > value:
                low = s
            else:
                high = s
            s = (high - low) / 2.0 + low
            if high - low < self._EPSILON:
                break
        return s

    def __call__(self, t: float) -> float:
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return 1.0
        return self._sample_y(self._solve_x(t))


def linear(t: float) -> float:
    """Linear interpolation (no easing)."""
    return t


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - pow(1 - t, 3)


_EASING_FUNCTIONS: dict[Easing, EasingFunc] = {
    Easing.LINEAR: linear,

    Easing.EASE_IN_CUBIC: ease_in_cubic,
    Easing.EASE_OUT_CUBIC: ease_out_cubic,

    Easing.SMOOTH: CubicBezier(0.43, 0.13, 0.23, 0.96),
    Easing.BOUNCE: CubicBezier(0.68, -0.55, 0.265, 1.55),
    Easing.ELASTIC: CubicBezier(0.175, 0.885, 0.32, 1.275),
    Easing.SNAP: CubicBezier(0.95, 0.05, 0.795, 0.035),
}


def get_easing(easing: Easing | str) -> EasingFunc:
    """Get an easing function by enum or name.

    Args:
        easing: Easing enum value or string name (e.g., "ease_out_cubic")

    Returns:
        The easing function

    Raises:
        ValueError: If easing name is not recognized
    """
    if isinstance(easing, str):
        try:
            easing = Easing[easing.upper()]
        except KeyError:
            raise ValueError(f"Unknown easing function: {easing}") from None

    func = _EASING_FUNCTIONS.get(easing)
    if func is None:
        raise ValueError(f"No function registered for: {easing}")

    return func

