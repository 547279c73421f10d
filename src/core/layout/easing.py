"""
easing.py
---------
Easing curves for layout animation.

Eased values may leave [0, 1] before the end of the curve; callers must
still snap to the exact target once raw progress reaches 1.
"""

import math

from src.core.runtime.game_settings import LayoutSettings


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(value, high))


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation. t outside [0, 1] extrapolates."""
    return start + (end - start) * t


def elastic_offset(t: float, period: float = LayoutSettings.ELASTIC_PERIOD) -> float:
    """
    Decaying sine term of the elastic curve.

    ease(t) = -(2^(10(t-1)) * sin((t - 1 - s) * 2pi / p)),  s = p / 2pi * asin(1)

    Returns exactly t at 0 and 1.
    """
    if t == 0 or t == 1:
        return t
    s = period / (2 * math.pi) * math.asin(1)
    return -(math.pow(2, 10 * (t - 1)) * math.sin((t - 1 - s) * (2 * math.pi) / period))


def elastic_ease_out(t: float, period: float = LayoutSettings.ELASTIC_PERIOD) -> float:
    """
    Eased progress with a bounce that settles on 1.

    Args:
        t: Raw progress, clamped to [0, 1]
        period: Oscillation period of the bounce

    Returns:
        1 + elastic_offset(t) while t < 1, exactly 1.0 at t = 1
    """
    t = clamp(t)
    if t >= 1:
        return 1.0
    return 1 + elastic_offset(t, period)
