"""Basic easing curves: power, exponential, circle and sine."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from easekit.core.curves.easing import EasingCurve, Time, float_safe


@dataclass(frozen=True)
class PowerEasing(EasingCurve):
    """Polynomial ease-in ``t ** power``.

    Covers the quadratic, cubic, quartic and quintic families.

    Attributes:
        power: Exponent applied to time.

    Example:
        >>> float(PowerEasing(power=3).ease_in(0.5))
        0.125
    """

    power: float

    @float_safe
    def ease_in(self, t: Time) -> Time:
        return np.float_power(t, self.power)


@dataclass(frozen=True)
class ExponentialEasing(EasingCurve):
    """Exponential ease-in normalized to pass through (0, 0) and (1, 1).

    ``(e^(exponent * t) - 1) / (e^exponent - 1)``

    An exponent of 0 divides zero by zero and yields NaN; callers must
    pick a non-zero rate.

    Attributes:
        exponent: Growth rate. Larger values give a steeper finish.
    """

    exponent: float

    @float_safe
    def ease_in(self, t: Time) -> Time:
        return (np.exp(np.multiply(self.exponent, t)) - 1.0) / (np.exp(self.exponent) - 1.0)


@dataclass(frozen=True)
class CircleEasing(EasingCurve):
    """Quarter-circle arc ``1 - sqrt(1 - t^2)``."""

    @float_safe
    def ease_in(self, t: Time) -> Time:
        return 1.0 - np.sqrt(1.0 - np.power(t, 2))


@dataclass(frozen=True)
class SineEasing(EasingCurve):
    """Sine ease-in ``1 - (sin(1 - t) + pi/2)``.

    Note:
        This formula does not pass through (0, 0) and (1, 1): it starts at
        ``1 - sin(1) - pi/2`` and ends at ``1 - pi/2``. It is kept as-is;
        use ``PowerEasing`` or ``CircleEasing`` for a normalized gentle ease.
    """

    @float_safe
    def ease_in(self, t: Time) -> Time:
        return 1.0 - (np.sin(np.subtract(1.0, t)) + np.pi * 0.5)
