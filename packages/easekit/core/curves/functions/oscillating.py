"""Easing curves that overshoot their bounds: elastic and back."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from easekit.core.curves.easing import EasingCurve, Time, float_safe


@dataclass(frozen=True)
class ElasticEasing(EasingCurve):
    """Spring-like oscillation that grows into the target.

    A sine carrier with ``oscillations`` full cycles (plus a quarter cycle so
    the curve ends on a peak) is scaled by an exponential envelope. With
    ``springiness == 0`` the envelope is linear.

    Attributes:
        oscillations: Number of full oscillations before settling.
        springiness: Envelope steepness; higher values keep early swings small.

    Example:
        >>> curve = ElasticEasing(oscillations=3, springiness=3.0)
        >>> round(float(curve.ease_in(1.0)), 9)
        1.0
    """

    oscillations: int = 3
    springiness: float = 3.0

    @float_safe
    def ease_in(self, t: Time) -> Time:
        if self.springiness == 0:
            envelope = t
        else:
            envelope = (np.exp(np.multiply(self.springiness, t)) - 1.0) / (
                np.exp(self.springiness) - 1.0
            )

        frequency = np.pi * 2.0 * self.oscillations + np.pi * 0.5
        return envelope * np.sin(np.multiply(frequency, t))


@dataclass(frozen=True)
class BackEasing(EasingCurve):
    """Pull back below zero before heading to the target.

    ``t^3 - t * amplitude * sin(pi * t)``

    Attributes:
        amplitude: Depth of the pull-back. 0 reduces to a cubic ease.
    """

    amplitude: float = 1.0

    @float_safe
    def ease_in(self, t: Time) -> Time:
        return np.power(t, 3.0) - np.multiply(t, self.amplitude) * np.sin(np.multiply(np.pi, t))
