"""Bounce easing curve.

Models a ball bouncing with decaying height before it comes to rest at 1.0.
The shape has three requirements:

1. Each bounce is a symmetric parabolic arc.
2. ``bounciness`` controls both the height and the width decay between
   successive bounces.
3. ``bounces`` counts full arcs, not including the final half arc that
   carries the curve to 1.0.

Modulating a power curve with ``abs(sin(...))`` would break requirement 1,
so the arcs are fitted explicitly:

- Bounce widths form a geometric series. The first bounce is one "unit"
  wide, the total width is the sum of the series with only half of the
  last term, and ``t`` is mapped into unit space.
- The series is inverted to find which bounce ``t`` falls in, and that
  bounce's start and end are projected back into time space.
- A downward parabola is fitted that is zero at both ends and peaks at
  ``(1 / bounciness) ** (bounces - bounce_index)``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from easekit.core.curves.easing import EasingCurve, Time, float_safe

# Substituted for bounciness <= 1, where the geometric series degenerates
MIN_BOUNCINESS = 1.0000001


@dataclass(frozen=True)
class BounceEasing(EasingCurve):
    """Series of decaying parabolic bounces ending in a half arc to 1.0.

    Attributes:
        bounces: Number of full bounces before the final half arc.
        bounciness: Ratio between successive bounce heights and widths.
            Values <= 1 are treated as ``MIN_BOUNCINESS``.

    Example:
        >>> curve = BounceEasing()
        >>> float(curve.ease_in(0.0)) == 0.0
        True
        >>> round(float(curve.ease_in(1.0)), 9)
        1.0
    """

    bounces: int = 3
    bounciness: float = 2.0

    @float_safe
    def ease_in(self, t: Time) -> Time:
        bounces = self.bounces
        bounciness = self.bounciness
        if bounciness <= 1.0:
            bounciness = MIN_BOUNCINESS

        pow_ = np.power(float(bounciness), bounces)
        one_minus_bounciness = 1.0 - bounciness

        # Unit space: geometric series with only half the last term
        sum_of_units = (1.0 - pow_) / one_minus_bounciness + pow_ * 0.5
        unit_at_t = np.multiply(t, sum_of_units)

        # Bounce space: solve unit_at_t = (1 - b^n) / (1 - b) for n
        bounce_at_t = np.log(-unit_at_t * (1.0 - bounciness) + 1.0) / np.log(bounciness)
        start = np.floor(bounce_at_t)
        end = start + 1.0

        # Time space
        start_time = (1.0 - np.power(bounciness, start)) / (one_minus_bounciness * sum_of_units)
        end_time = (1.0 - np.power(bounciness, end)) / (one_minus_bounciness * sum_of_units)

        # Parabola through (start_time, 0) and (end_time, 0) peaking at amplitude
        mid_time = (start_time + end_time) * 0.5
        time_relative_to_peak = t - mid_time
        radius = mid_time - start_time
        amplitude = np.power(1.0 / bounciness, bounces - start)

        return (
            (-amplitude / (radius * radius))
            * (time_relative_to_peak - radius)
            * (time_relative_to_peak + radius)
        )
