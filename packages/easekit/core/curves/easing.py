"""Easing curve abstraction and in/out composition.

Every curve implements a single ``ease_in`` over normalized time. The
ease-out and ease-in-out forms are derived here once and shared by all
variants:

- ``ease_out(t) = 1 - ease_in(1 - t)``
- ``ease_in_out`` doubles ``t``, then uses ``ease_in`` below 1 and
  ``ease_out`` from 1 on, each compressed into half the output range.

Evaluation accepts a float or a numpy array. Out-of-range times are not
clamped; whatever the formula yields (including NaN) is returned.
"""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

import numpy as np

Time = float | np.ndarray

_F = TypeVar("_F", bound=Callable[..., Time])


class EaseMode(str, Enum):
    """Which side of a curve to evaluate."""

    IN = "in"
    OUT = "out"
    IN_OUT = "in_out"


def float_safe(func: _F) -> _F:
    """Run ``func`` with numpy floating-point warnings silenced.

    Invalid operations (sqrt/log of negatives, 0/0) and overflow produce
    NaN or inf instead of warnings, so every curve is total over finite
    input.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


class EasingCurve(ABC):
    """Base class for easing curves.

    Subclasses implement ``ease_in`` only. Instances are immutable and safe
    to share between threads.

    Example:
        >>> from easekit.core.curves.functions import PowerEasing
        >>> curve = PowerEasing(power=2)
        >>> float(curve.ease_in(0.5))
        0.25
        >>> float(curve.ease_out(0.5))
        0.75
    """

    @abstractmethod
    def ease_in(self, t: Time) -> Time:
        """Evaluate the accelerating form of the curve at ``t``."""

    def ease_out(self, t: Time) -> Time:
        """Evaluate the decelerating form: the time-reversed complement of ``ease_in``."""
        return 1 - self.ease_in(1 - t)

    def ease_in_out(self, t: Time) -> Time:
        """Evaluate the in-out composition with this curve on both halves."""
        return ease_in_out(t, self, self)

    def evaluate(self, t: Time, mode: EaseMode | str = EaseMode.IN) -> Time:
        """Evaluate the curve in the given mode.

        Args:
            t: Normalized time (float or numpy array).
            mode: ``"in"``, ``"out"`` or ``"in_out"``.

        Raises:
            ValueError: If mode is not a valid EaseMode.
        """
        mode = EaseMode(mode)
        if mode is EaseMode.IN:
            return self.ease_in(t)
        if mode is EaseMode.OUT:
            return self.ease_out(t)
        return self.ease_in_out(t)


@float_safe
def ease_in_out(t: Time, curve_in: EasingCurve, curve_out: EasingCurve) -> Time:
    """Blend two curves into one in-out curve.

    ``t`` is doubled. Below 1 the result is ``curve_in.ease_in(2t) / 2``;
    from 1 on it is ``curve_out.ease_out(2t) / 2 + 0.5``. The doubled time
    is passed to ``ease_out`` without re-basing, so the second half samples
    ``ease_out`` on [1, 2]. For normalized curves the result jumps from 0.5
    to 1 at ``t = 0.5`` and ``t = 1`` evaluates ``ease_out(2)``, which is
    0.5 for a quadratic.

    Args:
        t: Normalized time (float or numpy array).
        curve_in: Curve supplying the acceleration shape.
        curve_out: Curve supplying the deceleration shape.

    Returns:
        Blended value; array input is evaluated element-wise.

    Example:
        >>> from easekit.core.curves.functions import CircleEasing, PowerEasing
        >>> float(ease_in_out(0.25, PowerEasing(2), CircleEasing()))
        0.125
        >>> float(ease_in_out(1.0, PowerEasing(2), PowerEasing(2)))
        0.5
    """
    t = t * 2

    if np.ndim(t) == 0:
        if t < 1:
            return curve_in.ease_in(t) * 0.5
        return curve_out.ease_out(t) * 0.5 + 0.5

    return np.where(t < 1, curve_in.ease_in(t) * 0.5, curve_out.ease_out(t) * 0.5 + 0.5)
