"""Curve sampling infrastructure.

This module provides functions for sampling easing curves at uniform
intervals, either into ``CurvePoint`` lists or into numpy arrays for
vectorized use.
"""

from __future__ import annotations

import numpy as np

from easekit.core.curves.easing import EaseMode, EasingCurve
from easekit.core.curves.models import CurvePoint


def sample_uniform_grid(n: int, *, endpoint: bool = False) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1) or [0, 1].

    Returns N samples: [0.0, 1/N, 2/N, ..., (N-1)/N], or with
    ``endpoint=True``: [0.0, 1/(N-1), ..., 1.0].

    Args:
        n: Number of samples to generate. Must be >= 2.
        endpoint: Include 1.0 as the last sample.

    Returns:
        List of N evenly-spaced float values.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(4)
        [0.0, 0.25, 0.5, 0.75]
        >>> sample_uniform_grid(5, endpoint=True)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    if endpoint:
        return [i / (n - 1) for i in range(n)]
    return [i / n for i in range(n)]


def sample_curve(
    curve: EasingCurve,
    n_samples: int,
    mode: EaseMode | str = EaseMode.IN,
    *,
    endpoint: bool = True,
) -> list[CurvePoint]:
    """Evaluate a curve on a uniform grid.

    Args:
        curve: Curve to sample.
        n_samples: Number of samples (must be >= 2).
        mode: Which form of the curve to evaluate.
        endpoint: Include t=1.0 as the last sample.

    Returns:
        List of CurvePoints in time order.

    Raises:
        ValueError: If n_samples < 2 or mode is unknown.

    Example:
        >>> from easekit.core.curves.functions import PowerEasing
        >>> [p.v for p in sample_curve(PowerEasing(2), 3)]
        [0.0, 0.25, 1.0]
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    mode = EaseMode(mode)
    t_grid = sample_uniform_grid(n_samples, endpoint=endpoint)
    return [CurvePoint(t=t, v=float(curve.evaluate(t, mode))) for t in t_grid]


def sample_curve_array(
    curve: EasingCurve,
    n_samples: int,
    mode: EaseMode | str = EaseMode.IN,
    *,
    endpoint: bool = True,
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate a curve on a uniform grid in one vectorized call.

    Args:
        curve: Curve to sample.
        n_samples: Number of samples (must be >= 2).
        mode: Which form of the curve to evaluate.
        endpoint: Include t=1.0 as the last sample.

    Returns:
        Tuple of (times, values) float64 arrays of length ``n_samples``.

    Raises:
        ValueError: If n_samples < 2 or mode is unknown.
    """
    if n_samples < 2:
        raise ValueError("n_samples must be >= 2")

    times = np.linspace(0.0, 1.0, n_samples, endpoint=endpoint)
    values = np.asarray(curve.evaluate(times, EaseMode(mode)), dtype=np.float64)
    return times, values
