"""Shared curve cases for easing tests."""

from easekit.core.curves.easing import EasingCurve
from easekit.core.curves.functions import (
    BackEasing,
    BounceEasing,
    CircleEasing,
    ElasticEasing,
    ExponentialEasing,
    PowerEasing,
    SineEasing,
)

# Curves that pass through (0, 0) and (1, 1)
NORMALIZED_CURVES: dict[str, EasingCurve] = {
    "power_2": PowerEasing(power=2),
    "power_3": PowerEasing(power=3),
    "power_half": PowerEasing(power=0.5),
    "exponential_1": ExponentialEasing(exponent=1.0),
    "exponential_neg": ExponentialEasing(exponent=-4.0),
    "circle": CircleEasing(),
    "elastic": ElasticEasing(),
    "elastic_linear": ElasticEasing(oscillations=2, springiness=0.0),
    "bounce": BounceEasing(),
    "bounce_5": BounceEasing(bounces=5, bounciness=1.5),
    "back": BackEasing(),
    "back_strong": BackEasing(amplitude=2.5),
}

ALL_CURVES: dict[str, EasingCurve] = {**NORMALIZED_CURVES, "sine": SineEasing()}

T_VALUES = [0.0, 0.05, 0.1, 0.25, 0.4, 0.5, 0.6, 0.75, 0.9, 0.95, 1.0]

__all__ = ["ALL_CURVES", "NORMALIZED_CURVES", "T_VALUES"]
