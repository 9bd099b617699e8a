"""Easing curves, composition and sampling."""

from easekit.core.curves.easing import EaseMode, EasingCurve, ease_in_out
from easekit.core.curves.functions import (
    BackEasing,
    BounceEasing,
    CircleEasing,
    ElasticEasing,
    ExponentialEasing,
    PowerEasing,
    SineEasing,
)
from easekit.core.curves.library import CurveLibrary, build_default_registry
from easekit.core.curves.models import CurvePoint
from easekit.core.curves.registry import CurveDefinition, CurveRegistry, CurveSpec
from easekit.core.curves.sampling import sample_curve, sample_curve_array

__all__ = [
    # Abstraction
    "EaseMode",
    "EasingCurve",
    "ease_in_out",
    # Variants
    "BackEasing",
    "BounceEasing",
    "CircleEasing",
    "ElasticEasing",
    "ExponentialEasing",
    "PowerEasing",
    "SineEasing",
    # Registry
    "CurveDefinition",
    "CurveLibrary",
    "CurveRegistry",
    "CurveSpec",
    "build_default_registry",
    # Sampling
    "CurvePoint",
    "sample_curve",
    "sample_curve_array",
]
