"""Curve library for registering built-in easing curves."""

from __future__ import annotations

from enum import Enum
from typing import Any

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
from easekit.core.curves.registry import DEFAULT_SAMPLES, CurveRegistry, CurveSpec


class CurveLibrary(str, Enum):
    """Identifiers for built-in curves."""

    # Curve kinds
    POWER = "power"
    EXPONENTIAL = "exponential"
    CIRCLE = "circle"
    SINE = "sine"
    ELASTIC = "elastic"
    BOUNCE = "bounce"
    BACK = "back"

    # Power presets
    LINEAR = "linear"
    QUAD = "quad"
    CUBIC = "cubic"
    QUART = "quart"
    QUINT = "quint"

    # Exponential presets
    EXPO = "expo"


def build_default_registry(
    default_samples: int = DEFAULT_SAMPLES, endpoint: bool = True
) -> CurveRegistry:
    """Construct a registry containing all built-in curves."""
    registry = CurveRegistry(default_samples=default_samples, endpoint=endpoint)

    def register(
        curve_id: CurveLibrary,
        factory: type[EasingCurve],
        description: str,
        params: dict[str, Any] | None = None,
    ) -> None:
        registry.register(
            CurveSpec(
                curve_id=curve_id.value,
                factory=factory,
                default_params=params,
                description=description,
            )
        )

    # Kinds - callers supply required params
    register(CurveLibrary.POWER, PowerEasing, "t ** power", params={"power": 2.0})
    register(
        CurveLibrary.EXPONENTIAL,
        ExponentialEasing,
        "Normalized exponential growth",
        params={"exponent": 2.0},
    )
    register(CurveLibrary.CIRCLE, CircleEasing, "Quarter-circle arc")
    register(CurveLibrary.SINE, SineEasing, "Sine ease (unnormalized endpoints)")
    register(CurveLibrary.ELASTIC, ElasticEasing, "Decaying spring oscillation")
    register(CurveLibrary.BOUNCE, BounceEasing, "Decaying parabolic bounces")
    register(CurveLibrary.BACK, BackEasing, "Pull back before moving forward")

    # Presets
    register(CurveLibrary.LINEAR, PowerEasing, "Constant velocity", params={"power": 1.0})
    register(CurveLibrary.QUAD, PowerEasing, "Quadratic", params={"power": 2.0})
    register(CurveLibrary.CUBIC, PowerEasing, "Cubic", params={"power": 3.0})
    register(CurveLibrary.QUART, PowerEasing, "Quartic", params={"power": 4.0})
    register(CurveLibrary.QUINT, PowerEasing, "Quintic", params={"power": 5.0})
    register(CurveLibrary.EXPO, ExponentialEasing, "Steep exponential", params={"exponent": 7.0})

    return registry
