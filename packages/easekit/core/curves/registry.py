"""Curve registry and definition resolution."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from easekit.core.curves.easing import EaseMode, EasingCurve, Time
from easekit.core.curves.models import CurvePoint
from easekit.core.curves.sampling import sample_curve

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 64


@dataclass(frozen=True)
class CurveDefinition:
    """Reference to a registered curve with parameter overrides."""

    curve_id: str
    params: dict[str, Any] | None = None
    mode: EaseMode = EaseMode.IN


@dataclass(frozen=True)
class CurveSpec:
    """Registry entry for building a curve."""

    curve_id: str
    factory: Callable[..., EasingCurve]
    default_params: dict[str, Any] | None = None
    description: str | None = None


class CurveRegistry:
    """Registry of named curve factories.

    Example:
        >>> from easekit.core.curves.functions import PowerEasing
        >>> registry = CurveRegistry()
        >>> registry.register(CurveSpec("quad", PowerEasing, {"power": 2}))
        >>> float(registry.evaluate(CurveDefinition("quad"), 0.5))
        0.25
    """

    def __init__(self, default_samples: int = DEFAULT_SAMPLES, endpoint: bool = True) -> None:
        if default_samples < 2:
            raise ValueError("default_samples must be >= 2")
        self._registry: dict[str, CurveSpec] = {}
        self.default_samples = default_samples
        self.endpoint = endpoint

    def __contains__(self, curve_id: object) -> bool:
        return curve_id in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def register(self, spec: CurveSpec) -> None:
        if spec.curve_id in self._registry:
            raise ValueError(f"Curve '{spec.curve_id}' already registered")
        self._registry[spec.curve_id] = spec
        logger.debug("Registered curve '%s'", spec.curve_id)

    def get(self, curve_id: str) -> CurveSpec:
        try:
            return self._registry[curve_id]
        except KeyError as exc:
            raise ValueError(f"Curve '{curve_id}' is not registered") from exc

    def list_curves(self) -> list[str]:
        """Return registered curve ids in sorted order."""
        return sorted(self._registry)

    def build(self, definition: CurveDefinition | str, **params: Any) -> EasingCurve:
        """Construct the curve named by a definition.

        Parameters are merged in order: spec defaults, definition params,
        then keyword overrides.

        Args:
            definition: Curve definition or bare curve id.
            **params: Extra parameter overrides.

        Raises:
            ValueError: If the curve is not registered or a parameter is not
                accepted by the curve.
        """
        if isinstance(definition, str):
            definition = CurveDefinition(curve_id=definition)

        spec = self.get(definition.curve_id)
        merged = dict(spec.default_params or {})
        merged.update(definition.params or {})
        merged.update(params)

        try:
            return spec.factory(**merged)
        except TypeError as exc:
            raise ValueError(f"Invalid parameters for curve '{spec.curve_id}': {exc}") from exc

    def evaluate(self, definition: CurveDefinition, t: Time) -> Time:
        """Build a definition's curve and evaluate it in the definition's mode."""
        return self.build(definition).evaluate(t, definition.mode)

    def resolve(
        self, definition: CurveDefinition, *, n_samples: int | None = None
    ) -> list[CurvePoint]:
        """Resolve a curve definition into points.

        Args:
            definition: Curve definition.
            n_samples: Optional override for sample count.

        Raises:
            ValueError: If the curve is unknown or n_samples < 2.
        """
        curve = self.build(definition)
        sample_count = self.default_samples if n_samples is None else n_samples
        logger.debug(
            "Resolving curve '%s' (mode=%s, samples=%d)",
            definition.curve_id,
            EaseMode(definition.mode).value,
            sample_count,
        )
        return sample_curve(curve, sample_count, definition.mode, endpoint=self.endpoint)


def resolve_curve(
    registry: CurveRegistry,
    definition: CurveDefinition,
    *,
    n_samples: int | None = None,
) -> list[CurvePoint]:
    """Convenience wrapper for resolving a curve definition."""
    return registry.resolve(definition, n_samples=n_samples)
