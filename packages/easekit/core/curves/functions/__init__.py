"""Built-in easing curve variants."""

from easekit.core.curves.functions.basic import (
    CircleEasing,
    ExponentialEasing,
    PowerEasing,
    SineEasing,
)
from easekit.core.curves.functions.bounce import BounceEasing
from easekit.core.curves.functions.oscillating import BackEasing, ElasticEasing

__all__ = [
    "BackEasing",
    "BounceEasing",
    "CircleEasing",
    "ElasticEasing",
    "ExponentialEasing",
    "PowerEasing",
    "SineEasing",
]
