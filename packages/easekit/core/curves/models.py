"""Curve sample models.

A ``CurvePoint`` is one evaluated sample of an easing curve. Time is
normally inside [0, 1]; the value is unconstrained because overshooting
curves (elastic, back) leave [0, 1] by design.
"""

from pydantic import BaseModel, ConfigDict, Field


class CurvePoint(BaseModel):
    """A single sample on an easing curve.

    This model is immutable (frozen=True).

    Attributes:
        t: Normalized time.
        v: Curve value at ``t``. May fall outside [0, 1] or be NaN.

    Example:
        >>> point = CurvePoint(t=0.5, v=0.25)
        >>> point.v
        0.25
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    t: float = Field(..., allow_inf_nan=False, description="Normalized time")
    v: float = Field(..., description="Eased value")
