"""
Pydantic models for declarative scale configuration.

A ScaleSpec describes a scale as data (for example loaded from a settings
file) and build_scale turns it into a live Scale via the registry.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .convert import FLOAT_BRIDGE, Bridge
from .scales.base import Scale
from .scales.rasterize import round_significant, snap_to_step, snap_to_values
from .scales.registry import get_scale_registry


class ScaleSpec(BaseModel):
    """
    Declarative description of a scale.

    Bounds are not checked against each other; degenerate bounds produce
    NaN/Infinity from the scale itself. At most one rasterizer option may
    be set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: str = Field(
        default="linear",
        description="Registered scale kind (linear, log, logarithmic or a custom kind)",
    )
    min: float = Field(description="Lower bound in absolute units")
    max: float = Field(description="Upper bound in absolute units")
    step: Optional[Annotated[float, Field(gt=0, allow_inf_nan=False)]] = Field(
        default=None, description="Snap to multiples of step"
    )
    values: Optional[list[Annotated[float, Field(allow_inf_nan=False)]]] = Field(
        default=None, min_length=1, description="Snap to the nearest allowed value"
    )
    significant_digits: Optional[int] = Field(
        default=None, ge=1, description="Round to this many significant digits"
    )

    @model_validator(mode="after")
    def single_rasterizer(self) -> ScaleSpec:
        """Reject specs that configure more than one rasterizer."""
        options = [
            name
            for name in ("step", "values", "significant_digits")
            if getattr(self, name) is not None
        ]
        if len(options) > 1:
            raise ValueError(f"only one rasterizer option allowed, got: {', '.join(options)}")
        return self

    def rasterizer(self) -> Optional[Callable[[float], float]]:
        """Build the configured rasterizer, or None."""
        if self.step is not None:
            return snap_to_step(self.step)
        if self.values is not None:
            return snap_to_values(self.values)
        if self.significant_digits is not None:
            return round_significant(self.significant_digits)
        return None


def build_scale(
    spec: Union[ScaleSpec, dict[str, Any]],
    bridge: Bridge = FLOAT_BRIDGE,
) -> Scale:
    """
    Create a scale from a ScaleSpec or an equivalent dict.

    Args:
        spec: Scale description
        bridge: Conversion bridge for the created scale

    Returns:
        LinearScale or LogarithmicScale (or a registered custom kind)

    Raises:
        pydantic.ValidationError: If a dict spec is invalid
    """
    if not isinstance(spec, ScaleSpec):
        spec = ScaleSpec.model_validate(spec)

    rasterizer = spec.rasterizer()
    if rasterizer is not None:
        rasterizer = _in_domain(rasterizer, bridge)

    return get_scale_registry().create(
        spec.kind,
        bridge.from_f64(spec.min),
        bridge.from_f64(spec.max),
        rasterizer=rasterizer,
        bridge=bridge,
    )


def _in_domain(rasterizer: Callable[[float], float], bridge: Bridge) -> Callable[[Any], Any]:
    """Run a float rasterizer on domain values, returning domain values."""

    def rasterize(value: Any) -> Any:
        return bridge.from_f64(rasterizer(bridge.to_f64(value)))

    return rasterize
