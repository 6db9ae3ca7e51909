"""
Ready-made rasterizers.

Each helper validates its parameters once and returns a plain callable
suitable for ``with_min_max_and_rasterizer``. The callables accept
anything ``float()`` accepts and never raise. NaN and Infinity pass
through unchanged.

Example:
    from relscale import LinearScale
    from relscale.scales.rasterize import snap_to_step

    volume = LinearScale.with_min_max_and_rasterizer(0.0, 100.0, snap_to_step(5.0))
    volume.to_absolute(0.33)  # 35.0
"""

from __future__ import annotations

import bisect
import math
from collections.abc import Callable, Iterable

from ..errors import RasterizerConfigError


def snap_to_step(step: float, origin: float = 0.0) -> Callable[[float], float]:
    """
    Snap to the nearest point of the grid ``origin + k * step``.

    Ties round half to even, like the built-in round().
    """
    step = float(step)
    origin = float(origin)
    if not step > 0 or not math.isfinite(step):
        raise RasterizerConfigError("step", f"step must be a positive finite number, got {step}")

    def rasterize(value: float) -> float:
        value = float(value)
        quotient = (value - origin) / step
        # Huge values overflow the quotient; there is no grid point to snap to
        if not math.isfinite(quotient):
            return value
        return origin + round(quotient) * step

    return rasterize


def snap_to_values(values: Iterable[float]) -> Callable[[float], float]:
    """
    Snap to the nearest member of a fixed set of allowed values.

    Ties go to the lower value.
    """
    allowed = sorted({float(v) for v in values})
    if not allowed:
        raise RasterizerConfigError("values", "at least one allowed value is required")
    if not all(math.isfinite(v) for v in allowed):
        raise RasterizerConfigError("values", "allowed values must be finite")

    def rasterize(value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            return value
        i = bisect.bisect_left(allowed, value)
        if i == 0:
            return allowed[0]
        if i == len(allowed):
            return allowed[-1]
        lower, upper = allowed[i - 1], allowed[i]
        return lower if value - lower <= upper - value else upper

    return rasterize


def round_significant(digits: int) -> Callable[[float], float]:
    """Round to a number of significant digits (e.g. 3 -> 1234.5 becomes 1230.0)."""
    if digits < 1:
        raise RasterizerConfigError("significant_digits", f"digits must be >= 1, got {digits}")

    def rasterize(value: float) -> float:
        value = float(value)
        if value == 0 or not math.isfinite(value):
            return value
        magnitude = math.floor(math.log10(abs(value)))
        return round(value, digits - 1 - magnitude)

    return rasterize
