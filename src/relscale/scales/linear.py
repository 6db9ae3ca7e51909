"""
Linear scale: affine interpolation between fixed bounds.

    relative = (absolute - min) / (max - min)
    absolute = min + relative * (max - min)

An optional rasterizer is applied to every absolute value handed back to
the caller; relative outputs are never rasterized.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from ..convert import FLOAT_BRIDGE, Bridge
from ..core.logging import get_logger
from .base import F, N, Scale, clamp_between, ieee_div

logger = get_logger(__name__)

Rasterizer = Callable[[N], N]


class LinearScale(Scale[N, F]):
    """
    Affine mapping between ``[min, max]`` and ``[0, 1]``.

    Values outside either range extrapolate along the same line.
    ``min == max`` is not special-cased: to_relative divides by a zero
    span and returns NaN or Infinity.
    """

    __slots__ = ("_min", "_max", "_rasterizer", "_bridge", "_lo", "_hi", "_span")

    def __init__(
        self,
        min: N,
        max: N,
        rasterizer: Optional[Rasterizer] = None,
        bridge: Bridge[N, F] = FLOAT_BRIDGE,
    ) -> None:
        self._min = min
        self._max = max
        self._rasterizer = rasterizer
        self._bridge = bridge
        # Bounds are fixed, so their float forms are computed once
        self._lo = bridge.to_f64(min)
        self._hi = bridge.to_f64(max)
        self._span = self._hi - self._lo

        logger.debug(
            f"Created linear scale [{min!r}, {max!r}] "
            f"(bridge={bridge.name}, rasterized={rasterizer is not None})"
        )

    @classmethod
    def with_min_max(
        cls, min: N, max: N, bridge: Bridge[N, F] = FLOAT_BRIDGE
    ) -> LinearScale[N, F]:
        """Create a scale without rasterization."""
        return cls(min, max, bridge=bridge)

    @classmethod
    def with_min_max_and_rasterizer(
        cls,
        min: N,
        max: N,
        rasterizer: Rasterizer,
        bridge: Bridge[N, F] = FLOAT_BRIDGE,
    ) -> LinearScale[N, F]:
        """Create a scale whose absolute outputs pass through ``rasterizer``."""
        return cls(min, max, rasterizer=rasterizer, bridge=bridge)

    @property
    def bridge(self) -> Bridge[N, F]:
        return self._bridge

    @property
    def rasterizer(self) -> Optional[Rasterizer]:
        return self._rasterizer

    def get_min(self) -> N:
        return self._min

    def get_max(self) -> N:
        return self._max

    def to_relative(self, absolute: N) -> F:
        offset = self._bridge.to_f64(absolute) - self._lo
        return self._bridge.aux_from_f64(ieee_div(offset, self._span))

    def interpolate(self, relative: F) -> N:
        """Affine mapping from a relative position without rasterization."""
        r = self._bridge.aux_to_f64(relative)
        # Endpoints map to the stored bounds exactly
        if r == 0.0:
            return self._min
        if r == 1.0:
            return self._max
        x = self._lo + r * self._span
        if 0.0 < r < 1.0:
            x = clamp_between(x, self._lo, self._hi)
        return self._bridge.from_f64(x)

    def rasterize(self, absolute: N) -> N:
        """Apply the rasterizer, if any."""
        if self._rasterizer is None:
            return absolute
        return self._rasterizer(absolute)

    def to_absolute(self, relative: F) -> N:
        return self.rasterize(self.interpolate(relative))
