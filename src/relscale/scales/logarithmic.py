"""
Logarithmic (base 10) scale.

Equal relative steps correspond to equal ratios of absolute value. The
scale owns a LinearScale over ``log10(min)`` and ``log10(max)`` and lets
it do all interpolation; this module only moves values into and out of
log space through the conversion bridge.

Non-positive absolute values are outside the domain of log10: zero maps
to a relative position of -inf, negatives to NaN.
"""

from __future__ import annotations

from typing import Optional

from ..convert import FLOAT_BRIDGE, Bridge
from ..core.logging import get_logger
from .base import F, N, Scale, clamp_between, ieee_exp10, ieee_log10
from .linear import LinearScale, Rasterizer

logger = get_logger(__name__)


class LogarithmicScale(Scale[N, F]):
    """
    Base-10 logarithmic mapping between ``[min, max]`` and ``[0, 1]``.

    Example:
        scale = LogarithmicScale.with_min_max(10.0, 10240.0)
        scale.to_absolute(0.5)   # 320.0
        scale.to_absolute(0.6)   # 640.0, each 0.1 step doubles

    The rasterizer, if any, is carried by the internal linear scale but is
    applied to the final absolute value, never to the log-space value.
    """

    __slots__ = ("_min", "_max", "_lo", "_hi", "_linear")

    def __init__(
        self,
        min: N,
        max: N,
        rasterizer: Optional[Rasterizer] = None,
        bridge: Bridge[N, F] = FLOAT_BRIDGE,
    ) -> None:
        self._min = min
        self._max = max
        self._lo = bridge.to_f64(min)
        self._hi = bridge.to_f64(max)
        self._linear: LinearScale[N, F] = LinearScale(
            bridge.apply(min, ieee_log10),
            bridge.apply(max, ieee_log10),
            rasterizer=rasterizer,
            bridge=bridge,
        )

        logger.debug(f"Created logarithmic scale [{min!r}, {max!r}]")

    @classmethod
    def with_min_max(
        cls, min: N, max: N, bridge: Bridge[N, F] = FLOAT_BRIDGE
    ) -> LogarithmicScale[N, F]:
        """Create a scale without rasterization."""
        return cls(min, max, bridge=bridge)

    @classmethod
    def with_min_max_and_rasterizer(
        cls,
        min: N,
        max: N,
        rasterizer: Rasterizer,
        bridge: Bridge[N, F] = FLOAT_BRIDGE,
    ) -> LogarithmicScale[N, F]:
        """Create a scale whose absolute outputs pass through ``rasterizer``."""
        return cls(min, max, rasterizer=rasterizer, bridge=bridge)

    @property
    def bridge(self) -> Bridge[N, F]:
        return self._linear.bridge

    @property
    def linear_delegate(self) -> LinearScale[N, F]:
        """Internal linear scale over the log10 bounds."""
        return self._linear

    @property
    def rasterizer(self) -> Optional[Rasterizer]:
        return self._linear.rasterizer

    def get_min(self) -> N:
        return self._min

    def get_max(self) -> N:
        return self._max

    def to_relative(self, absolute: N) -> F:
        log_value = self.bridge.apply(absolute, ieee_log10)
        return self._linear.to_relative(log_value)

    def to_absolute(self, relative: F) -> N:
        bridge = self.bridge
        r = bridge.aux_to_f64(relative)
        # 10 ** log10(x) is not exact; endpoints and in-range results are
        # pinned to the stored bounds
        if r == 0.0:
            absolute = self._min
        elif r == 1.0:
            absolute = self._max
        else:
            log_value = self._linear.interpolate(relative)
            x = ieee_exp10(bridge.to_f64(log_value))
            if 0.0 < r < 1.0:
                x = clamp_between(x, self._lo, self._hi)
            absolute = bridge.from_f64(x)
        return self._linear.rasterize(absolute)
