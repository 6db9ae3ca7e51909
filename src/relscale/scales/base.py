"""
Scale abstraction.

A scale maps an absolute value in ``[min, max]`` to a relative position in
``[0, 1]`` and back. Strategies implement the two primitive conversions;
the clamped variants are built here once and never reimplemented.

Undefined math never raises. The float helpers below route through numpy
with floating point errors ignored so that division by a zero span, log10
of a non-positive value and overflow yield IEEE NaN/Infinity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import numpy as np

from ..convert import Bridge

N = TypeVar("N")
F = TypeVar("F")


# =============================================================================
# IEEE Float Helpers
# =============================================================================


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics (x/0 -> +-inf, 0/0 -> nan)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def ieee_log10(x: float) -> float:
    """log10 with IEEE semantics (0 -> -inf, negative -> nan)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.log10(np.float64(x)))


def ieee_exp10(x: float) -> float:
    """10 ** x with IEEE semantics (overflow -> inf)."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.power(np.float64(10.0), np.float64(x)))


def clamp_unit(x: float) -> float:
    """
    Clamp to [0, 1].

    NaN is ignored by fmax, so a NaN input clamps to 0.
    """
    return float(np.fmin(np.fmax(np.float64(x), 0.0), 1.0))


def clamp_between(x: float, a: float, b: float) -> float:
    """Clamp to the interval spanned by ``a`` and ``b`` in either order."""
    low, high = (a, b) if a <= b else (b, a)
    return float(np.clip(np.float64(x), low, high))


# =============================================================================
# Scale
# =============================================================================


class Scale(ABC, Generic[N, F]):
    """
    Mapping between absolute values of type ``N`` and relative positions of type ``F``.

    Subclasses store fixed bounds and a conversion bridge. Bounds are never
    validated; ``min >= max`` is a degenerate configuration whose results
    are whatever IEEE arithmetic produces.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def bridge(self) -> Bridge[N, F]:
        """Conversion bridge between ``N``, ``F`` and float."""
        ...

    @abstractmethod
    def to_relative(self, absolute: N) -> F:
        """Map an absolute value to its relative position (may extrapolate)."""
        ...

    @abstractmethod
    def to_absolute(self, relative: F) -> N:
        """Map a relative position to an absolute value (may extrapolate)."""
        ...

    @abstractmethod
    def get_min(self) -> N:
        """Lower bound supplied at construction."""
        ...

    @abstractmethod
    def get_max(self) -> N:
        """Upper bound supplied at construction."""
        ...

    @property
    def min(self) -> N:
        return self.get_min()

    @property
    def max(self) -> N:
        return self.get_max()

    def to_clamped_absolute(self, relative: F) -> N:
        """
        Like to_absolute, with the relative input clamped to [0, 1] first.

        The result therefore lies within [min, max] unless a rasterizer
        moves it outside.
        """
        bridge = self.bridge
        clamped = bridge.aux_from_f64(clamp_unit(bridge.aux_to_f64(relative)))
        return self.to_absolute(clamped)

    def to_clamped_relative(self, absolute: N) -> F:
        """Like to_relative, with the result clamped to [0, 1]."""
        bridge = self.bridge
        relative = bridge.aux_to_f64(self.to_relative(absolute))
        return bridge.aux_from_f64(clamp_unit(relative))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min={self.get_min()!r}, max={self.get_max()!r})"
