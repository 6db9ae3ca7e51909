"""
Numeric Conversion Bridge.

Scales do all interpolation math in plain ``float`` (IEEE double). The
bridge lets a caller keep absolute values in their own domain type ``N``
by going through an auxiliary type ``F`` that knows how to become a float:

    N  --domain.to_float-->  F  --aux.to_float-->  float
    N  <-domain.from_float-- F  <-aux.from_float-- float

A domain type therefore never needs to know about ``float`` directly.
Relative positions returned by a scale are of the auxiliary type ``F``.

Conversions are total: they never raise. Domain types that cannot
represent NaN or Infinity (``int``, ``Fraction``) hand the special value
back unchanged as a float so it still reaches the caller.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Generic, TypeVar

import numpy as np

S = TypeVar("S")
T = TypeVar("T")
N = TypeVar("N")
F = TypeVar("F")


@dataclass(frozen=True)
class Conversion(Generic[S, T]):
    """
    One hop of the bridge: a pair of pure conversions between ``S`` and ``T``.

    Attributes:
        to_float: Converts a source value into the target type
        from_float: Converts a target value back into the source type
        name: Label used in reprs and log output
    """

    to_float: Callable[[S], T]
    from_float: Callable[[T], S]
    name: str = "custom"


@dataclass(frozen=True)
class Bridge(Generic[N, F]):
    """
    Two-hop conversion between a domain type ``N`` and ``float``.

    Attributes:
        domain: Conversion between the domain type and the auxiliary type
        aux: Conversion between the auxiliary type and float
    """

    domain: Conversion[N, F]
    aux: Conversion[F, float]

    @property
    def name(self) -> str:
        return f"{self.domain.name}/{self.aux.name}"

    def to_aux(self, n: N) -> F:
        return self.domain.to_float(n)

    def from_aux(self, f: F) -> N:
        return self.domain.from_float(f)

    def aux_to_f64(self, f: F) -> float:
        return self.aux.to_float(f)

    def aux_from_f64(self, x: float) -> F:
        return self.aux.from_float(x)

    def to_f64(self, n: N) -> float:
        """Convert a domain value all the way to float."""
        return self.aux.to_float(self.domain.to_float(n))

    def from_f64(self, x: float) -> N:
        """Convert a float all the way back to the domain type."""
        return self.domain.from_float(self.aux.from_float(x))

    def apply(self, n: N, fun: Callable[[float], float]) -> N:
        """Run a float function on a domain value and convert the result back."""
        return self.from_f64(fun(self.to_f64(n)))


# =============================================================================
# Built-in Conversions
# =============================================================================


def _round_to_int(x: float) -> Any:
    # int cannot hold NaN/Infinity; pass them through as float
    if not math.isfinite(x):
        return x
    return round(x)


def _to_fraction(x: float) -> Any:
    if not math.isfinite(x):
        return x
    return Fraction(x)


FLOAT: Conversion[float, float] = Conversion(float, float, "float")
"""Identity on float (both hops of the default bridge)."""

INTEGER: Conversion[int, float] = Conversion(float, _round_to_int, "int")
"""Integer domain; values coming back from float are rounded half-to-even."""

DECIMAL: Conversion[Decimal, float] = Conversion(float, Decimal, "decimal")
"""decimal.Decimal domain; Decimal represents NaN and Infinity natively."""

FRACTION: Conversion[Fraction, float] = Conversion(float, _to_fraction, "fraction")
"""fractions.Fraction domain; exact binary value of the float on the way back."""

FLOAT32: Conversion[np.float32, float] = Conversion(float, np.float32, "float32")
"""numpy.float32 as auxiliary type: relative positions come back single precision."""

FLOAT32_DOMAIN: Conversion[float, np.float32] = Conversion(np.float32, float, "float")
"""Python float domain over a float32 auxiliary."""


FLOAT_BRIDGE: Bridge[float, float] = Bridge(FLOAT, FLOAT)
INT_BRIDGE: Bridge[int, float] = Bridge(INTEGER, FLOAT)
DECIMAL_BRIDGE: Bridge[Decimal, float] = Bridge(DECIMAL, FLOAT)
FRACTION_BRIDGE: Bridge[Fraction, float] = Bridge(FRACTION, FLOAT)
FLOAT32_BRIDGE: Bridge[float, np.float32] = Bridge(FLOAT32_DOMAIN, FLOAT32)
