"""
Relscale Error Classes.

The numeric core never raises: undefined math surfaces as NaN/Infinity.
These exceptions belong to the configuration surfaces only (registry
lookups and rasterizer construction).
"""

from __future__ import annotations

from typing import Any


class RelscaleError(Exception):
    """Base exception for relscale configuration errors."""

    code: str = "RELSCALE_ERROR"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a structured error payload."""
        return {
            "error": {
                "code": self.code,
                "message": str(self),
                "data": self._error_data(),
            }
        }

    def _error_data(self) -> dict[str, Any]:
        """Override to provide error-specific data."""
        return {}


class UnknownScaleKindError(RelscaleError, KeyError):
    """Raised when a scale kind is not registered."""

    code = "UNKNOWN_SCALE_KIND"

    def __init__(self, kind: str, available: list[str] | None = None):
        self.kind = kind
        self.available = available or []
        msg = f"Unknown scale kind: {kind}"
        if self.available:
            msg += f". Available: {', '.join(self.available)}"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]

    def _error_data(self) -> dict[str, Any]:
        return {"kind": self.kind, "available": self.available}


class RasterizerConfigError(RelscaleError, ValueError):
    """Raised when a rasterizer helper receives invalid parameters."""

    code = "INVALID_RASTERIZER"

    def __init__(self, rasterizer: str, reason: str):
        self.rasterizer = rasterizer
        self.reason = reason
        super().__init__(f"Invalid {rasterizer} rasterizer: {reason}")

    def _error_data(self) -> dict[str, Any]:
        return {"rasterizer": self.rasterizer, "reason": self.reason}
