"""
Scale Registry.

Maps scale kind names ("linear", "log") to factories so scales can be
chosen from configuration. Factories share the scale constructor
signature ``(min, max, rasterizer=None, bridge=...)``.

Usage:
    registry = get_scale_registry()
    scale = registry.create("log", 20.0, 20000.0)

    # Register a custom kind
    registry.register("db", make_db_scale)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from ..convert import FLOAT_BRIDGE, Bridge
from ..core.logging import get_logger
from ..errors import UnknownScaleKindError
from .base import Scale

logger = get_logger(__name__)

ScaleFactory = Callable[..., Scale]


class ScaleRegistry:
    """
    Registry of scale factories by kind name.

    Names are case-insensitive. Aliases resolve to an existing kind.
    """

    def __init__(self) -> None:
        self._factories: dict[str, ScaleFactory] = {}
        self._aliases: dict[str, str] = {}

    def register(self, name: str, factory: ScaleFactory) -> None:
        """Register a scale factory, replacing any previous one of that name."""
        self._factories[name.lower()] = factory
        logger.debug(f"Registered scale kind: {name}")

    def register_alias(self, alias: str, name: str) -> None:
        """Register an alternative name for a registered kind."""
        if name.lower() not in self._factories:
            raise UnknownScaleKindError(name, self.list_kinds())
        self._aliases[alias.lower()] = name.lower()

    def resolve(self, name: str) -> str:
        """Resolve an alias to its canonical kind name."""
        key = name.lower()
        return self._aliases.get(key, key)

    def get(self, name: str) -> Optional[ScaleFactory]:
        """Get a factory by name or alias, or None if unknown."""
        return self._factories.get(self.resolve(name))

    def list_kinds(self) -> list[str]:
        """List canonical kind names."""
        return list(self._factories.keys())

    def create(
        self,
        name: str,
        min: Any,
        max: Any,
        rasterizer: Optional[Callable[[Any], Any]] = None,
        bridge: Bridge = FLOAT_BRIDGE,
    ) -> Scale:
        """
        Create a scale of the named kind.

        Raises:
            UnknownScaleKindError: If no factory is registered under ``name``
        """
        factory = self.get(name)
        if factory is None:
            raise UnknownScaleKindError(name, self.list_kinds())
        return factory(min, max, rasterizer=rasterizer, bridge=bridge)


# =============================================================================
# Global Registry
# =============================================================================

_global_registry: ScaleRegistry | None = None


def get_scale_registry() -> ScaleRegistry:
    """
    Get the global scale registry.

    Returns a lazily-initialized registry with built-in kinds registered.
    """
    global _global_registry
    if _global_registry is None:
        _global_registry = ScaleRegistry()
        _register_builtin_scales(_global_registry)
    return _global_registry


def _register_builtin_scales(registry: ScaleRegistry) -> None:
    """Register the built-in scale kinds."""
    from .linear import LinearScale
    from .logarithmic import LogarithmicScale

    registry.register("linear", LinearScale)
    registry.register("log", LogarithmicScale)
    registry.register_alias("logarithmic", "log")


def reset_registry() -> None:
    """
    Reset the global registry.

    Useful for testing to ensure clean state.
    """
    global _global_registry
    _global_registry = None
