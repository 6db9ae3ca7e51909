"""
Scale strategies.

Linear and base-10 logarithmic scales behind the common Scale interface,
plus ready-made rasterizers and a registry of kinds by name.
"""

from .base import Scale
from .linear import LinearScale
from .logarithmic import LogarithmicScale
from .rasterize import round_significant, snap_to_step, snap_to_values
from .registry import ScaleRegistry, get_scale_registry, reset_registry

__all__ = [
    "LinearScale",
    "LogarithmicScale",
    "Scale",
    "ScaleRegistry",
    "get_scale_registry",
    "reset_registry",
    "round_significant",
    "snap_to_step",
    "snap_to_values",
]
