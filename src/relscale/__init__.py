"""
relscale - Absolute/relative value scales

Maps values between an absolute domain (frequency, duration, amplitude)
and a relative position in [0, 1], for driving or reading sliders, axes
and meters.

Usage:
    from relscale import LinearScale, LogarithmicScale

    freq = LogarithmicScale.with_min_max(20.0, 20000.0)
    freq.to_relative(632.46)        # ~0.5
    freq.to_clamped_absolute(1.2)   # 20000.0

Package structure:
    relscale/
    ├── core/              # Shared infrastructure
    │   ├── config.py      # Environment settings
    │   └── logging.py     # Structured logging
    ├── scales/
    │   ├── base.py        # Scale abstraction, clamping, IEEE helpers
    │   ├── linear.py      # Linear scale
    │   ├── logarithmic.py # Base-10 logarithmic scale
    │   ├── rasterize.py   # Ready-made rasterizers
    │   └── registry.py    # Scale kinds by name
    ├── convert.py         # Numeric conversion bridge
    ├── models.py          # Declarative ScaleSpec
    └── errors.py          # Configuration errors
"""

__version__ = "1.0.0"

from .convert import (
    DECIMAL_BRIDGE,
    FLOAT32_BRIDGE,
    FLOAT_BRIDGE,
    FRACTION_BRIDGE,
    INT_BRIDGE,
    Bridge,
    Conversion,
)
from .errors import RasterizerConfigError, RelscaleError, UnknownScaleKindError
from .models import ScaleSpec, build_scale
from .scales import (
    LinearScale,
    LogarithmicScale,
    Scale,
    get_scale_registry,
    round_significant,
    snap_to_step,
    snap_to_values,
)

__all__ = [
    "__version__",
    # Bridge
    "Bridge",
    "Conversion",
    "DECIMAL_BRIDGE",
    "FLOAT32_BRIDGE",
    "FLOAT_BRIDGE",
    "FRACTION_BRIDGE",
    "INT_BRIDGE",
    # Scales
    "LinearScale",
    "LogarithmicScale",
    "Scale",
    "ScaleSpec",
    "build_scale",
    "get_scale_registry",
    # Rasterizers
    "round_significant",
    "snap_to_step",
    "snap_to_values",
    # Errors
    "RasterizerConfigError",
    "RelscaleError",
    "UnknownScaleKindError",
]
