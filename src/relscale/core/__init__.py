"""
Relscale core infrastructure: settings and logging.
"""

from .config import RelscaleSettings, get_settings, reset_settings
from .logging import get_logger

__all__ = [
    "RelscaleSettings",
    "get_logger",
    "get_settings",
    "reset_settings",
]
