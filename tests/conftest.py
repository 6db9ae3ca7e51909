"""
Relscale Test Suite - Shared Fixtures and Configuration
"""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a source checkout without installing
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))


@pytest.fixture(autouse=True)
def clean_state():
    """Reset settings, logging and the scale registry around each test."""
    from relscale.core.config import reset_settings
    from relscale.core.logging import reset_logging
    from relscale.scales.registry import reset_registry

    reset_settings()
    reset_registry()
    reset_logging()
    yield
    reset_settings()
    reset_registry()
    reset_logging()


# =============================================================================
# Scale Fixtures
# =============================================================================


@pytest.fixture
def linear_scale():
    """Linear scale over [10, 10240]."""
    from relscale import LinearScale

    return LinearScale.with_min_max(10.0, 10240.0)


@pytest.fixture
def log_scale():
    """Logarithmic scale over [10, 10240]; every 0.1 step doubles the value."""
    from relscale import LogarithmicScale

    return LogarithmicScale.with_min_max(10.0, 10240.0)
