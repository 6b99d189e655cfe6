"""
Pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def reference_wheel():
    """The reference wheel: inflow 1.0, outflow 0.2, 8 buckets."""
    from malkus.core import WaterWheel
    return WaterWheel(inflow=1.0, outflow=0.2)


@pytest.fixture
def loaded_wheel():
    """Reference wheel after one simulated second with dt = 1e-3."""
    from malkus.core import WaterWheel
    wheel = WaterWheel(inflow=1.0, outflow=0.2)
    for _ in range(1000):
        wheel.step(1e-3)
    return wheel


@pytest.fixture
def rng():
    """Reproducible random number generator."""
    return np.random.default_rng(seed=42)
