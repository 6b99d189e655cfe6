"""
Core simulation primitives.

This layer knows NOTHING about regimes, reversals, or recorded trajectories.
It only knows:
- Buckets with a capacity
- The wheel's angular position and velocity
- One explicit Euler step of the torque balance
- A loop that steps the wheel and hands its state to a sink
"""

from malkus.core.bucket import Bucket
from malkus.core.wheel import (
    TAU,
    N_BUCKETS,
    WaterWheel,
    WheelConfig,
    WheelState,
    format_wheel,
)
from malkus.core.simulation import Simulation, SimulationConfig, run_console

__all__ = [
    "TAU",
    "N_BUCKETS",
    "Bucket",
    "WaterWheel",
    "WheelConfig",
    "WheelState",
    "format_wheel",
    "Simulation",
    "SimulationConfig",
    "run_console",
]
