"""
Patterns: observers that watch the wheel as it runs.

Observers read the wheel after each step. They never change it.
- TrajectoryRecorder: samples theta, angular velocity and water mass
"""

from malkus.patterns.base import Observer, ObserverConfig
from malkus.patterns.recorder import TrajectoryRecorder, RecorderConfig, create_recorder

__all__ = [
    "Observer",
    "ObserverConfig",
    "TrajectoryRecorder",
    "RecorderConfig",
    "create_recorder",
]
