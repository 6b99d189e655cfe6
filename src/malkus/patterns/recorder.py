"""
TrajectoryRecorder: samples the wheel's state over time.

Every `record_interval` steps the recorder stores one row:

    (time, theta, angular_velocity, total_mass, top_bucket)

The rows feed the analysis layer (reversal counting, regime
classification). The initial state is recorded at construction so a
trajectory always starts at t = 0.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from malkus.core.wheel import WaterWheel

from malkus.patterns.base import Observer, ObserverConfig


@dataclass
class RecorderConfig(ObserverConfig):
    """Configuration for a trajectory recorder."""

    record_interval: int = 1  # Record every N steps

    def __post_init__(self):
        if self.record_interval < 1:
            raise ValueError(
                f"record_interval must be >= 1, got {self.record_interval}"
            )


class TrajectoryRecorder(Observer):
    """
    Records the wheel's angular state and water mass over time.
    """

    def __init__(self, config: RecorderConfig, wheel: "WaterWheel"):
        super().__init__(config, wheel)
        self.record_interval = config.record_interval

        # Each entry: (time, theta, angular_velocity, total_mass, top_bucket)
        self.trajectory: list[tuple[float, float, float, float, int]] = []

        self._record_state()

    def update(self, step: int) -> None:
        self._step = step
        if step % self.record_interval == 0:
            self._record_state()

    def _record_state(self) -> None:
        wheel = self.wheel
        self.trajectory.append(
            (
                self.time,
                wheel.theta,
                wheel.angular_velocity,
                wheel.total_mass,
                wheel.top_bucket_index(),
            )
        )

    def reset(self) -> None:
        """Drop all recorded rows and record the current state as the first."""
        self.trajectory.clear()
        self._record_state()

    def get_trajectory_arrays(self) -> dict[str, np.ndarray]:
        """
        Return the trajectory as numpy arrays keyed by column name.

        Keys: time, theta, angular_velocity, total_mass, top_bucket
        """
        if not self.trajectory:
            empty = np.array([], dtype=np.float64)
            return {
                "time": empty,
                "theta": empty,
                "angular_velocity": empty,
                "total_mass": empty,
                "top_bucket": np.array([], dtype=np.int64),
            }

        data = np.array([row[:4] for row in self.trajectory], dtype=np.float64)
        return {
            "time": data[:, 0],
            "theta": data[:, 1],
            "angular_velocity": data[:, 2],
            "total_mass": data[:, 3],
            "top_bucket": np.array([row[4] for row in self.trajectory], dtype=np.int64),
        }

    def get_measurements(self) -> dict:
        """Return recorder measurements."""
        return {
            "observer_id": self.config.observer_id,
            "n_samples": len(self.trajectory),
            "last_step": self._step,
            "time": self.time,
            "trajectory": self.trajectory.copy(),
        }


def create_recorder(
    observer_id: str,
    wheel: "WaterWheel",
    dt: float = 1e-5,
    record_interval: int = 1,
) -> TrajectoryRecorder:
    """
    Convenience factory for creating a recorder.

    Args:
        observer_id: Unique identifier for this recorder
        wheel: The wheel to observe
        dt: Time step of the driving simulation (for the time column)
        record_interval: Record every N steps

    Returns:
        Configured TrajectoryRecorder
    """
    config = RecorderConfig(
        observer_id=observer_id,
        dt=dt,
        record_interval=record_interval,
    )
    return TrajectoryRecorder(config, wheel)
