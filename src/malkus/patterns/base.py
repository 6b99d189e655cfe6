"""
Base classes for observers.

Observers are attached to a simulation and read the wheel after every step.
They record measurements (trajectories, fed-bucket history, ...) for the
analysis layer.

IMPORTANT: Observers read the wheel state but never modify it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from malkus.core.wheel import WaterWheel


@dataclass
class ObserverConfig:
    """Base configuration for observers."""

    observer_id: str  # Unique identifier
    dt: float = 1e-5  # Time step of the simulation being observed


class Observer(ABC):
    """
    Base class for observers of a waterwheel.
    """

    def __init__(self, config: ObserverConfig, wheel: "WaterWheel"):
        self.config = config
        self.wheel = wheel
        self._step = 0

    @property
    def time(self) -> float:
        """Simulated time at the last update."""
        return self._step * self.config.dt

    @abstractmethod
    def update(self, step: int) -> None:
        """
        Observe the wheel after the given step.

        Args:
            step: The number of steps taken so far
        """
        ...

    @abstractmethod
    def get_measurements(self) -> dict:
        """
        Return recorded measurements from this observer.

        Returns:
            Dict with observer-specific measurements
        """
        ...
