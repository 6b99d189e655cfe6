"""
Simulation: drives a WaterWheel with a fixed time step.

The wheel itself never loops. The simulation owns the loop, the step
count, and where the formatted state goes:
- sink: any callable taking a string (print, a list's append, a logger)
- observers: patterns that read the wheel after every step

Stopping is up to the caller: run(n_steps) for a fixed budget, or
run_forever(should_stop) with a predicate (step count, wall clock,
external flag). Without a predicate run_forever only ends when the
process is interrupted, like the reference console driver.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable
import logging
import math

from malkus.core.wheel import WaterWheel, format_wheel

if TYPE_CHECKING:
    from malkus.patterns.base import Observer

_logger = logging.getLogger(__name__)

REFERENCE_DT = 1e-5


@dataclass
class SimulationConfig:
    """Configuration for the stepping loop."""

    dt: float = REFERENCE_DT  # Time step passed to every WaterWheel.step
    report_interval: int = 1  # Call the sink every N steps

    def __post_init__(self):
        if not self.dt > 0:
            raise ValueError(f"dt must be > 0, got {self.dt}")
        if self.report_interval < 1:
            raise ValueError(
                f"report_interval must be >= 1, got {self.report_interval}"
            )


@dataclass
class Simulation:
    """
    Repeatedly steps a wheel and reports its state.

    Each step:
    1. wheel.step(dt)
    2. every observer.update(step)
    3. sink(format_wheel(wheel)) every report_interval steps
    """

    wheel: WaterWheel
    config: SimulationConfig = field(default_factory=SimulationConfig)
    sink: Callable[[str], None] | None = None
    observers: list["Observer"] = field(default_factory=list)

    # Simulation state
    current_step: int = field(default=0, init=False)

    @property
    def elapsed_time(self) -> float:
        """Simulated time since the simulation started."""
        return self.current_step * self.config.dt

    def add_observer(self, observer: "Observer") -> None:
        self.observers.append(observer)

    def run(self, n_steps: int) -> dict:
        """
        Run the simulation for n steps.

        Args:
            n_steps: Number of steps to run

        Returns:
            Statistics dictionary
        """
        if n_steps < 0:
            raise ValueError(f"n_steps must be >= 0, got {n_steps}")

        for _ in range(n_steps):
            self._tick()

        stats = self.get_stats()
        stats["n_steps"] = n_steps
        _logger.debug(
            "Ran %d steps: t=%.6f theta=%.6f av=%.6f",
            n_steps,
            stats["elapsed_time"],
            stats["theta"],
            stats["angular_velocity"],
        )
        return stats

    def run_forever(self, should_stop: Callable[[], bool] | None = None) -> dict:
        """
        Step until should_stop() returns True.

        With no predicate this never returns on its own; the caller stops
        it by interrupting the process.
        """
        start = self.current_step
        while should_stop is None or not should_stop():
            self._tick()

        stats = self.get_stats()
        stats["n_steps"] = self.current_step - start
        return stats

    def _tick(self):
        """Execute one simulation step."""
        self.wheel.step(self.config.dt)
        self.current_step += 1

        for observer in self.observers:
            observer.update(self.current_step)

        if self.sink is not None and self.current_step % self.config.report_interval == 0:
            self.sink(format_wheel(self.wheel))

    def get_stats(self) -> dict:
        """Summary of the current wheel state."""
        wheel = self.wheel
        return {
            "current_step": self.current_step,
            "elapsed_time": self.elapsed_time,
            "theta": wheel.theta,
            "angular_velocity": wheel.angular_velocity,
            "total_mass": wheel.total_mass,
            "finite": math.isfinite(wheel.theta) and math.isfinite(wheel.angular_velocity),
        }


def run_console(
    inflow: float = 1.0,
    outflow: float = 0.2,
    dt: float = REFERENCE_DT,
    n_steps: int | None = None,
    report_interval: int = 1,
) -> dict:
    """
    The reference console driver: print the wheel after every step.

    Args:
        inflow, outflow: Wheel parameters (reference run: 1.0, 0.2)
        dt: Time step (reference run: 1e-5)
        n_steps: Steps to run, or None to run until interrupted
        report_interval: Print every N steps

    Returns:
        Statistics dictionary (only reached when n_steps is given)
    """
    simulation = Simulation(
        wheel=WaterWheel(inflow, outflow),
        config=SimulationConfig(dt=dt, report_interval=report_interval),
        sink=print,
    )
    if n_steps is None:
        return simulation.run_forever()
    return simulation.run(n_steps)
