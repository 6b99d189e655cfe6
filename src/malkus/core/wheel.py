"""
WaterWheel: the state of a Malkus waterwheel and its integration rule.

The wheel stores ONLY the physical state:
- Water mass in each bucket
- Angular position of bucket 0 (theta, unwrapped)
- Angular velocity (signed)

Each call to step(dt) performs one explicit Euler increment:

    1. Find the bucket at the top (theta mod 2π)
    2. Pour inflow·dt into it (clamped to capacity)
    3. Drain outflow·dt from every bucket (clamped at zero)
    4. Inertia  I = Σ m_i
    5. Torque   T = Σ m_i · sin(theta + i·arc)
    6. a = T / I
    7. ω += a·dt
    8. θ += ω·dt

Total water mass stands in for the moment of inertia; there is no radius
or separate inertia constant in this model.

The wheel never loops and never prints. Driving it is the caller's job
(see malkus.core.simulation).
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import math

import numpy as np

from malkus.core.bucket import Bucket

_logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi

N_BUCKETS = 8  # Buckets in the reference configuration
CAPACITY_FACTOR = 10.0  # Bucket capacity as a multiple of inflow
SEED_VELOCITY = 0.01  # Breaks the symmetry of the resting wheel


@dataclass
class WheelConfig:
    """Configuration for a waterwheel."""

    n_buckets: int = N_BUCKETS
    capacity_factor: float = CAPACITY_FACTOR
    initial_velocity: float = SEED_VELOCITY

    # When all buckets are empty the inertia is zero and T/I is undefined.
    # True: treat it as zero acceleration (an empty wheel feels no torque).
    # False: let IEEE arithmetic produce nan and carry it forward.
    guard_zero_inertia: bool = True

    def __post_init__(self):
        if self.n_buckets < 1:
            raise ValueError(f"n_buckets must be >= 1, got {self.n_buckets}")
        if self.capacity_factor < 0:
            raise ValueError(
                f"capacity_factor must be >= 0, got {self.capacity_factor}"
            )


@dataclass(frozen=True)
class WheelState:
    """Immutable snapshot of a wheel at one instant."""

    theta: float
    angular_velocity: float
    amounts: tuple[float, ...]
    top_bucket: int

    @property
    def total_mass(self) -> float:
        return float(sum(self.amounts))


class WaterWheel:
    """
    A Malkus waterwheel.

    Args:
        inflow: Mass per unit time poured into the top bucket
        outflow: Mass per unit time drained from every bucket
        config: Optional WheelConfig (defaults to the reference wheel:
                8 buckets, capacity 10 × inflow, seed velocity 0.01)
    """

    def __init__(
        self,
        inflow: float,
        outflow: float,
        config: WheelConfig | None = None,
    ):
        if config is None:
            config = WheelConfig()
        self.config = config

        self.inflow = float(inflow)
        self.outflow = float(outflow)

        self.theta: float = 0.0
        self.angular_velocity: float = float(config.initial_velocity)
        self.arc_per_bucket: float = TAU / config.n_buckets

        capacity = config.capacity_factor * self.inflow
        self.buckets: list[Bucket] = [
            Bucket(capacity=capacity) for _ in range(config.n_buckets)
        ]

    @property
    def n_buckets(self) -> int:
        return len(self.buckets)

    @property
    def total_mass(self) -> float:
        """Total water on the wheel."""
        return float(sum(b.amount for b in self.buckets))

    def masses(self) -> np.ndarray:
        """Bucket masses as an array, in index order."""
        return np.array([b.amount for b in self.buckets], dtype=np.float64)

    def bucket_angles(self) -> np.ndarray:
        """Unwrapped angle of each bucket: theta + i·arc."""
        return self.theta + self.arc_per_bucket * np.arange(self.n_buckets)

    def top_bucket_index(self) -> int:
        """
        Index of the bucket at the feed point (angle 0 mod 2π).

        Depends on theta alone. Negative theta gives the same answer as
        theta + 2π. A non-finite theta maps to bucket 0.
        """
        if not math.isfinite(self.theta):
            return 0
        # Python's float % is non-negative for a positive divisor
        k = self.theta % TAU
        index = int(k / self.arc_per_bucket)
        # A tiny negative theta can wrap to exactly TAU
        return min(index, self.n_buckets - 1)

    def inertia(self) -> float:
        """Angular inertia proxy: total water mass."""
        return float(self.masses().sum())

    def torque(self) -> float:
        """Net gravitational torque Σ m_i·sin(theta + i·arc)."""
        return float(np.sum(self.masses() * np.sin(self.bucket_angles())))

    def angular_acceleration(self) -> float:
        """
        Torque divided by inertia for the current state.

        Zero inertia follows config.guard_zero_inertia.
        """
        inertia = self.inertia()
        torque = self.torque()

        if inertia == 0.0 and self.config.guard_zero_inertia:
            _logger.debug("Zero inertia at theta=%.6f, acceleration set to 0", self.theta)
            return 0.0

        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(torque) / np.float64(inertia))

    def step(self, dt: float) -> None:
        """
        Advance the wheel by one explicit Euler step of size dt.

        Never raises. If dt is too large for the dynamics, or the zero
        inertia guard is disabled, the state may diverge or become nan.
        """
        # Feed the top bucket
        top = self.top_bucket_index()
        self.buckets[top].add(self.inflow * dt)

        # Every bucket leaks
        for bucket in self.buckets:
            bucket.add(-self.outflow * dt)

        accel = self.angular_acceleration()

        self.angular_velocity += accel * dt
        self.theta += self.angular_velocity * dt

    def snapshot(self) -> WheelState:
        """Return an immutable copy of the current state."""
        return WheelState(
            theta=self.theta,
            angular_velocity=self.angular_velocity,
            amounts=tuple(b.amount for b in self.buckets),
            top_bucket=self.top_bucket_index(),
        )

    def __str__(self) -> str:
        return format_wheel(self)

    def __repr__(self) -> str:
        return (
            f"WaterWheel(inflow={self.inflow}, outflow={self.outflow}, "
            f"n_buckets={self.n_buckets})"
        )


def format_wheel(wheel: WaterWheel) -> str:
    """
    Render the wheel as a single line.

    Format:
        theta 0.00 av 0.01: *0.00  0.00  0.00 ...

    The bucket at the feed point is marked with '*', others with a space.
    """
    top = wheel.top_bucket_index()
    cells = []
    for i, bucket in enumerate(wheel.buckets):
        marker = "*" if i == top else " "
        cells.append(f"{marker}{bucket.amount:.2f}")
    return (
        f"theta {wheel.theta:.2f} av {wheel.angular_velocity:.2f}: "
        + " ".join(cells)
    )
