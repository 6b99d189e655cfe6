"""
Motion analysis for recorded wheel trajectories.

The Malkus wheel has three broad kinds of long-run behavior:
- stationary: the wheel barely turns
- steady: it keeps turning in one direction (possibly with a pulsing speed)
- reversing: the direction of rotation flips, often irregularly (chaos)

These tools work on plain arrays, typically from
TrajectoryRecorder.get_trajectory_arrays(). They never touch the wheel.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

import numpy as np
from scipy.signal import find_peaks

from malkus.core.wheel import TAU

Regime = Literal["stationary", "steady", "reversing"]


@dataclass
class MotionSummary:
    """Summary statistics of a recorded trajectory."""

    duration: float               # time[-1] - time[0]
    mean_velocity: float          # Signed mean of ω
    mean_speed: float             # Mean of |ω|
    max_speed: float              # Max of |ω|
    net_rotations: float          # (θ_end - θ_start) / 2π, signed
    reversals: int                # Sign changes of ω
    n_velocity_peaks: int         # Local maxima of |ω|
    regime: Regime


def _as_array(values, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise ValueError(f"{name} must not be empty")
    return arr


def count_reversals(angular_velocity, tolerance: float = 0.0) -> int:
    """
    Count how many times the wheel changes direction.

    Samples with |ω| <= tolerance are ignored, so a wheel hovering around
    zero does not register spurious reversals.

    Args:
        angular_velocity: 1D array of ω samples
        tolerance: Dead band around zero

    Returns:
        Number of sign changes between consecutive retained samples
    """
    omega = np.asarray(angular_velocity, dtype=np.float64)
    omega = omega[np.abs(omega) > tolerance]
    if omega.size < 2:
        return 0
    signs = np.sign(omega)
    return int(np.count_nonzero(signs[1:] != signs[:-1]))


def find_velocity_peaks(angular_velocity, prominence: float | None = None) -> np.ndarray:
    """
    Find local maxima of the wheel's speed |ω|.

    Args:
        angular_velocity: 1D array of ω samples
        prominence: Minimum peak prominence (see scipy.signal.find_peaks)

    Returns:
        Indices of the peaks
    """
    speed = np.abs(np.asarray(angular_velocity, dtype=np.float64))
    peaks, _ = find_peaks(speed, prominence=prominence)
    return peaks


def classify_motion(
    angular_velocity,
    tolerance: float = 1e-3,
) -> Regime:
    """
    Classify a trajectory as stationary, steady, or reversing.

    Args:
        angular_velocity: 1D array of ω samples
        tolerance: Speeds at or below this count as "not turning"
    """
    omega = _as_array(angular_velocity, "angular_velocity")
    if np.max(np.abs(omega)) <= tolerance:
        return "stationary"
    if count_reversals(omega, tolerance=tolerance) == 0:
        return "steady"
    return "reversing"


def summarize_motion(
    time,
    theta,
    angular_velocity,
    tolerance: float = 1e-3,
    prominence: float | None = None,
) -> MotionSummary:
    """
    Summarize a recorded trajectory.

    Args:
        time: 1D array of sample times
        theta: 1D array of unwrapped angular positions
        angular_velocity: 1D array of ω samples
        tolerance: Dead band for reversal counting and classification
        prominence: Minimum prominence for speed peaks

    Returns:
        MotionSummary
    """
    t = _as_array(time, "time")
    th = _as_array(theta, "theta")
    omega = _as_array(angular_velocity, "angular_velocity")
    if not (t.shape == th.shape == omega.shape):
        raise ValueError(
            f"time, theta and angular_velocity must have the same shape, "
            f"got {t.shape}, {th.shape}, {omega.shape}"
        )

    speed = np.abs(omega)
    return MotionSummary(
        duration=float(t[-1] - t[0]),
        mean_velocity=float(omega.mean()),
        mean_speed=float(speed.mean()),
        max_speed=float(speed.max()),
        net_rotations=float((th[-1] - th[0]) / TAU),
        reversals=count_reversals(omega, tolerance=tolerance),
        n_velocity_peaks=int(len(find_velocity_peaks(omega, prominence=prominence))),
        regime=classify_motion(omega, tolerance=tolerance),
    )
