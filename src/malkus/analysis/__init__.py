"""
Analysis layer: derived quantities from recorded trajectories.

IMPORTANT: This is NOT seen by the wheel. One-way derivation only.

- count_reversals: direction changes of the wheel
- find_velocity_peaks: speed maxima (oscillation count)
- classify_motion / summarize_motion: regime of a run
"""

from malkus.analysis.motion import (
    MotionSummary,
    count_reversals,
    find_velocity_peaks,
    classify_motion,
    summarize_motion,
)

__all__ = [
    "MotionSummary",
    "count_reversals",
    "find_velocity_peaks",
    "classify_motion",
    "summarize_motion",
]
