"""
Bucket: a water container fixed to the rim of the wheel.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Bucket:
    """A bucket holding between 0 and `capacity` units of water."""

    capacity: float  # Maximum water mass, fixed at construction
    amount: float = 0.0  # Current water mass

    def add(self, x: float) -> None:
        """
        Add (or with negative x, remove) water, clamping to [0, capacity].

        Water poured into a full bucket spills and is lost; water drained
        from an empty bucket is simply not there.
        """
        self.amount += x
        if self.amount > self.capacity:
            self.amount = self.capacity
        if self.amount < 0:
            self.amount = 0.0

    @property
    def is_empty(self) -> bool:
        return self.amount == 0.0
