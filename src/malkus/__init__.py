"""
malkus: Malkus Waterwheel Simulator

A simulator for the Malkus waterwheel, a mechanical analogue of the
Lorenz system.

Core concepts:
- Buckets on the rim leak water at a fixed rate
- The bucket at the top is fed at a fixed inflow rate
- Uneven mass around the rim creates gravitational torque
- Torque turns the wheel, which changes which bucket is fed

Depending on inflow and outflow the wheel settles into steady rotation,
oscillates, or reverses direction chaotically.
"""

__version__ = "0.1.0"
