#!/usr/bin/env python3
"""
Demo: Motion Regimes of the Malkus Waterwheel

Sweeps the outflow rate at fixed inflow and reports how the wheel moves:

1. Each wheel starts at rest with the small seed velocity
2. The simulation runs for a fixed simulated time
3. A recorder samples theta and angular velocity
4. The analysis layer counts reversals and classifies the run

Low outflow lets water pile up and the wheel tends to reverse; high
outflow drains the buckets before they can build much torque.
"""

from malkus.core import WaterWheel, Simulation, SimulationConfig
from malkus.patterns import create_recorder
from malkus.analysis import summarize_motion


def main():
    print("=" * 60)
    print("  MALKUS WATERWHEEL REGIMES")
    print("=" * 60)

    inflow = 1.0
    dt = 1e-3
    n_steps = 100_000
    record_interval = 100
    outflows = [0.05, 0.1, 0.2, 0.4, 0.8]

    print(f"\n   inflow={inflow}, dt={dt}, t_end={n_steps * dt:.0f}")
    print(f"\n   {'outflow':>8} {'regime':>11} {'reversals':>10} {'rotations':>10} {'mean |av|':>10}")

    for outflow in outflows:
        wheel = WaterWheel(inflow, outflow)
        recorder = create_recorder(
            f"outflow_{outflow}", wheel, dt=dt, record_interval=record_interval
        )
        simulation = Simulation(
            wheel=wheel,
            config=SimulationConfig(dt=dt),
            observers=[recorder],
        )
        stats = simulation.run(n_steps)

        if not stats["finite"]:
            print(f"   {outflow:>8.2f} {'diverged':>11}")
            continue

        traj = recorder.get_trajectory_arrays()
        summary = summarize_motion(traj["time"], traj["theta"], traj["angular_velocity"])
        print(
            f"   {outflow:>8.2f} {summary.regime:>11} {summary.reversals:>10d} "
            f"{summary.net_rotations:>10.2f} {summary.mean_speed:>10.3f}"
        )

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
