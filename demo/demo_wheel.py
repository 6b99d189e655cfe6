#!/usr/bin/env python3
"""
Demo: Malkus Waterwheel on the Console

Runs the reference wheel (inflow 1.0, outflow 0.2) with dt = 1e-5 and
prints one line per step:

    theta 0.00 av 0.01: *0.00  0.00  0.00  0.00  0.00  0.00  0.00  0.00

The '*' marks the bucket under the inflow. Runs until interrupted
(Ctrl-C), unless a step count is given:

    python demo/demo_wheel.py [n_steps] [report_interval]
"""

import sys

from malkus.core import run_console


def main():
    n_steps = int(sys.argv[1]) if len(sys.argv) > 1 else None
    report_interval = int(sys.argv[2]) if len(sys.argv) > 2 else 1

    try:
        stats = run_console(
            inflow=1.0,
            outflow=0.2,
            dt=1e-5,
            n_steps=n_steps,
            report_interval=report_interval,
        )
    except KeyboardInterrupt:
        return

    print(f"\nSteps: {stats['n_steps']}  t = {stats['elapsed_time']:.5f}")


if __name__ == "__main__":
    main()
