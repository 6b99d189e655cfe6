"""Unit tests for TrajectoryRecorder."""

import numpy as np
import pytest

from malkus.core import Simulation, SimulationConfig
from malkus.patterns.recorder import RecorderConfig, TrajectoryRecorder, create_recorder


class TestRecorderConfig:
    """Tests for RecorderConfig."""

    def test_defaults(self):
        cfg = RecorderConfig(observer_id="r")
        assert cfg.dt == 1e-5
        assert cfg.record_interval == 1

    def test_rejects_bad_interval(self):
        with pytest.raises(ValueError, match="record_interval"):
            RecorderConfig(observer_id="r", record_interval=0)


class TestTrajectoryRecorder:
    """Tests for TrajectoryRecorder."""

    def test_records_initial_state(self, reference_wheel):
        recorder = create_recorder("r", reference_wheel)
        assert len(recorder.trajectory) == 1
        t, theta, av, mass, top = recorder.trajectory[0]
        assert t == 0.0
        assert theta == 0.0
        assert av == 0.01
        assert mass == 0.0
        assert top == 0

    def test_record_interval(self, reference_wheel):
        dt = 1e-3
        recorder = create_recorder("r", reference_wheel, dt=dt, record_interval=10)
        sim = Simulation(
            wheel=reference_wheel,
            config=SimulationConfig(dt=dt),
            observers=[recorder],
        )
        sim.run(100)

        arrays = recorder.get_trajectory_arrays()
        assert len(arrays["time"]) == 11
        assert np.allclose(arrays["time"], np.arange(11) * 10 * dt)

    def test_trajectory_arrays(self, reference_wheel):
        recorder = create_recorder("r", reference_wheel, dt=1e-3)
        sim = Simulation(
            wheel=reference_wheel,
            config=SimulationConfig(dt=1e-3),
            observers=[recorder],
        )
        sim.run(50)

        arrays = recorder.get_trajectory_arrays()
        assert set(arrays) == {"time", "theta", "angular_velocity", "total_mass", "top_bucket"}
        assert arrays["theta"].dtype == np.float64
        assert arrays["top_bucket"].dtype == np.int64
        assert arrays["theta"][-1] == reference_wheel.theta
        assert np.all(arrays["total_mass"] >= 0.0)
        # Water only accumulates while the wheel is nearly at rest
        assert np.all(np.diff(arrays["total_mass"]) > 0.0)

    def test_does_not_modify_wheel(self, loaded_wheel):
        before = loaded_wheel.snapshot()
        recorder = create_recorder("r", loaded_wheel)
        recorder.update(1)
        recorder.update(2)
        assert loaded_wheel.snapshot() == before

    def test_reset(self, loaded_wheel):
        recorder = create_recorder("r", loaded_wheel)
        for step in range(1, 6):
            recorder.update(step)
        assert len(recorder.trajectory) == 6

        recorder.reset()
        assert len(recorder.trajectory) == 1
        assert recorder.trajectory[0][1] == loaded_wheel.theta

    def test_empty_arrays(self, reference_wheel):
        recorder = create_recorder("r", reference_wheel)
        recorder.trajectory.clear()
        arrays = recorder.get_trajectory_arrays()
        assert arrays["theta"].size == 0
        assert arrays["top_bucket"].size == 0

    def test_measurements(self, reference_wheel):
        recorder = TrajectoryRecorder(RecorderConfig(observer_id="wheel", dt=0.5), reference_wheel)
        recorder.update(4)
        m = recorder.get_measurements()

        assert m["observer_id"] == "wheel"
        assert m["n_samples"] == 2
        assert m["last_step"] == 4
        assert m["time"] == pytest.approx(2.0)
        assert len(m["trajectory"]) == 2
