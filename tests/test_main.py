"""
Runner Tests

A short headless run through main.run_simulation, plus command-line
override parsing.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from main import parse_overrides, run_simulation


def test_parse_overrides():
    assert parse_overrides(["elevator.max_capacity=8", "random_seed=3", "trace_messages=true"]) == {
        "elevator.max_capacity": 8,
        "random_seed": 3,
        "trace_messages": True,
    }
    with pytest.raises(ValueError):
        parse_overrides(["random_seed"])


def test_short_run_with_defaults():
    simulation, stats = run_simulation(
        save_outputs=False,
        overrides={"random_seed": 4, "traffic.simulation_duration": 120.0},
    )

    assert simulation.env.now == 120.0
    assert not simulation.is_running
    assert stats.passengers
    assert stats.trajectory
    assert all(p.boarding_time is None or p.boarding_time <= 120.0 for p in stats.passengers)
