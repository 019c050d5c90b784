"""
Shared fixtures.

Simulations run on a plain simpy.Environment, so timed sequences complete
instantly and tests can stop the clock at any simulation time.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
import simpy

from config import SimulationConfig
from liftsim.interfaces.display import IDisplay
from liftsim.simulation import ElevatorSimulation


class RecordingDisplay(IDisplay):
    """Display that keeps every notification as (time, kind, payload)."""

    def __init__(self, env):
        self.env = env
        self.events = []

    def _record(self, kind, payload=None):
        self.events.append((self.env.now, kind, payload))

    def on_position_changed(self, floor):
        self._record("position", floor)

    def on_doors_changed(self, is_open):
        self._record("doors", is_open)

    def on_passengers_changed(self, passengers):
        self._record("passengers", tuple(passengers))

    def on_waiting_changed(self, floor, passengers):
        self._record("waiting", (floor, tuple(passengers)))

    def on_direction_changed(self, direction):
        self._record("direction", direction)

    def on_idle(self):
        self._record("idle")

    def of_kind(self, kind):
        return [payload for _, kind_, payload in self.events if kind_ == kind]


class FixedDestination:
    """Destination chooser that always answers the same floor."""

    def __init__(self, floor):
        self.floor = floor

    def __call__(self, passenger, boarding_floor):
        return self.floor


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def make_simulation():
    """Factory: make_simulation(destination=None, **config_overrides) -> (sim, display)"""

    def _make(destination=None, home_floor=1, capacity=5, num_floors=10, random_seed=1):
        config = SimulationConfig.from_dict({
            'building': {'num_floors': num_floors},
            'elevator': {'max_capacity': capacity, 'home_floor': home_floor},
            'random_seed': random_seed,
        })
        env = simpy.Environment()
        display = RecordingDisplay(env)
        chooser = FixedDestination(destination) if destination is not None else None
        sim = ElevatorSimulation(config, env=env, display=display, destination_chooser=chooser)
        return sim, display

    return _make
