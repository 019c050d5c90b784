"""
Configuration Tests

Defaults, validation and YAML load/save.
"""

from pathlib import Path

import pytest
import yaml

from config import ConfigLoader, SimulationConfig
from config.simulation import BuildingConfig, DoorConfig, ElevatorConfig, TrafficConfig


def test_defaults():
    config = SimulationConfig()

    assert config.building.num_floors == 10
    assert config.elevator.max_capacity == 5
    assert config.elevator.floor_to_floor_time == 3.0
    assert config.door.operation_time == 1.5
    assert config.traffic.passenger_exit_time == 2.0
    assert config.traffic.passenger_entry_time == 2.0
    assert config.tick_interval == 3.0
    config.validate()


@pytest.mark.parametrize("factory", [
    lambda: BuildingConfig(num_floors=1),
    lambda: BuildingConfig(num_floors=3, floors=[{'control_floor': 1}]),
    lambda: ElevatorConfig(max_capacity=0),
    lambda: ElevatorConfig(floor_to_floor_time=0),
    lambda: DoorConfig(operation_time=-1.0),
    lambda: TrafficConfig(passenger_entry_time=0),
    lambda: TrafficConfig(max_passengers_per_floor=-2),
    lambda: SimulationConfig(tick_interval=0),
    lambda: SimulationConfig(realtime_factor=-1.0),
])
def test_invalid_values_raise(factory):
    with pytest.raises(ValueError):
        factory()


def test_from_dict_fills_missing_sections():
    config = SimulationConfig.from_dict({'simulation': {'elevator': {'max_capacity': 8}}})

    assert config.elevator.max_capacity == 8
    assert config.building.num_floors == 10
    assert config.random_seed is None


def test_save_and_load(tmp_path):
    config = SimulationConfig.from_dict({
        'building': {'num_floors': 6},
        'elevator': {'max_capacity': 4, 'home_floor': 3},
        'traffic': {'simulation_duration': 120.0},
        'random_seed': 9,
    })
    path = tmp_path / "nested" / "sim.yaml"

    ConfigLoader.save_simulation(config, path)
    loaded = ConfigLoader.load_simulation(path)

    assert loaded == config
    with open(path, encoding='utf-8') as f:
        assert yaml.safe_load(f)['simulation']['random_seed'] == 9


def test_load_rejects_inconsistent_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("simulation:\n  building:\n    num_floors: 4\n  elevator:\n    home_floor: 7\n")

    with pytest.raises(ValueError):
        ConfigLoader.load_simulation(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_simulation(tmp_path / "missing.yaml")


def test_overrides_applied_before_validation(tmp_path):
    path = tmp_path / "sim.yaml"
    path.write_text("simulation:\n  building:\n    num_floors: 8\n  random_seed: 1\n")

    config = ConfigLoader.load_simulation(path, overrides={'elevator.max_capacity': 2, 'random_seed': 5})

    assert config.building.num_floors == 8
    assert config.elevator.max_capacity == 2
    assert config.random_seed == 5

    with pytest.raises(ValueError):
        ConfigLoader.load_simulation(path, overrides={'elevator.home_floor': 9})
    with pytest.raises(ValueError):
        ConfigLoader.load_simulation(path, overrides={'random_seed.value': 1})


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert ConfigLoader.load_simulation(path) == SimulationConfig()


def test_top_level_must_be_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ValueError):
        ConfigLoader.load_simulation(path)


def test_bundled_scenarios_load():
    scenario_dir = Path(__file__).parent.parent.parent / "scenarios"
    scenarios = ConfigLoader.list_scenarios(scenario_dir)

    assert [p.name for p in scenarios] == ["default.yaml", "office_lobby.yaml"]
    for path in scenarios:
        ConfigLoader.load_simulation(path)
