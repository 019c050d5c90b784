"""
Simulation Configuration

Building layout, car specification, door and passenger timings, and run
control. All times are simulation seconds.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 10
    floors: Optional[List[Dict[str, Any]]] = None  # Floor definitions (control_floor, display_name)

    def __post_init__(self):
        if self.num_floors < 2:
            raise ValueError("num_floors must be at least 2")

        if self.floors is not None:
            if len(self.floors) != self.num_floors:
                raise ValueError(f"floors list length ({len(self.floors)}) must match num_floors ({self.num_floors})")

    def display_names(self) -> Optional[List[str]]:
        """Display names ordered by control floor, or None for the default "1F", "2F", ..."""
        if self.floors is None:
            return None
        ordered = sorted(self.floors, key=lambda f: f['control_floor'])
        return [f.get('display_name', f"{f['control_floor']}F") for f in ordered]


@dataclass
class ElevatorConfig:
    """Car specifications"""
    max_capacity: int = 5  # persons
    home_floor: int = 1
    floor_to_floor_time: float = 3.0  # seconds per floor

    def __post_init__(self):
        if self.max_capacity < 1:
            raise ValueError("max_capacity must be at least 1")
        if self.home_floor < 1:
            raise ValueError("home_floor must be at least 1")
        if self.floor_to_floor_time <= 0:
            raise ValueError("floor_to_floor_time must be positive")


@dataclass
class DoorConfig:
    """Door specifications"""
    operation_time: float = 1.5  # seconds, for opening and for closing

    def __post_init__(self):
        if self.operation_time <= 0:
            raise ValueError("operation_time must be positive")


@dataclass
class TrafficConfig:
    """Passenger behaviour and seeding"""
    passenger_exit_time: float = 2.0  # seconds per stop
    passenger_entry_time: float = 2.0  # seconds per stop
    seed_passengers: bool = True  # generate a random batch when a run starts
    max_passengers_per_floor: Optional[int] = None  # None = cabin capacity
    simulation_duration: float = 300.0  # seconds

    def __post_init__(self):
        if self.passenger_exit_time <= 0:
            raise ValueError("passenger_exit_time must be positive")
        if self.passenger_entry_time <= 0:
            raise ValueError("passenger_entry_time must be positive")
        if self.max_passengers_per_floor is not None and self.max_passengers_per_floor < 0:
            raise ValueError("max_passengers_per_floor cannot be negative")
        if self.simulation_duration <= 0:
            raise ValueError("simulation_duration must be positive")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, car, door and traffic settings with run control.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    door: DoorConfig = field(default_factory=DoorConfig)
    traffic: TrafficConfig = field(default_factory=TrafficConfig)

    # Simulation control
    tick_interval: float = 3.0  # seconds between dispatch decisions
    random_seed: Optional[int] = None
    realtime_factor: float = 0.0  # 0.0 = as fast as possible, 1.0 = realtime
    trace_messages: bool = False  # print every broker message

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data) or {}

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 10),
            floors=building_data.get('floors')
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            max_capacity=elevator_data.get('max_capacity', 5),
            home_floor=elevator_data.get('home_floor', 1),
            floor_to_floor_time=elevator_data.get('floor_to_floor_time', 3.0)
        )

        door_data = sim_data.get('door', {})
        door = DoorConfig(
            operation_time=door_data.get('operation_time', 1.5)
        )

        traffic_data = sim_data.get('traffic', {})
        traffic = TrafficConfig(
            passenger_exit_time=traffic_data.get('passenger_exit_time', 2.0),
            passenger_entry_time=traffic_data.get('passenger_entry_time', 2.0),
            seed_passengers=traffic_data.get('seed_passengers', True),
            max_passengers_per_floor=traffic_data.get('max_passengers_per_floor'),
            simulation_duration=traffic_data.get('simulation_duration', 300.0)
        )

        return cls(
            building=building,
            elevator=elevator,
            door=door,
            traffic=traffic,
            tick_interval=sim_data.get('tick_interval', 3.0),
            random_seed=sim_data.get('random_seed'),
            realtime_factor=sim_data.get('realtime_factor', 0.0),
            trace_messages=sim_data.get('trace_messages', False)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors
                },
                'elevator': {
                    'max_capacity': self.elevator.max_capacity,
                    'home_floor': self.elevator.home_floor,
                    'floor_to_floor_time': self.elevator.floor_to_floor_time
                },
                'door': {
                    'operation_time': self.door.operation_time
                },
                'traffic': {
                    'passenger_exit_time': self.traffic.passenger_exit_time,
                    'passenger_entry_time': self.traffic.passenger_entry_time,
                    'seed_passengers': self.traffic.seed_passengers,
                    'max_passengers_per_floor': self.traffic.max_passengers_per_floor,
                    'simulation_duration': self.traffic.simulation_duration
                },
                'tick_interval': self.tick_interval,
                'realtime_factor': self.realtime_factor,
                'trace_messages': self.trace_messages
            }
        }

        if self.building.floors is not None:
            result['simulation']['building']['floors'] = self.building.floors
        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def validate(self):
        """Validate configuration consistency"""
        if self.elevator.home_floor > self.building.num_floors:
            raise ValueError(f"elevator.home_floor ({self.elevator.home_floor}) cannot exceed building.num_floors ({self.building.num_floors})")
