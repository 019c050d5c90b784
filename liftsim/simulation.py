"""
ElevatorSimulation - one complete, self-contained elevator run

Wires the building, car, request registry, direction policy, motion
scheduler, door sequencer and dispatch loop together on a single SimPy
environment, and exposes the inputs a display can send:
call_floor, request_destination, start, stop (plus reset and passenger
seeding).
"""

import itertools
import random
from typing import Optional

import simpy

from config.simulation import SimulationConfig
from .core.boarding import BoardingPolicy, DestinationChooser, RandomDestinationChooser
from .core.building import Building
from .core.car import Car
from .core.direction_policy import Direction, DirectionPolicy
from .core.dispatcher import DispatchLoop
from .core.door import DoorSequencer
from .core.motion import MotionScheduler
from .core.passenger import Passenger
from .core.request_registry import RequestRegistry
from .infrastructure.display_bridge import DisplayBridge
from .infrastructure.message_broker import MessageBroker
from .infrastructure.status_publisher import StatusPublisher
from .interfaces.display import IDisplay


class ElevatorSimulation:
    """
    Single-car elevator simulation.

    Each instance owns its own registry, car and building; nothing is shared
    between runs. Time advances only through ``env`` (``run`` or
    ``env.run``), so the same object works on a plain simpy.Environment for
    tests and on a real-time environment for interactive use.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 env: Optional[simpy.Environment] = None,
                 display: Optional[IDisplay] = None,
                 destination_chooser: Optional[DestinationChooser] = None,
                 rng: Optional[random.Random] = None,
                 name: str = "Elevator"):
        self.config = config or SimulationConfig()
        self.config.validate()
        self.env = env or simpy.Environment()
        self.name = name
        self.rng = rng or random.Random(self.config.random_seed)

        self.broker = MessageBroker(self.env, trace=self.config.trace_messages)
        self.publisher = StatusPublisher(self.broker)

        building_cfg = self.config.building
        elevator_cfg = self.config.elevator
        self.building = Building.with_floors(building_cfg.num_floors, building_cfg.display_names())
        self.car = Car(self.building.num_floors, capacity=elevator_cfg.max_capacity,
                       home_floor=elevator_cfg.home_floor)
        self.registry = RequestRegistry()
        self.direction_policy = DirectionPolicy(on_change=self._on_direction_changed)

        chooser = destination_chooser or RandomDestinationChooser(self.building.num_floors, self.rng)
        self.boarding = BoardingPolicy(self.car, self.registry, chooser)

        self.motion = MotionScheduler(self.env, self.car, self.publisher,
                                      floor_to_floor_time=elevator_cfg.floor_to_floor_time,
                                      name=f"{name}_Motion")
        self.door = DoorSequencer(self.env, self.car, self.building, self.boarding, self.publisher,
                                  door_operation_time=self.config.door.operation_time,
                                  passenger_exit_time=self.config.traffic.passenger_exit_time,
                                  passenger_entry_time=self.config.traffic.passenger_entry_time,
                                  name=f"{name}_Door")
        self.dispatcher = DispatchLoop(self.env, self.building, self.car, self.registry,
                                       self.direction_policy, self.motion, self.door, self.publisher,
                                       tick_interval=self.config.tick_interval,
                                       name=f"{name}_Dispatcher")

        self.display_bridge = DisplayBridge(self.env, self.broker, display) if display is not None else None
        self._passenger_ids = itertools.count(1)

        print(f"{self.env.now:.2f} [{self.name}] Operational at floor {self.car.current_floor} "
              f"({self.building.num_floors} floors, capacity {self.car.capacity}).")
        self.publisher.position_changed(self.car.current_floor)

    def _log(self, message: str):
        print(f"{self.env.now:.2f} [{self.name}] {message}")

    def _on_direction_changed(self, old_direction: Direction, new_direction: Direction):
        self._log(f"Direction: {old_direction.value} -> {new_direction.value}")
        self.publisher.direction_changed(old_direction, new_direction)
        if new_direction == Direction.IDLE:
            self.publisher.idle(self.car.current_floor)

    # ========================================
    # Inputs
    # ========================================

    def start(self):
        self.dispatcher.start()

    def stop(self):
        self.dispatcher.stop()

    def call_floor(self, floor: int) -> bool:
        """
        Register a pickup request from ``floor``.

        Returns:
            True if the request is new. Out-of-range floors and repeated
            requests are logged and ignored.
        """
        return self._register(floor, "CALL")

    def request_destination(self, floor: int) -> bool:
        """Register a drop-off request from inside the car."""
        return self._register(floor, "DESTINATION")

    def _register(self, floor: int, kind: str) -> bool:
        if not self.building.is_valid_floor(floor):
            self._log(f"{kind.title()} request rejected: floor {floor} is out of range "
                      f"({self.building.min_floor}-{self.building.max_floor}).")
            return False
        if kind == "CALL":
            is_new = self.registry.add_call(floor)
        else:
            is_new = self.registry.add_destination(floor)
        if is_new:
            self._log(f"{kind.title()} request registered for floor {floor}.")
        else:
            self._log(f"{kind.title()} request for floor {floor} - already registered.")
        self.publisher.request_registered(floor, kind, is_new)
        return is_new

    def reset(self):
        """
        Stop the run and return to the initial state: car empty at the home
        floor, no requests, no waiting passengers, direction IDLE.
        """
        self.dispatcher.abort()
        self.door.reset()
        self.registry.clear()
        self.car.reset()
        self.building.clear_all_waiting()
        self.direction_policy.set_idle()
        self._passenger_ids = itertools.count(1)
        self._log("Reset.")

        self.publisher.position_changed(self.car.current_floor)
        self.publisher.passengers_changed(self.car.current_floor, self.car.passengers, self.car.capacity)
        for floor in self.building.floors:
            self.publisher.waiting_changed(floor.floor_number, floor.waiting_passengers)

    # ========================================
    # Passengers
    # ========================================

    def add_passenger(self, origin_floor: int) -> Passenger:
        """Create a passenger waiting at ``origin_floor`` and call the car there."""
        floor = self.building.get_floor(origin_floor)
        passenger = Passenger(next(self._passenger_ids), origin_floor, created_at=self.env.now)
        floor.add_waiting(passenger)
        self.publisher.waiting_changed(origin_floor, floor.waiting_passengers)
        self.call_floor(origin_floor)
        return passenger

    def generate_random_passengers(self, max_per_floor: Optional[int] = None) -> int:
        """
        Replace all waiting lists with a random batch: 0..max_per_floor
        passengers per floor (cabin capacity by default).

        Returns:
            Number of passengers created.
        """
        limit = self.car.capacity if max_per_floor is None else max_per_floor
        if limit < 0:
            raise ValueError("max_per_floor cannot be negative")

        for floor in self.building.floors:
            if floor.clear_waiting():
                self.publisher.waiting_changed(floor.floor_number, ())

        created = 0
        for floor in self.building.floors:
            for _ in range(self.rng.randint(0, limit)):
                self.add_passenger(floor.floor_number)
                created += 1
        self._log(f"Generated {created} passengers.")
        return created

    # ========================================
    # Observation
    # ========================================

    @property
    def is_running(self) -> bool:
        return self.dispatcher.is_running

    @property
    def direction(self) -> Direction:
        return self.direction_policy.direction

    @property
    def phase(self) -> str:
        return self.dispatcher.phase

    @property
    def doors_open(self) -> bool:
        return self.door.doors_open

    def snapshot(self) -> dict:
        """Plain-data view of the whole simulation state."""
        return {
            "time": self.env.now,
            "running": self.is_running,
            "phase": self.phase,
            "direction": self.direction.value,
            "current_floor": self.car.current_floor,
            "doors_open": self.doors_open,
            "car_passengers": [p.id for p in self.car.passengers],
            "call_requests": sorted(self.registry.call_requests),
            "destination_requests": sorted(self.registry.destination_requests),
            "waiting": {f.floor_number: [p.id for p in f.waiting_passengers] for f in self.building.floors},
        }

    def run(self, until: float):
        self.env.run(until=until)
