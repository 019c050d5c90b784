import simpy

from .boarding import BoardingPolicy
from .building import Building
from .car import Car
from .entity import Entity
from ..infrastructure.status_publisher import StatusPublisher


class DoorSequencer(Entity):
    """
    Door cycle run once per stop.

    Four timed phases, always in this order and never overlapping:
    OPENING -> EXITING -> ENTERING -> CLOSING, then back to CLOSED.
    Each phase's effect takes place when its delay has elapsed, so the doors
    count as open from the end of OPENING until the end of CLOSING.
    """

    PHASES = ("OPENING", "EXITING", "ENTERING", "CLOSING")

    def __init__(self, env: simpy.Environment, car: Car, building: Building,
                 boarding: BoardingPolicy, publisher: StatusPublisher,
                 door_operation_time: float = 1.5, passenger_exit_time: float = 2.0,
                 passenger_entry_time: float = 2.0, name: str = "Door"):
        super().__init__(env, name, initial_state="CLOSED")
        for label, value in (("door_operation_time", door_operation_time),
                             ("passenger_exit_time", passenger_exit_time),
                             ("passenger_entry_time", passenger_entry_time)):
            if value <= 0:
                raise ValueError(f"{label} must be positive")
        self.car = car
        self.building = building
        self.boarding = boarding
        self.publisher = publisher
        self.door_operation_time = door_operation_time
        self.passenger_exit_time = passenger_exit_time
        self.passenger_entry_time = passenger_entry_time
        self.doors_open = False
        self._floor = car.current_floor

    def _on_state_changed(self, old_state: str, new_state: str):
        super()._on_state_changed(old_state, new_state)
        self.publisher.door_phase_changed(self._floor, new_state)

    @property
    def in_sequence(self) -> bool:
        return self.state in self.PHASES

    def run_sequence(self, floor_number: int):
        """
        Door process for one stop (generator).

        Returns:
            dict report with the passengers who alighted and boarded and the
            number left waiting on the floor.
        """
        if self.car.current_floor != floor_number:
            raise ValueError(f"Car is at floor {self.car.current_floor}, not {floor_number}")
        floor = self.building.get_floor(floor_number)
        self._floor = floor_number

        # 1. Open the door
        self.log("Door Opening...")
        self.set_state("OPENING")
        yield self.env.timeout(self.door_operation_time)
        self.doors_open = True
        self.publisher.doors_changed(floor_number, True)
        self.log("Door Opened.")

        # 2. Let passengers out
        self.set_state("EXITING")
        yield self.env.timeout(self.passenger_exit_time)
        alighted = self.boarding.disembark(floor_number, self.env.now)
        for passenger in alighted:
            self.log(f"{passenger.name} alighted at floor {floor_number}.")
            self.publisher.journey_completed(passenger)
        if alighted:
            self.publisher.passengers_changed(floor_number, self.car.passengers, self.car.capacity)

        # 3. Let waiting passengers in
        self.set_state("ENTERING")
        yield self.env.timeout(self.passenger_entry_time)
        boarded, left_waiting, new_requests = self.boarding.board(floor, self.env.now)
        for passenger, is_new in zip(boarded, new_requests):
            self.log(f"{passenger.name} boarded at floor {floor_number}, "
                     f"destination {passenger.destination_floor}.")
            self.publisher.request_registered(passenger.destination_floor, "DESTINATION", is_new)
        if left_waiting and self.car.is_full:
            self.log(f"Car full ({self.car.load}/{self.car.capacity}). "
                     f"{len(left_waiting)} passenger(s) left waiting at floor {floor_number}.")
        if boarded:
            self.publisher.passengers_changed(floor_number, self.car.passengers, self.car.capacity)
            self.publisher.waiting_changed(floor_number, floor.waiting_passengers)

        # 4. Close the door
        self.log("Door Closing...")
        self.set_state("CLOSING")
        yield self.env.timeout(self.door_operation_time)
        self.doors_open = False
        self.publisher.doors_changed(floor_number, False)
        self.log("Door Closed.")
        self.set_state("CLOSED")

        return {
            "floor": floor_number,
            "alighted": alighted,
            "boarded": boarded,
            "left_waiting": len(left_waiting),
        }

    def reset(self):
        """Force the doors shut without running the closing phase."""
        was_open = self.doors_open
        self.doors_open = False
        self.set_state("CLOSED")
        if was_open:
            self.publisher.doors_changed(self.car.current_floor, False)
