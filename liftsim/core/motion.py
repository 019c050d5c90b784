from typing import Callable, Optional

import simpy

from .car import Car
from .entity import Entity
from ..infrastructure.status_publisher import StatusPublisher


class MotionScheduler(Entity):
    """
    Moves the car toward a target floor, one floor per ``floor_to_floor_time``.

    Floors passed on the way are never served; only the target ends the move.
    The display is notified after every single-floor step.
    """

    def __init__(self, env: simpy.Environment, car: Car, publisher: StatusPublisher,
                 floor_to_floor_time: float = 3.0, name: str = "Motion"):
        super().__init__(env, name, initial_state="STOPPED")
        if floor_to_floor_time <= 0:
            raise ValueError("floor_to_floor_time must be positive")
        self.car = car
        self.publisher = publisher
        self.floor_to_floor_time = floor_to_floor_time

    @property
    def is_moving(self) -> bool:
        return self.state == "MOVING"

    def move_to(self, target_floor: int, should_halt: Optional[Callable[[], bool]] = None):
        """
        Movement process (generator; run it with ``yield from`` or env.process).

        Args:
            target_floor: Floor to travel to; must differ from the current floor.
            should_halt: Checked at every floor boundary short of the target.
                When it returns True the car stays at that floor.

        Returns:
            True if the car reached ``target_floor``.
        """
        start_floor = self.car.current_floor
        if target_floor == start_floor:
            raise ValueError(f"Car is already at floor {target_floor}")
        step = 1 if target_floor > start_floor else -1

        self.log(f"Moving from floor {start_floor} to {target_floor} "
                 f"({abs(target_floor - start_floor) * self.floor_to_floor_time:.2f}s)...")
        self.set_state("MOVING")
        try:
            while self.car.current_floor != target_floor:
                yield self.env.timeout(self.floor_to_floor_time)
                self.car.move_to(self.car.current_floor + step)
                self.publisher.position_changed(self.car.current_floor)

                if self.car.current_floor != target_floor and should_halt is not None and should_halt():
                    self.log(f"Halted at floor {self.car.current_floor} (target {target_floor}).")
                    return False

            self.log(f"Arrived at floor {self.car.current_floor}")
            return True
        finally:
            self.set_state("STOPPED")
