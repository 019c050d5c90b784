from typing import List, Tuple

from .passenger import Passenger


class Car:
    """
    The elevator car: its position in the shaft and the passengers on board.

    The car refuses any change that would break its invariants instead of
    applying it and reporting afterwards:
    - ``board`` returns False when the cabin is full
    - ``move_to`` raises ValueError for a floor outside the shaft or a jump
      of more than one floor
    """

    def __init__(self, num_floors: int, capacity: int = 5, home_floor: int = 1):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if not (1 <= home_floor <= num_floors):
            raise ValueError(f"home_floor must be between 1 and {num_floors}")
        self.num_floors = num_floors
        self.capacity = capacity
        self.home_floor = home_floor
        self._current_floor = home_floor
        self._passengers: List[Passenger] = []

    @property
    def current_floor(self) -> int:
        return self._current_floor

    @property
    def passengers(self) -> Tuple[Passenger, ...]:
        return tuple(self._passengers)

    @property
    def load(self) -> int:
        return len(self._passengers)

    @property
    def is_full(self) -> bool:
        return len(self._passengers) >= self.capacity

    def move_to(self, floor: int):
        """Advance the car to an adjacent floor."""
        if not (1 <= floor <= self.num_floors):
            raise ValueError(f"Floor {floor} is outside the shaft (1-{self.num_floors})")
        if abs(floor - self._current_floor) != 1:
            raise ValueError(f"Car can only move one floor at a time: {self._current_floor} -> {floor}")
        self._current_floor = floor

    def board(self, passenger: Passenger) -> bool:
        if self.is_full:
            return False
        self._passengers.append(passenger)
        assert len(self._passengers) <= self.capacity
        return True

    def disembark(self, floor: int) -> List[Passenger]:
        """Remove and return every passenger whose destination is ``floor``."""
        leaving = [p for p in self._passengers if p.destination_floor == floor]
        self._passengers = [p for p in self._passengers if p.destination_floor != floor]
        return leaving

    def reset(self):
        """Return to the home floor with an empty cabin."""
        self._current_floor = self.home_floor
        self._passengers.clear()

    def __repr__(self) -> str:
        return f"Car(floor={self._current_floor}, load={len(self._passengers)}/{self.capacity})"
