"""
Building - Defines floor structure and the passengers waiting on each floor

This module provides:
- FloorDefinition: static description of a floor (control number, display name)
- Floor: a floor with its ordered waiting list
- Building: the fixed, ordered collection of floors
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .passenger import Passenger


@dataclass
class FloorDefinition:
    """
    Defines a single floor in the building.

    Attributes:
        control_floor: Internal floor number (positive integer starting from 1)
        display_name: Human-readable floor name (e.g., "L", "2F", "R")
    """
    control_floor: int
    display_name: str

    def __post_init__(self):
        if self.control_floor < 1:
            raise ValueError(f"control_floor must be >= 1, got {self.control_floor}")


class Floor:
    """
    A floor and the passengers waiting on it, in arrival order.

    The waiting list is never handed out: callers observe it through the
    ``waiting_passengers`` snapshot and change it through the methods below.
    """

    def __init__(self, definition: FloorDefinition):
        self._definition = definition
        self._waiting: List[Passenger] = []

    @property
    def floor_number(self) -> int:
        return self._definition.control_floor

    @property
    def display_name(self) -> str:
        return self._definition.display_name

    @property
    def waiting_passengers(self) -> Tuple[Passenger, ...]:
        return tuple(self._waiting)

    @property
    def waiting_count(self) -> int:
        return len(self._waiting)

    def add_waiting(self, passenger: Passenger):
        if passenger.origin_floor != self.floor_number:
            raise ValueError(
                f"{passenger.name} originates at floor {passenger.origin_floor}, "
                f"cannot wait at floor {self.floor_number}"
            )
        if passenger in self._waiting:
            raise ValueError(f"{passenger.name} is already waiting at floor {self.floor_number}")
        self._waiting.append(passenger)

    def remove_waiting(self, passenger: Passenger):
        self._waiting.remove(passenger)

    def clear_waiting(self) -> int:
        """Empty the waiting list. Returns how many passengers were removed."""
        count = len(self._waiting)
        self._waiting.clear()
        return count

    def __repr__(self) -> str:
        return f"Floor({self.display_name}, waiting={len(self._waiting)})"


class Building:
    """
    Represents a building with defined floors.

    Floor definitions are fixed at construction; only the waiting lists of
    the floors change afterwards.
    """

    def __init__(self, floors: List[FloorDefinition]):
        """
        Initialize building with floor definitions.

        Args:
            floors: List of FloorDefinition objects
        """
        if not floors:
            raise ValueError("Building must have at least one floor")

        definitions = sorted(floors, key=lambda f: f.control_floor)

        # Control floor numbers must run 1..N without gaps
        for expected_floor, definition in enumerate(definitions, start=1):
            if definition.control_floor != expected_floor:
                raise ValueError(
                    f"Floor control numbers must be sequential starting from 1. "
                    f"Expected {expected_floor}, got {definition.control_floor}"
                )

        self._floors: Dict[int, Floor] = {d.control_floor: Floor(d) for d in definitions}
        self._display_to_control: Dict[str, int] = {d.display_name: d.control_floor for d in definitions}

        self.num_floors = len(definitions)
        self.all_floors = [d.control_floor for d in definitions]
        self.min_floor = self.all_floors[0]
        self.max_floor = self.all_floors[-1]

    @classmethod
    def with_floors(cls, num_floors: int, display_names: Optional[List[str]] = None) -> "Building":
        """Build a building with floors 1..num_floors ("1F", "2F", ... unless names are given)."""
        if display_names is not None and len(display_names) != num_floors:
            raise ValueError(f"Expected {num_floors} display names, got {len(display_names)}")
        names = display_names or [f"{i}F" for i in range(1, num_floors + 1)]
        return cls([FloorDefinition(control_floor=i, display_name=name)
                    for i, name in enumerate(names, start=1)])

    def get_floor(self, control_floor: int) -> Floor:
        """
        Raises:
            ValueError: If control_floor is not valid
        """
        if control_floor not in self._floors:
            raise ValueError(f"Invalid control floor: {control_floor}")
        return self._floors[control_floor]

    def get_display_name(self, control_floor: int) -> str:
        return self.get_floor(control_floor).display_name

    def get_control_floor(self, display_name: str) -> int:
        if display_name not in self._display_to_control:
            raise ValueError(f"Invalid display name: {display_name}")
        return self._display_to_control[display_name]

    def is_valid_floor(self, control_floor) -> bool:
        return control_floor in self._floors

    @property
    def floors(self) -> Tuple[Floor, ...]:
        return tuple(self._floors[f] for f in self.all_floors)

    def total_waiting(self) -> int:
        return sum(floor.waiting_count for floor in self._floors.values())

    def clear_all_waiting(self):
        for floor in self._floors.values():
            floor.clear_waiting()

    def __repr__(self) -> str:
        return f"Building(floors={self.num_floors}, range={self.min_floor}-{self.max_floor})"
