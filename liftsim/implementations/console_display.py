from typing import Sequence

import simpy

from ..core.direction_policy import Direction
from ..core.passenger import Passenger
from ..interfaces.display import IDisplay


class ConsoleDisplay(IDisplay):
    """Text display: one line per notification."""

    def __init__(self, env: simpy.Environment, name: str = "Display"):
        self.env = env
        self.name = name

    def _show(self, text: str):
        print(f"{self.env.now:.2f} [{self.name}] {text}")

    def on_position_changed(self, floor: int) -> None:
        self._show(f"Car at floor {floor}")

    def on_doors_changed(self, is_open: bool) -> None:
        self._show("Doors OPEN" if is_open else "Doors CLOSED")

    def on_passengers_changed(self, passengers: Sequence[Passenger]) -> None:
        ids = ", ".join(str(p.id) for p in passengers) or "-"
        self._show(f"In car ({len(passengers)}): {ids}")

    def on_waiting_changed(self, floor: int, passengers: Sequence[Passenger]) -> None:
        self._show(f"Waiting at floor {floor}: {len(passengers)}")

    def on_direction_changed(self, direction: Direction) -> None:
        self._show(f"Direction {direction.value}")

    def on_idle(self) -> None:
        self._show("Idle")
