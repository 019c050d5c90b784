"""
Display Interface

Defines the outbound contract between the elevator core and whatever
presents it (console, GUI, web page). The core calls these methods through
the DisplayBridge; a display must return quickly and never block the
simulation.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from ..core.direction_policy import Direction
from ..core.passenger import Passenger


class IDisplay(ABC):
    """
    Receiver of elevator status notifications.

    Input in the opposite direction (call, request destination, start,
    stop) goes through ElevatorSimulation.
    """

    @abstractmethod
    def on_position_changed(self, floor: int) -> None:
        """Car is now at ``floor``."""
        pass

    @abstractmethod
    def on_doors_changed(self, is_open: bool) -> None:
        pass

    @abstractmethod
    def on_passengers_changed(self, passengers: Sequence[Passenger]) -> None:
        """Snapshot of the passengers in the car."""
        pass

    @abstractmethod
    def on_waiting_changed(self, floor: int, passengers: Sequence[Passenger]) -> None:
        """Snapshot of the passengers waiting at ``floor``."""
        pass

    @abstractmethod
    def on_direction_changed(self, direction: Direction) -> None:
        pass

    @abstractmethod
    def on_idle(self) -> None:
        """Car has nothing left to do."""
        pass
