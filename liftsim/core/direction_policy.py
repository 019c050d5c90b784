from enum import Enum
from typing import Callable, Iterable, Optional


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    IDLE = "IDLE"


class DirectionPolicy:
    """
    Travel direction of the car and next-stop selection.

    The car keeps its direction while there are pending floors ahead of it,
    reverses when there are none, and goes IDLE once nothing is pending on
    either side.
    """

    def __init__(self, on_change: Optional[Callable[[Direction, Direction], None]] = None):
        """
        Args:
            on_change: Called with (old, new) after every direction change.
        """
        self.direction = Direction.IDLE
        self._on_change = on_change

    def _update_direction(self, new_direction: Direction):
        if self.direction != new_direction:
            old_direction = self.direction
            self.direction = new_direction
            if self._on_change is not None:
                self._on_change(old_direction, new_direction)

    def choose_initial_direction(self, pending: Iterable[int], current_floor: int) -> Direction:
        """
        Pick a direction for an idle car.

        The current floor is ignored (it is served as an immediate stop).
        With floors on both sides the closer side wins; a tie goes UP.
        """
        if self.direction != Direction.IDLE:
            return self.direction

        floors = set(pending)
        above = [f for f in floors if f > current_floor]
        below = [f for f in floors if f < current_floor]

        if above and below:
            distance_up = min(above) - current_floor
            distance_down = current_floor - max(below)
            self._update_direction(Direction.UP if distance_up <= distance_down else Direction.DOWN)
        elif above:
            self._update_direction(Direction.UP)
        elif below:
            self._update_direction(Direction.DOWN)
        return self.direction

    def reverse(self) -> Direction:
        if self.direction == Direction.UP:
            self._update_direction(Direction.DOWN)
        elif self.direction == Direction.DOWN:
            self._update_direction(Direction.UP)
        return self.direction

    def set_idle(self):
        self._update_direction(Direction.IDLE)

    def next_floor(self, pending: Iterable[int], current_floor: int) -> Optional[int]:
        """Nearest pending floor strictly ahead in the current direction, or None."""
        if self.direction == Direction.UP:
            ahead = [f for f in pending if f > current_floor]
            return min(ahead) if ahead else None
        if self.direction == Direction.DOWN:
            ahead = [f for f in pending if f < current_floor]
            return max(ahead) if ahead else None
        return None
