from typing import FrozenSet, Set, Tuple


class RequestRegistry:
    """
    Pending stop requests for the car.

    Two independent sets of floor numbers:
    - call requests: pickups registered from a floor
    - destination requests: drop-offs registered from inside the car

    A floor in either set means the car must stop there. No ordering is kept;
    choosing the next stop is the direction policy's job.
    """

    def __init__(self):
        self._calls: Set[int] = set()
        self._destinations: Set[int] = set()

    def add_call(self, floor: int) -> bool:
        """Register a call request. Returns False if it was already registered."""
        if floor in self._calls:
            return False
        self._calls.add(floor)
        return True

    def add_destination(self, floor: int) -> bool:
        """Register a destination request. Returns False if it was already registered."""
        if floor in self._destinations:
            return False
        self._destinations.add(floor)
        return True

    def clear_at(self, floor: int) -> Tuple[bool, bool]:
        """
        Remove ``floor`` from both sets.

        Returns:
            (was_call, was_destination)
        """
        was_call = floor in self._calls
        was_destination = floor in self._destinations
        self._calls.discard(floor)
        self._destinations.discard(floor)
        return was_call, was_destination

    def clear(self):
        self._calls.clear()
        self._destinations.clear()

    def pending(self) -> FrozenSet[int]:
        return frozenset(self._calls | self._destinations)

    def is_empty(self) -> bool:
        return not self._calls and not self._destinations

    @property
    def call_requests(self) -> FrozenSet[int]:
        return frozenset(self._calls)

    @property
    def destination_requests(self) -> FrozenSet[int]:
        return frozenset(self._destinations)

    def __repr__(self) -> str:
        return f"RequestRegistry(calls={sorted(self._calls)}, destinations={sorted(self._destinations)})"
