import random
from typing import Callable, List, Optional, Tuple

from .building import Floor
from .car import Car
from .passenger import Passenger
from .request_registry import RequestRegistry

DestinationChooser = Callable[[Passenger, int], int]


class RandomDestinationChooser:
    """Picks a destination uniformly among all floors except the boarding floor."""

    def __init__(self, num_floors: int, rng: Optional[random.Random] = None):
        if num_floors < 2:
            raise ValueError("Need at least two floors to choose a destination")
        self.num_floors = num_floors
        self.rng = rng or random.Random()

    def __call__(self, passenger: Passenger, boarding_floor: int) -> int:
        choices = [f for f in range(1, self.num_floors + 1) if f != boarding_floor]
        return self.rng.choice(choices)


class BoardingPolicy:
    """
    Decides who leaves and who enters the car at a stop.

    - Alighting: everyone whose destination is the stopped floor.
    - Boarding: waiting passengers in arrival order while the car has room.
      The first passenger who finds the car full stays, and so does
      everyone behind them.

    Travel direction is not checked: a passenger's destination is only
    known once they are inside the car.
    """

    def __init__(self, car: Car, registry: RequestRegistry, destination_chooser: DestinationChooser):
        self.car = car
        self.registry = registry
        self.destination_chooser = destination_chooser

    def disembark(self, floor: int, now: float) -> List[Passenger]:
        leaving = self.car.disembark(floor)
        for passenger in leaving:
            passenger.mark_completed(now)
        return leaving

    def _choose_destination(self, passenger: Passenger, boarding_floor: int) -> int:
        destination = self.destination_chooser(passenger, boarding_floor)
        if not (1 <= destination <= self.car.num_floors):
            raise ValueError(f"{passenger.name}: destination {destination} is outside 1-{self.car.num_floors}")
        if destination == boarding_floor:
            raise ValueError(f"{passenger.name}: destination must differ from boarding floor {boarding_floor}")
        return destination

    def board(self, floor: Floor, now: float) -> Tuple[List[Passenger], List[Passenger], List[bool]]:
        """
        Move waiting passengers from ``floor`` into the car.

        Every boarded passenger gets a destination, which is registered as a
        destination request straight away. The destination is checked before
        the passenger leaves the floor, so a bad chooser answer raises
        ValueError with the passenger still waiting.

        Returns:
            (boarded, left_waiting, new_requests), where new_requests[i] tells
            whether boarded[i] registered a destination not already pending.
        """
        boarded = []
        new_requests = []
        for passenger in floor.waiting_passengers:
            if self.car.is_full:
                break
            destination = self._choose_destination(passenger, floor.floor_number)
            self.car.board(passenger)
            floor.remove_waiting(passenger)
            passenger.assign_destination(destination)
            passenger.mark_boarded(now)
            new_requests.append(self.registry.add_destination(destination))
            boarded.append(passenger)
        return boarded, list(floor.waiting_passengers), new_requests
