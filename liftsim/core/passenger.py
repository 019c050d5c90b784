from typing import Optional


class Passenger:
    """
    A person travelling through the building.

    Passengers are passive: the boarding policy moves them between a floor's
    waiting list and the car. The origin floor is fixed at creation, the
    destination is unknown until the passenger boards.

    Lifecycle: WAITING -> RIDING -> COMPLETED. A completed passenger is no
    longer held by any floor or by the car.
    """

    WAITING = "WAITING"
    RIDING = "RIDING"
    COMPLETED = "COMPLETED"

    def __init__(self, passenger_id: int, origin_floor: int, created_at: Optional[float] = None):
        self._id = passenger_id
        self._origin_floor = origin_floor
        self.destination_floor: Optional[int] = None
        self.status = self.WAITING

        # Journey timestamps (simulation time)
        self.waiting_start_time = created_at
        self.boarding_time: Optional[float] = None
        self.alighting_time: Optional[float] = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def origin_floor(self) -> int:
        return self._origin_floor

    @property
    def name(self) -> str:
        return f"Passenger_{self._id}"

    def assign_destination(self, floor: int):
        if floor == self._origin_floor:
            raise ValueError(f"{self.name}: destination must differ from origin floor {floor}")
        self.destination_floor = floor

    def mark_boarded(self, now: float):
        self.status = self.RIDING
        self.boarding_time = now

    def mark_completed(self, now: float):
        self.status = self.COMPLETED
        self.alighting_time = now

    # ========================================
    # Journey metrics
    # ========================================

    def get_waiting_time(self) -> Optional[float]:
        """Time from arriving at the hall to boarding, or None if not boarded yet."""
        if self.waiting_start_time is not None and self.boarding_time is not None:
            return self.boarding_time - self.waiting_start_time
        return None

    def get_riding_time(self) -> Optional[float]:
        if self.boarding_time is not None and self.alighting_time is not None:
            return self.alighting_time - self.boarding_time
        return None

    def get_total_journey_time(self) -> Optional[float]:
        if self.waiting_start_time is not None and self.alighting_time is not None:
            return self.alighting_time - self.waiting_start_time
        return None

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "origin_floor": self._origin_floor,
            "destination_floor": self.destination_floor,
            "status": self.status,
        }

    def __repr__(self) -> str:
        dest = self.destination_floor if self.destination_floor is not None else "?"
        return f"Passenger(id={self._id}, {self._origin_floor}F->{dest}F, {self.status})"
