from typing import Optional

import simpy

from .building import Building
from .car import Car
from .direction_policy import Direction, DirectionPolicy
from .door import DoorSequencer
from .entity import Entity
from .motion import MotionScheduler
from .request_registry import RequestRegistry
from ..infrastructure.status_publisher import StatusPublisher


class DispatchLoop(Entity):
    """
    Top-level driver of the car, woken on a fixed tick.

    State (phase) is one of:
    - IDLE: free to take a decision on the next tick
    - MOVING: a motion process is in flight
    - DOOR_SEQUENCE: the door cycle is running at the current floor

    A tick only acts in IDLE, so motion and door processing never overlap.
    """

    IDLE = "IDLE"
    MOVING = "MOVING"
    DOOR_SEQUENCE = "DOOR_SEQUENCE"

    def __init__(self, env: simpy.Environment, building: Building, car: Car,
                 registry: RequestRegistry, direction_policy: DirectionPolicy,
                 motion: MotionScheduler, door: DoorSequencer, publisher: StatusPublisher,
                 tick_interval: float = 3.0, name: str = "Dispatcher"):
        super().__init__(env, name, initial_state=self.IDLE)
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive")
        self.building = building
        self.car = car
        self.registry = registry
        self.direction_policy = direction_policy
        self.motion = motion
        self.door = door
        self.publisher = publisher
        self.tick_interval = tick_interval

        self._running = False
        self._ticker: Optional[simpy.Process] = None
        self._service: Optional[simpy.Process] = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def phase(self) -> str:
        return self.state

    # --- Tick driver ---

    def start(self):
        if self._running:
            self.log("Already running.")
            return
        self._running = True
        self.log(f"Started (tick every {self.tick_interval:.2f}s).")
        self._ticker = self.env.process(self._tick_driver())

    def stop(self):
        """
        Stop ticking. A motion step or door cycle in flight still finishes;
        the car then waits where it is.
        """
        if not self._running:
            return
        self._running = False
        self.log("Stopped.")
        if self._ticker is not None and self._ticker.is_alive:
            self._ticker.interrupt("stop")
        self._ticker = None

    def abort(self):
        """Cancel any motion or door process immediately (used by reset)."""
        self.stop()
        if self._service is not None and self._service.is_alive:
            self._service.interrupt("reset")
        self._service = None
        self.set_state(self.IDLE)

    def _tick_driver(self):
        try:
            while True:
                self.tick()
                yield self.env.timeout(self.tick_interval)
        except simpy.Interrupt:
            pass

    # --- Decision ---

    def tick(self):
        """Take one dispatch decision. Does nothing unless the phase is IDLE."""
        if self.state != self.IDLE:
            return

        pending = self.registry.pending()
        current_floor = self.car.current_floor

        if not pending:
            self.direction_policy.set_idle()
            return

        if self.direction_policy.direction == Direction.IDLE:
            self.direction_policy.choose_initial_direction(pending, current_floor)

        if current_floor in pending:
            self._begin_service(None)
            return

        next_floor = self.direction_policy.next_floor(pending, current_floor)
        if next_floor is None:
            self.direction_policy.reverse()
            next_floor = self.direction_policy.next_floor(pending, current_floor)
            if next_floor is None:
                self.direction_policy.set_idle()
                return

        self._begin_service(next_floor)

    def _begin_service(self, target_floor: Optional[int]):
        # Claim the phase before the process starts so that no other tick
        # can slip in at the same timestamp.
        self.set_state(self.MOVING if target_floor is not None else self.DOOR_SEQUENCE)
        self._service = self.env.process(self._serve(target_floor))

    def _serve(self, target_floor: Optional[int]):
        """Move to ``target_floor`` (if any), then run the door cycle there."""
        try:
            if target_floor is not None:
                arrived = yield from self.motion.move_to(target_floor, should_halt=lambda: not self._running)
                if not arrived or not self._running:
                    return

            floor_number = self.car.current_floor
            if floor_number not in self.registry.pending():
                return

            self.set_state(self.DOOR_SEQUENCE)
            was_call, was_destination = self.registry.clear_at(floor_number)
            self.log(f"Stopping at floor {floor_number} (call={was_call}, destination={was_destination}).")
            self.publisher.requests_cleared(floor_number, was_call, was_destination)
            yield from self.door.run_sequence(floor_number)
        except simpy.Interrupt as interrupt:
            self.log(f"Service at floor {self.car.current_floor} cancelled ({interrupt.cause}).")
        finally:
            if self._service is self.env.active_process:
                self._service = None
                self.set_state(self.IDLE)
