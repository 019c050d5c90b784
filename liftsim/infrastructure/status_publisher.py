"""
Outbound notifications of the elevator core.

The core never talks to a display directly. It publishes small status
messages on the broker; the DisplayBridge and the analyzers subscribe.
"""

from typing import Iterable

from .message_broker import MessageBroker

POSITION_TOPIC = "elevator/position"
DOORS_TOPIC = "elevator/doors"
DOOR_PHASE_TOPIC = "elevator/door_phase"
PASSENGERS_TOPIC = "elevator/passengers"
DIRECTION_TOPIC = "elevator/direction"
IDLE_TOPIC = "elevator/idle"
REQUEST_TOPIC = "requests/registered"
REQUEST_CLEARED_TOPIC = "requests/cleared"
JOURNEY_TOPIC = "passengers/completed"


def waiting_topic(floor: int) -> str:
    return f"floor/{floor}/waiting"


class StatusPublisher:
    """Builds status messages and hands them to the broker."""

    def __init__(self, broker: MessageBroker):
        self.broker = broker

    def _message(self, **fields) -> dict:
        fields["timestamp"] = self.broker.get_current_time()
        return fields

    def position_changed(self, floor: int):
        self.broker.put(POSITION_TOPIC, self._message(floor=floor))

    def doors_changed(self, floor: int, is_open: bool):
        self.broker.put(DOORS_TOPIC, self._message(floor=floor, open=is_open))

    def door_phase_changed(self, floor: int, phase: str):
        self.broker.put(DOOR_PHASE_TOPIC, self._message(floor=floor, phase=phase))

    def passengers_changed(self, floor: int, passengers: Iterable, capacity: int):
        snapshot = tuple(passengers)
        self.broker.put(PASSENGERS_TOPIC, self._message(
            floor=floor, passengers=snapshot, count=len(snapshot), capacity=capacity))

    def waiting_changed(self, floor: int, passengers: Iterable):
        snapshot = tuple(passengers)
        self.broker.put(waiting_topic(floor), self._message(
            floor=floor, passengers=snapshot, count=len(snapshot)))

    def direction_changed(self, old_direction, new_direction):
        self.broker.put(DIRECTION_TOPIC, self._message(
            direction=new_direction, previous=old_direction))

    def idle(self, floor: int):
        self.broker.put(IDLE_TOPIC, self._message(floor=floor))

    def request_registered(self, floor: int, kind: str, is_new: bool):
        self.broker.put(REQUEST_TOPIC, self._message(floor=floor, kind=kind, new=is_new))

    def requests_cleared(self, floor: int, was_call: bool, was_destination: bool):
        self.broker.put(REQUEST_CLEARED_TOPIC, self._message(
            floor=floor, was_call=was_call, was_destination=was_destination))

    def journey_completed(self, passenger):
        self.broker.put(JOURNEY_TOPIC, self._message(
            passenger_id=passenger.id,
            origin_floor=passenger.origin_floor,
            destination_floor=passenger.destination_floor,
            waiting_time=passenger.get_waiting_time(),
            riding_time=passenger.get_riding_time(),
        ))
