"""
Door Sequencer Tests

OPENING -> EXITING -> ENTERING -> CLOSING, each phase taking effect when
its delay has elapsed (1.5s, 2.0s, 2.0s, 1.5s with default timings).
"""

import pytest

from liftsim.core.boarding import BoardingPolicy
from liftsim.core.building import Building
from liftsim.core.car import Car
from liftsim.core.door import DoorSequencer
from liftsim.core.passenger import Passenger
from liftsim.core.request_registry import RequestRegistry
from liftsim.infrastructure.message_broker import MessageBroker
from liftsim.infrastructure.status_publisher import DOOR_PHASE_TOPIC, REQUEST_TOPIC, StatusPublisher


def _setup(env, capacity=5):
    broker = MessageBroker(env)
    phase_pipe = broker.subscribe(DOOR_PHASE_TOPIC)
    building = Building.with_floors(10)
    car = Car(building.num_floors, capacity=capacity)
    registry = RequestRegistry()
    boarding = BoardingPolicy(car, registry, lambda passenger, floor: 6)
    door = DoorSequencer(env, car, building, boarding, StatusPublisher(broker))
    return building, car, registry, door, phase_pipe


def test_phases_in_order_with_effects_after_each_delay(env):
    building, car, registry, door, phase_pipe = _setup(env)
    rider = Passenger(1, origin_floor=3)
    rider.assign_destination(1)
    car.board(rider)
    newcomer = Passenger(2, origin_floor=1, created_at=0.0)
    building.get_floor(1).add_waiting(newcomer)

    process = env.process(door.run_sequence(1))

    env.run(until=1.0)
    assert door.state == "OPENING"
    assert not door.doors_open

    env.run(until=2.0)
    assert door.state == "EXITING"
    assert door.doors_open
    assert rider in car.passengers

    env.run(until=4.0)
    assert door.state == "ENTERING"
    assert rider not in car.passengers
    assert rider.alighting_time == 3.5
    assert newcomer not in car.passengers

    env.run(until=6.0)
    assert door.state == "CLOSING"
    assert door.doors_open
    assert car.passengers == (newcomer,)
    assert registry.destination_requests == frozenset({6})

    env.run()
    assert env.now == 7.0
    assert door.state == "CLOSED"
    assert not door.doors_open

    report = process.value
    assert report["alighted"] == [rider]
    assert report["boarded"] == [newcomer]
    assert report["left_waiting"] == 0

    phases = [item['message']['phase'] for item in phase_pipe.items]
    assert phases == ["OPENING", "EXITING", "ENTERING", "CLOSING", "CLOSED"]


def test_full_car_leaves_passengers_waiting(env):
    building, car, registry, door, _ = _setup(env, capacity=1)
    floor = building.get_floor(1)
    first, second = Passenger(1, 1), Passenger(2, 1)
    floor.add_waiting(first)
    floor.add_waiting(second)

    process = env.process(door.run_sequence(1))
    env.run()

    assert car.passengers == (first,)
    assert floor.waiting_passengers == (second,)
    assert process.value["left_waiting"] == 1


def test_sequence_only_at_car_floor(env):
    _, _, _, door, _ = _setup(env)
    with pytest.raises(ValueError):
        next(door.run_sequence(4))


def test_reset_forces_doors_closed(env):
    _, _, _, door, _ = _setup(env)
    env.process(door.run_sequence(1))
    env.run(until=2.0)
    assert door.doors_open

    door.reset()

    assert not door.doors_open
    assert door.state == "CLOSED"
    assert not door.in_sequence


def test_shared_destination_published_as_new_once(env):
    broker = MessageBroker(env)
    request_pipe = broker.subscribe(REQUEST_TOPIC)
    building = Building.with_floors(10)
    car = Car(building.num_floors)
    registry = RequestRegistry()
    boarding = BoardingPolicy(car, registry, lambda passenger, floor: 4)
    door = DoorSequencer(env, car, building, boarding, StatusPublisher(broker))
    for i in (1, 2):
        building.get_floor(1).add_waiting(Passenger(i, 1))

    env.process(door.run_sequence(1))
    env.run()

    published = [(m['floor'], m['kind'], m['new']) for m in (item['message'] for item in request_pipe.items)]
    assert published == [(4, "DESTINATION", True), (4, "DESTINATION", False)]
    assert registry.destination_requests == frozenset({4})
