"""
Data Model Tests

Passenger lifecycle, floors with waiting lists, the building and the car.
"""

import pytest

from liftsim.core.building import Building, FloorDefinition
from liftsim.core.car import Car
from liftsim.core.passenger import Passenger


def test_passenger_lifecycle_and_metrics():
    passenger = Passenger(1, origin_floor=2, created_at=10.0)

    assert passenger.status == Passenger.WAITING
    assert passenger.destination_floor is None
    assert passenger.get_waiting_time() is None

    passenger.assign_destination(7)
    passenger.mark_boarded(14.0)
    assert passenger.status == Passenger.RIDING
    assert passenger.get_waiting_time() == 4.0

    passenger.mark_completed(29.0)
    assert passenger.status == Passenger.COMPLETED
    assert passenger.get_riding_time() == 15.0
    assert passenger.get_total_journey_time() == 19.0
    assert passenger.to_dict()["destination_floor"] == 7


def test_passenger_destination_must_differ_from_origin():
    passenger = Passenger(1, origin_floor=3)
    with pytest.raises(ValueError):
        passenger.assign_destination(3)


def test_building_with_floors():
    building = Building.with_floors(4, ["L", "2", "3", "R"])

    assert building.num_floors == 4
    assert (building.min_floor, building.max_floor) == (1, 4)
    assert building.get_display_name(1) == "L"
    assert building.get_control_floor("R") == 4
    assert building.is_valid_floor(4)
    assert not building.is_valid_floor(0)
    assert not building.is_valid_floor(5)
    with pytest.raises(ValueError):
        building.get_floor(5)


def test_building_requires_sequential_floors():
    with pytest.raises(ValueError):
        Building([FloorDefinition(1, "1F"), FloorDefinition(3, "3F")])
    with pytest.raises(ValueError):
        Building([])


def test_floor_waiting_list_keeps_arrival_order():
    building = Building.with_floors(5)
    floor = building.get_floor(2)
    first, second = Passenger(1, 2), Passenger(2, 2)

    floor.add_waiting(first)
    floor.add_waiting(second)
    assert floor.waiting_passengers == (first, second)
    assert building.total_waiting() == 2

    with pytest.raises(ValueError):
        floor.add_waiting(first)
    with pytest.raises(ValueError):
        floor.add_waiting(Passenger(3, origin_floor=4))

    floor.remove_waiting(first)
    assert floor.waiting_passengers == (second,)

    building.clear_all_waiting()
    assert building.total_waiting() == 0


def test_car_moves_one_floor_at_a_time():
    car = Car(num_floors=5, capacity=2, home_floor=1)

    car.move_to(2)
    assert car.current_floor == 2
    with pytest.raises(ValueError):
        car.move_to(4)
    with pytest.raises(ValueError):
        car.move_to(2)

    car.move_to(1)
    with pytest.raises(ValueError):
        car.move_to(0)


def test_car_refuses_boarding_when_full():
    car = Car(num_floors=5, capacity=2)
    passengers = [Passenger(i, 1) for i in range(1, 4)]

    assert car.board(passengers[0])
    assert car.board(passengers[1])
    assert car.is_full
    assert not car.board(passengers[2])
    assert car.load == 2


def test_car_disembark_and_reset():
    car = Car(num_floors=5, capacity=3, home_floor=2)
    staying, leaving = Passenger(1, 2), Passenger(2, 2)
    staying.assign_destination(5)
    leaving.assign_destination(3)
    car.board(staying)
    car.board(leaving)
    car.move_to(3)

    assert car.disembark(3) == [leaving]
    assert car.passengers == (staying,)

    car.reset()
    assert car.current_floor == 2
    assert car.load == 0


def test_car_validates_construction():
    with pytest.raises(ValueError):
        Car(num_floors=5, capacity=0)
    with pytest.raises(ValueError):
        Car(num_floors=5, home_floor=6)
