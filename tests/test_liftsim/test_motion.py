"""
Motion Scheduler Tests

The car advances one floor per floor_to_floor_time and reports every
floor it reaches.
"""

import pytest

from liftsim.core.car import Car
from liftsim.core.motion import MotionScheduler
from liftsim.infrastructure.message_broker import MessageBroker
from liftsim.infrastructure.status_publisher import POSITION_TOPIC, StatusPublisher


def _setup(env, home_floor=1):
    broker = MessageBroker(env)
    pipe = broker.subscribe(POSITION_TOPIC)
    car = Car(num_floors=10, home_floor=home_floor)
    motion = MotionScheduler(env, car, StatusPublisher(broker), floor_to_floor_time=3.0)
    return car, motion, pipe


def _positions(pipe):
    return [(item['message']['timestamp'], item['message']['floor']) for item in pipe.items]


def test_move_up_one_floor_per_step(env):
    car, motion, pipe = _setup(env)

    process = env.process(motion.move_to(4))
    env.run(until=4.0)
    assert motion.is_moving
    assert car.current_floor == 2

    env.run()
    assert process.value is True
    assert not motion.is_moving
    assert car.current_floor == 4
    assert _positions(pipe) == [(3.0, 2), (6.0, 3), (9.0, 4)]


def test_move_down(env):
    car, motion, pipe = _setup(env, home_floor=5)

    env.process(motion.move_to(3))
    env.run()

    assert car.current_floor == 3
    assert [floor for _, floor in _positions(pipe)] == [4, 3]


def test_halt_at_next_floor_boundary(env):
    car, motion, pipe = _setup(env)

    process = env.process(motion.move_to(6, should_halt=lambda: True))
    env.run()

    assert process.value is False
    assert car.current_floor == 2
    assert env.now == 3.0
    assert motion.state == "STOPPED"


def test_move_to_current_floor_is_rejected(env):
    car, motion, _ = _setup(env)
    with pytest.raises(ValueError):
        next(motion.move_to(car.current_floor))
