"""Core simulation entities"""

from .entity import Entity
from .passenger import Passenger
from .building import Building, Floor, FloorDefinition
from .car import Car
from .request_registry import RequestRegistry
from .direction_policy import Direction, DirectionPolicy
from .boarding import BoardingPolicy, RandomDestinationChooser
from .motion import MotionScheduler
from .door import DoorSequencer
from .dispatcher import DispatchLoop

__all__ = [
    'Entity',
    'Passenger',
    'Building',
    'Floor',
    'FloorDefinition',
    'Car',
    'RequestRegistry',
    'Direction',
    'DirectionPolicy',
    'BoardingPolicy',
    'RandomDestinationChooser',
    'MotionScheduler',
    'DoorSequencer',
    'DispatchLoop',
]
