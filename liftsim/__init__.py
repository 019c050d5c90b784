"""
liftsim - single-car elevator dispatch simulator

This package provides the simulation entities, the dispatch and motion
controller, and the messaging infrastructure that feeds a display.
"""

__version__ = "0.1.0"

from .core.building import Building, Floor, FloorDefinition
from .core.car import Car
from .core.direction_policy import Direction, DirectionPolicy
from .core.dispatcher import DispatchLoop
from .core.door import DoorSequencer
from .core.motion import MotionScheduler
from .core.passenger import Passenger
from .core.request_registry import RequestRegistry

from .infrastructure.message_broker import MessageBroker
from .interfaces.display import IDisplay
from .simulation import ElevatorSimulation

__all__ = [
    'Building',
    'Floor',
    'FloorDefinition',
    'Car',
    'Direction',
    'DirectionPolicy',
    'DispatchLoop',
    'DoorSequencer',
    'MotionScheduler',
    'Passenger',
    'RequestRegistry',
    'MessageBroker',
    'IDisplay',
    'ElevatorSimulation',
]
