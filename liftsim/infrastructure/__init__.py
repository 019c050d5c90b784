"""Infrastructure components for simulation"""

from .message_broker import MessageBroker
from .status_publisher import StatusPublisher
from .display_bridge import DisplayBridge

__all__ = [
    'MessageBroker',
    'StatusPublisher',
    'DisplayBridge',
]
