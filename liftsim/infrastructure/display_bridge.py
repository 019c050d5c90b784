import re

import simpy

from .message_broker import MessageBroker
from .status_publisher import (
    DIRECTION_TOPIC,
    DOORS_TOPIC,
    IDLE_TOPIC,
    PASSENGERS_TOPIC,
    POSITION_TOPIC,
)
from ..interfaces.display import IDisplay

_WAITING_TOPIC = re.compile(r'floor/(\d+)/waiting')


class DisplayBridge:
    """
    Delivers broker messages to an IDisplay.

    Runs as its own SimPy process, so notifications reach the display in
    publication order without the core waiting on it.
    """

    def __init__(self, env: simpy.Environment, broker: MessageBroker, display: IDisplay):
        self.env = env
        self.display = display
        self._pipe = broker.subscribe()
        self._process = env.process(self.run())

    def run(self):
        while True:
            data = yield self._pipe.get()
            self._dispatch(data['topic'], data['message'])

    def _dispatch(self, topic: str, message: dict):
        if topic == POSITION_TOPIC:
            self.display.on_position_changed(message['floor'])
        elif topic == DOORS_TOPIC:
            self.display.on_doors_changed(message['open'])
        elif topic == PASSENGERS_TOPIC:
            self.display.on_passengers_changed(message['passengers'])
        elif topic == DIRECTION_TOPIC:
            self.display.on_direction_changed(message['direction'])
        elif topic == IDLE_TOPIC:
            self.display.on_idle()
        else:
            waiting_match = _WAITING_TOPIC.fullmatch(topic)
            if waiting_match:
                self.display.on_waiting_changed(int(waiting_match.group(1)), message['passengers'])
