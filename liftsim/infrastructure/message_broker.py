from typing import List, Optional, Tuple

import simpy


class MessageBroker:
    """
    Mediates communication between components within the simulation.
    Implements a topic-based publish-subscribe model.

    Every subscriber owns its own Store, so a slow consumer never holds up
    the publisher or another subscriber: ``put`` always succeeds immediately.
    """
    def __init__(self, env: simpy.Environment, trace: bool = False):
        """
        Args:
            env (simpy.Environment): SimPy environment
            trace (bool): Print every published message
        """
        self.env = env
        self.trace = trace
        self._subscribers: List[Tuple[Optional[str], simpy.Store]] = []

    def subscribe(self, topic_prefix: Optional[str] = None) -> simpy.Store:
        """
        Create a pipe that receives every message whose topic starts with
        ``topic_prefix`` (all messages when None).

        Items in the pipe are dicts: {'topic': ..., 'message': ...}
        """
        pipe = simpy.Store(self.env)
        self._subscribers.append((topic_prefix, pipe))
        return pipe

    def unsubscribe(self, pipe: simpy.Store):
        self._subscribers = [(prefix, p) for prefix, p in self._subscribers if p is not pipe]

    def put(self, topic: str, message: dict):
        """
        Publish a message to the specified topic
        """
        if self.trace:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        envelope = {'topic': topic, 'message': message}
        for prefix, pipe in self._subscribers:
            if prefix is None or topic.startswith(prefix):
                pipe.put(envelope)

    def get_current_time(self) -> float:
        """
        Get current simulation time without exposing the SimPy environment.
        """
        return self.env.now
