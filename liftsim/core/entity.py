import itertools
from typing import Optional

import simpy


class Entity:
    """
    Base class for stateful components living in a SimPy environment.

    Holds the environment, a readable name and a single string state.
    Every state transition is logged with the simulation time so that a
    console trace of a run reads as a timeline.
    """
    # Entity ID counter shared across all class instances
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: Optional[str] = None, initial_state: str = "INITIAL"):
        """
        Args:
            env: SimPy environment this entity belongs to.
            name: Entity name. Auto-generated from class name and ID when omitted.
            initial_state: State the entity starts in.
        """
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"
        self.state: str = initial_state

    def set_state(self, new_state: str):
        """
        Transition the entity's state.

        Args:
            new_state: Target state.
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def get_state(self) -> str:
        return self.state

    def _on_state_changed(self, old_state: str, new_state: str):
        """Hook called after every state transition. Subclasses extend it."""
        self._log_state_change(old_state, new_state)

    def _log_state_change(self, old_state: str, new_state: str):
        print(f"{self.env.now:.2f} [{self.name}] State: {old_state} -> {new_state}")

    def log(self, message: str):
        print(f"{self.env.now:.2f} [{self.name}] {message}")
