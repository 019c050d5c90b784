"""Concrete collaborators for the elevator core"""

from .console_display import ConsoleDisplay

__all__ = ['ConsoleDisplay']
