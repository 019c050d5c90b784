"""Interfaces between the elevator core and its collaborators"""

from .display import IDisplay

__all__ = ['IDisplay']
