"""
Elevator System Analyzer

Statistical analysis and reporting tools for simulation runs.

Components:
- Statistics: Base recorder for observable data (position, doors, load, buttons)
- SimulationStatistics: Simulation-only per-passenger metrics
- RealtimePerformanceMonitor: Request service times from button data
"""

__version__ = "0.1.0"

from .statistics import Statistics
from .simulation_statistics import SimulationStatistics
from .realtime_monitor import RealtimePerformanceMonitor

__all__ = ['Statistics', 'SimulationStatistics', 'RealtimePerformanceMonitor']
