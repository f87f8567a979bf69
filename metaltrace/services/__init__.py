"""
Tracking services — modular organization of tracking operations.

Each service receives the TrackingStore it works on:
    from metaltrace.services import ControlPointRegistry, ElementRegistry, MovementRecorder, Dashboard
"""

from metaltrace.services.control_points import ControlPointRegistry
from metaltrace.services.dashboard import Dashboard
from metaltrace.services.elements import ElementRegistry
from metaltrace.services.movements import MovementRecorder

__all__ = [
    'ControlPointRegistry',
    'ElementRegistry',
    'MovementRecorder',
    'Dashboard',
]
