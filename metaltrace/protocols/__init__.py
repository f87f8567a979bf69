"""
Metaltrace Protocols.

Defines interfaces for pluggable persistence.
"""

from metaltrace.protocols.store import (
    ControlPointInfo,
    ElementInfo,
    MovementInfo,
    TrackingStore,
)

__all__ = [
    "ControlPointInfo",
    "ElementInfo",
    "MovementInfo",
    "TrackingStore",
]
