"""
Tracking Service — The single public interface for tracking operations.

Usage:
    from metaltrace import tracking, TrackingError

    factory = tracking.control_points.create('Fábrica Central', 'factory')
    element = tracking.elements.create('BM-2024-000001', 'beam', gost='GOST 8239-89')
    tracking.movements.record(element.id, factory.id, 'reception', operator_id=user.pk)
    tracking.movements.history(element.id)

Any TrackingStore can be plugged in:
    Tracking(InMemoryTrackingStore())
"""

from metaltrace.adapters import get_tracking_store
from metaltrace.protocols.store import TrackingStore
from metaltrace.services import ControlPointRegistry, Dashboard, ElementRegistry, MovementRecorder


class Tracking:
    """
    Control point registry, element registry, movement recorder and
    dashboard, all bound to the same store.
    """

    def __init__(self, store: TrackingStore):
        self.store = store
        self.control_points = ControlPointRegistry(store)
        self.elements = ElementRegistry(store)
        self.movements = MovementRecorder(store)
        self.dashboard = Dashboard(store)


def get_tracking(store: TrackingStore | None = None) -> Tracking:
    """Tracking bound to `store`, or to the configured store."""
    return Tracking(store if store is not None else get_tracking_store())
