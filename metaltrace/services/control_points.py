"""
Control point registry — where elements can be checked in.
"""

import logging

from metaltrace.conf import metaltrace_settings
from metaltrace.exceptions import TrackingError
from metaltrace.models.enums import ControlPointType
from metaltrace.protocols.store import ControlPointInfo, TrackingStore

logger = logging.getLogger('metaltrace')


class ControlPointRegistry:
    """Create and look up control points."""

    def __init__(self, store: TrackingStore):
        self.store = store

    def create(self, name: str, type: str, address: str = '',
               latitude=None, longitude=None) -> ControlPointInfo:
        """
        Register a control point.

        Raises:
            TrackingError('VALIDATION_ERROR'): If name or type is missing
            TrackingError('INVALID_TYPE'): If type is not a ControlPointType
                (only when ENFORCE_CONTROL_POINT_TYPES is on)
        """
        name = (name or '').strip()
        if not name:
            raise TrackingError('VALIDATION_ERROR', field='name')
        if not type:
            raise TrackingError('VALIDATION_ERROR', field='type')
        if metaltrace_settings.ENFORCE_CONTROL_POINT_TYPES and type not in ControlPointType.values:
            raise TrackingError('INVALID_TYPE', type=type, expected=list(ControlPointType.values))

        with self.store.atomic():
            point = self.store.create_control_point(
                name=name,
                type=type,
                address=address or '',
                latitude=latitude,
                longitude=longitude,
            )

        logger.info(
            "control_point.create",
            extra={"control_point_id": point.id, "type": point.type, "point_name": point.name},
        )
        return point

    def list(self) -> list[ControlPointInfo]:
        """All control points ordered by name."""
        return self.store.list_control_points()

    def get(self, point_id: int) -> ControlPointInfo:
        """
        Raises:
            TrackingError('CONTROL_POINT_NOT_FOUND')
        """
        point = self.store.get_control_point(point_id)
        if point is None:
            raise TrackingError('CONTROL_POINT_NOT_FOUND', control_point_id=point_id)
        return point
