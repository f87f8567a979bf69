"""
Movement recorder — append a movement and advance the element.

Recording is one atomic unit: the movement row and the element's new
status/location are written together or not at all.
"""

import logging

from metaltrace.exceptions import TrackingError
from metaltrace.lifecycle import status_for_location
from metaltrace.models.enums import MovementOperation
from metaltrace.protocols.store import MovementInfo, TrackingStore

logger = logging.getLogger('metaltrace')


class MovementRecorder:
    """Append-only movement log with status derivation."""

    def __init__(self, store: TrackingStore):
        self.store = store

    def record(self, element_id: int, to_location_id: int, operation: str,
               operator_id: int, from_location_id: int | None = None,
               comments: str = '', photo_url: str = '',
               latitude=None, longitude=None) -> MovementInfo:
        """
        Record an element arriving at a control point.

        1. Locks the element
        2. Checks destination (and origin, if given)
        3. Appends the Movement
        4. Sets element status from the destination type, and its location

        Raises:
            TrackingError('INVALID_OPERATION'): Unknown operation
            TrackingError('UNKNOWN_ELEMENT'): element_id does not exist
            TrackingError('UNKNOWN_LOCATION'): to/from location does not exist

        Concurrency:
            - Runs under store.atomic()
            - Element row locked until commit; concurrent movements of the
              same element are applied one after the other
        """
        if operation not in MovementOperation.values:
            raise TrackingError('INVALID_OPERATION', operation=operation,
                                expected=list(MovementOperation.values))

        with self.store.atomic():
            element = self.store.get_element(element_id, lock=True)
            if element is None:
                raise TrackingError('UNKNOWN_ELEMENT', element_id=element_id)

            destination = self.store.get_control_point(to_location_id)
            if destination is None:
                raise TrackingError('UNKNOWN_LOCATION', location_id=to_location_id)

            if from_location_id is not None and self.store.get_control_point(from_location_id) is None:
                raise TrackingError('UNKNOWN_LOCATION', location_id=from_location_id)

            movement = self.store.add_movement(
                element_id=element_id,
                to_location_id=to_location_id,
                operation=operation,
                operator_id=operator_id,
                from_location_id=from_location_id,
                comments=comments,
                photo_url=photo_url,
                latitude=latitude,
                longitude=longitude,
            )

            new_status = status_for_location(destination.type)
            self.store.update_element_status(element_id, new_status, to_location_id)

        logger.info(
            "movement.record",
            extra={
                "movement_id": movement.id,
                "element_id": element_id,
                "operation": operation,
                "from_status": element.status,
                "to_status": str(new_status),
                "location_id": to_location_id,
                "operator_id": operator_id,
            },
        )
        return movement

    def history(self, element_id: int) -> list[MovementInfo]:
        """
        Every movement of the element, newest first.

        Raises:
            TrackingError('ELEMENT_NOT_FOUND')
        """
        if self.store.get_element(element_id) is None:
            raise TrackingError('ELEMENT_NOT_FOUND', element_id=element_id)
        return self.store.list_movements(element_id)
