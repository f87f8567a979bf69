"""
Element registry — marking, lookup and the administrative status override.
"""

import logging

from metaltrace.exceptions import TrackingError
from metaltrace.models.enums import ElementStatus, ElementType
from metaltrace.protocols.store import ElementInfo, TrackingStore

logger = logging.getLogger('metaltrace')


class ElementRegistry:
    """Create, find and list elements; override their status."""

    def __init__(self, store: TrackingStore):
        self.store = store

    def create(self, code: str, type: str, **attrs) -> ElementInfo:
        """
        Mark a new element.

        The element always starts in 'production' with no location,
        whatever the caller sends.

        Args:
            code: DataMatrix marking, unique and permanent
            type: ElementType value
            **attrs: drawing, batch, gost, length, width, height, weight

        Raises:
            TrackingError('VALIDATION_ERROR'): If code is blank
            TrackingError('INVALID_TYPE'): If type is not an ElementType
            DuplicateCodeError: If the code is already marked
        """
        code = (code or '').strip()
        if not code:
            raise TrackingError('VALIDATION_ERROR', field='code')
        if type not in ElementType.values:
            raise TrackingError('INVALID_TYPE', type=type, expected=list(ElementType.values))

        with self.store.atomic():
            element = self.store.create_element(code, type, **attrs)

        logger.info(
            "element.create",
            extra={"element_id": element.id, "code": element.code, "type": element.type},
        )
        return element

    def get(self, element_id: int) -> ElementInfo:
        """
        Raises:
            TrackingError('ELEMENT_NOT_FOUND')
        """
        element = self.store.get_element(element_id)
        if element is None:
            raise TrackingError('ELEMENT_NOT_FOUND', element_id=element_id)
        return element

    def get_by_code(self, code: str) -> ElementInfo:
        """
        Raises:
            TrackingError('ELEMENT_NOT_FOUND')
        """
        element = self.store.get_element_by_code(code)
        if element is None:
            raise TrackingError('ELEMENT_NOT_FOUND', element_code=code)
        return element

    def list(self, status: str | None = None, type: str | None = None,
             location_id: int | None = None) -> list[ElementInfo]:
        """
        Elements matching every given filter, most recently created first.

        Raises:
            TrackingError('INVALID_STATUS'): Unknown status filter
            TrackingError('INVALID_TYPE'): Unknown type filter
        """
        if status and status not in ElementStatus.values:
            raise TrackingError('INVALID_STATUS', status=status)
        if type and type not in ElementType.values:
            raise TrackingError('INVALID_TYPE', type=type)
        return self.store.list_elements(status=status or None, type=type or None,
                                        location_id=location_id)

    def set_status(self, element_id: int, status: str,
                   location_id: int | None = None) -> ElementInfo:
        """
        Administrative override.

        Any status from any status: no transition check. updated_at is
        always bumped; the location only changes when one is given.

        Raises:
            TrackingError('INVALID_STATUS'): If status is not an ElementStatus
            TrackingError('ELEMENT_NOT_FOUND'): Unknown element
            TrackingError('UNKNOWN_LOCATION'): Unknown location_id
        """
        if status not in ElementStatus.values:
            raise TrackingError('INVALID_STATUS', status=status, expected=list(ElementStatus.values))

        with self.store.atomic():
            current = self.store.get_element(element_id, lock=True)
            if current is None:
                raise TrackingError('ELEMENT_NOT_FOUND', element_id=element_id)

            if location_id is not None and self.store.get_control_point(location_id) is None:
                raise TrackingError('UNKNOWN_LOCATION', location_id=location_id)

            element = self.store.update_element_status(element_id, status, location_id)

        logger.info(
            "element.status_override",
            extra={
                "element_id": element_id,
                "from_status": current.status,
                "to_status": element.status,
                "location_id": element.current_location_id,
            },
        )
        return element
