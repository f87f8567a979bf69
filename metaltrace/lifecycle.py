"""
Element lifecycle — status derivation from the destination control point.

A movement only knows where the element went. The resulting status depends
on nothing else: not the operation, not the previous status.

    factory     → production
    usage_site  → in_operation
    anything else (storage, legacy free-text types) → in_storage

``ready_to_ship`` and ``in_transit`` are never derived; they are reachable
only through the administrative status override.
"""

from metaltrace.models.enums import ControlPointType, ElementStatus


STATUS_BY_LOCATION_TYPE = {
    ControlPointType.FACTORY: ElementStatus.PRODUCTION,
    ControlPointType.USAGE_SITE: ElementStatus.IN_OPERATION,
}

FALLBACK_STATUS = ElementStatus.IN_STORAGE


def status_for_location(location_type: str | None) -> str:
    """
    Status an element takes when it arrives at a control point of this type.

    Args:
        location_type: ControlPoint.type (any string, None allowed)

    Returns:
        ElementStatus value
    """
    return STATUS_BY_LOCATION_TYPE.get(location_type, FALLBACK_STATUS)
