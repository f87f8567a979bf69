"""
JSON shapes of the tracking records.

Keys are camelCase, matching the web client. Decimals are sent as strings,
datetimes as ISO 8601.
"""

from datetime import datetime
from decimal import Decimal


def _value(value):
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def control_point_as_dict(point) -> dict:
    return {
        'id': point.id,
        'name': point.name,
        'type': point.type,
        'address': point.address,
        'latitude': _value(point.latitude),
        'longitude': _value(point.longitude),
        'createdAt': _value(point.created_at),
    }


def element_as_dict(element) -> dict:
    return {
        'id': element.id,
        'code': element.code,
        'type': element.type,
        'status': element.status,
        'drawing': element.drawing,
        'batch': element.batch,
        'gost': element.gost,
        'length': _value(element.length),
        'width': _value(element.width),
        'height': _value(element.height),
        'weight': _value(element.weight),
        'currentLocationId': element.current_location_id,
        'createdAt': _value(element.created_at),
        'updatedAt': _value(element.updated_at),
    }


def movement_as_dict(movement) -> dict:
    return {
        'id': movement.id,
        'elementId': movement.element_id,
        'fromLocationId': movement.from_location_id,
        'toLocationId': movement.to_location_id,
        'operation': movement.operation,
        'operatorId': movement.operator_id,
        'comments': movement.comments,
        'photoUrl': movement.photo_url,
        'latitude': _value(movement.latitude),
        'longitude': _value(movement.longitude),
        'timestamp': _value(movement.timestamp),
    }


def user_as_dict(user) -> dict:
    operator = getattr(user, 'operator', None)
    return {
        'id': user.pk,
        'email': user.email,
        'firstName': user.first_name,
        'lastName': user.last_name,
        'role': operator.role if operator else None,
        'isActive': user.is_active,
    }
