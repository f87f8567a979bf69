"""
In-memory Tracking Store — dict-backed adapter for tests and local experiments.

Usage in settings.py:
    METALTRACE = {
        "TRACKING_STORE": "metaltrace.adapters.memory.InMemoryTrackingStore",
    }

or directly:
    tracking = Tracking(InMemoryTrackingStore())

Data lives as long as the instance. atomic() takes a snapshot and restores
it if the block raises, so failed operations leave no trace, as with the
ORM adapter.

WARNING: Do NOT use in production. Nothing is persisted.
"""

from __future__ import annotations

import itertools
import threading
from contextlib import contextmanager
from dataclasses import replace

from django.utils import timezone

from metaltrace.exceptions import DuplicateCodeError, TrackingError
from metaltrace.models.enums import ElementStatus
from metaltrace.protocols.store import (
    ELEMENT_ATTRIBUTES,
    ControlPointInfo,
    ElementInfo,
    MovementInfo,
)


class InMemoryTrackingStore:
    """TrackingStore keeping records in dicts keyed by id."""

    def __init__(self):
        self._lock = threading.RLock()
        self._ids = itertools.count(1)
        self.control_points: dict[int, ControlPointInfo] = {}
        self.elements: dict[int, ElementInfo] = {}
        self.movements: dict[int, MovementInfo] = {}

    @contextmanager
    def atomic(self):
        with self._lock:
            snapshot = (dict(self.control_points), dict(self.elements), dict(self.movements))
            try:
                yield
            except BaseException:
                self.control_points, self.elements, self.movements = snapshot
                raise

    # Control points

    def create_control_point(self, name, type, address='', latitude=None, longitude=None):
        with self._lock:
            point = ControlPointInfo(
                id=next(self._ids),
                name=name,
                type=type,
                address=address or '',
                latitude=latitude,
                longitude=longitude,
                created_at=timezone.now(),
            )
            self.control_points[point.id] = point
            return point

    def get_control_point(self, point_id):
        return self.control_points.get(point_id)

    def list_control_points(self):
        return sorted(self.control_points.values(), key=lambda p: (p.name, p.id))

    # Elements

    def create_element(self, code, type, **attrs):
        fields = {k: v for k, v in attrs.items() if k in ELEMENT_ATTRIBUTES and v is not None}
        with self._lock:
            if self.get_element_by_code(code) is not None:
                raise DuplicateCodeError(code)
            now = timezone.now()
            element = ElementInfo(
                id=next(self._ids),
                code=code,
                type=type,
                status=ElementStatus.PRODUCTION.value,
                current_location_id=None,
                created_at=now,
                updated_at=now,
                **fields,
            )
            self.elements[element.id] = element
            return element

    def get_element(self, element_id, lock=False):
        # atomic() already holds the store-wide lock.
        return self.elements.get(element_id)

    def get_element_by_code(self, code):
        return next((e for e in self.elements.values() if e.code == code), None)

    def list_elements(self, status=None, type=None, location_id=None):
        found = [
            e for e in self.elements.values()
            if (not status or e.status == status)
            and (not type or e.type == type)
            and (not location_id or e.current_location_id == location_id)
        ]
        return sorted(found, key=lambda e: (e.created_at, e.id), reverse=True)

    def update_element_status(self, element_id, status, location_id=None):
        with self._lock:
            element = self.elements.get(element_id)
            if element is None:
                raise TrackingError('ELEMENT_NOT_FOUND', element_id=element_id)
            changes = {'status': str(status), 'updated_at': timezone.now()}
            if location_id is not None:
                changes['current_location_id'] = location_id
            element = replace(element, **changes)
            self.elements[element_id] = element
            return element

    def count_elements_by_status(self):
        counts: dict[str, int] = {}
        for element in self.elements.values():
            counts[element.status] = counts.get(element.status, 0) + 1
        return counts

    # Movements

    def add_movement(self, element_id, to_location_id, operation, operator_id,
                     from_location_id=None, comments='', photo_url='',
                     latitude=None, longitude=None):
        with self._lock:
            movement = MovementInfo(
                id=next(self._ids),
                element_id=element_id,
                to_location_id=to_location_id,
                operation=operation,
                operator_id=operator_id,
                from_location_id=from_location_id,
                comments=comments or '',
                photo_url=photo_url or '',
                latitude=latitude,
                longitude=longitude,
                timestamp=timezone.now(),
            )
            self.movements[movement.id] = movement
            return movement

    def list_movements(self, element_id):
        found = [m for m in self.movements.values() if m.element_id == element_id]
        return sorted(found, key=lambda m: (m.timestamp, m.id), reverse=True)

    def recent_movements(self, limit):
        ordered = sorted(self.movements.values(), key=lambda m: (m.timestamp, m.id), reverse=True)
        return ordered[:limit]
