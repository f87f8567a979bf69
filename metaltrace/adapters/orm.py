"""
Django ORM Tracking Store — default persistence backend.

Settings:
    METALTRACE = {
        "TRACKING_STORE": "metaltrace.adapters.orm.DjangoTrackingStore",
    }

Concurrency:
    - atomic() is transaction.atomic()
    - get_element(lock=True) uses select_for_update(), serialising
      concurrent movements of the same element on backends with row locks
"""

from __future__ import annotations

from django.db import IntegrityError, transaction
from django.db.models import Count
from django.utils import timezone

from metaltrace.exceptions import DuplicateCodeError, TrackingError
from metaltrace.models.control_point import ControlPoint
from metaltrace.models.element import Element
from metaltrace.models.enums import ElementStatus
from metaltrace.models.movement import Movement
from metaltrace.protocols.store import (
    ELEMENT_ATTRIBUTES,
    ControlPointInfo,
    ElementInfo,
    MovementInfo,
)


def control_point_info(point: ControlPoint) -> ControlPointInfo:
    return ControlPointInfo(
        id=point.pk,
        name=point.name,
        type=point.type,
        address=point.address,
        latitude=point.latitude,
        longitude=point.longitude,
        created_at=point.created_at,
    )


def element_info(element: Element) -> ElementInfo:
    return ElementInfo(
        id=element.pk,
        code=element.code,
        type=element.type,
        status=element.status,
        drawing=element.drawing,
        batch=element.batch,
        gost=element.gost,
        length=element.length,
        width=element.width,
        height=element.height,
        weight=element.weight,
        current_location_id=element.current_location_id,
        created_at=element.created_at,
        updated_at=element.updated_at,
    )


def movement_info(movement: Movement) -> MovementInfo:
    return MovementInfo(
        id=movement.pk,
        element_id=movement.element_id,
        to_location_id=movement.to_location_id,
        operation=movement.operation,
        operator_id=movement.operator_id,
        from_location_id=movement.from_location_id,
        comments=movement.comments,
        photo_url=movement.photo_url,
        latitude=movement.latitude,
        longitude=movement.longitude,
        timestamp=movement.timestamp,
    )


class DjangoTrackingStore:
    """TrackingStore backed by the metaltrace models."""

    def atomic(self):
        return transaction.atomic()

    # ══════════════════════════════════════════════════════════════
    # CONTROL POINTS
    # ══════════════════════════════════════════════════════════════

    def create_control_point(self, name, type, address='', latitude=None, longitude=None):
        point = ControlPoint.objects.create(
            name=name,
            type=type,
            address=address or '',
            latitude=latitude,
            longitude=longitude,
        )
        return control_point_info(point)

    def get_control_point(self, point_id):
        point = ControlPoint.objects.filter(pk=point_id).first()
        return control_point_info(point) if point else None

    def list_control_points(self):
        return [control_point_info(p) for p in ControlPoint.objects.order_by('name', 'id')]

    # ══════════════════════════════════════════════════════════════
    # ELEMENTS
    # ══════════════════════════════════════════════════════════════

    def create_element(self, code, type, **attrs):
        fields = {k: v for k, v in attrs.items() if k in ELEMENT_ATTRIBUTES and v is not None}

        if Element.objects.filter(code=code).exists():
            raise DuplicateCodeError(code)

        try:
            # Savepoint keeps the outer transaction usable after IntegrityError.
            with transaction.atomic():
                element = Element.objects.create(
                    code=code,
                    type=type,
                    status=ElementStatus.PRODUCTION,
                    current_location=None,
                    **fields,
                )
        except IntegrityError:
            if Element.objects.filter(code=code).exists():
                raise DuplicateCodeError(code)
            raise

        return element_info(element)

    def get_element(self, element_id, lock=False):
        qs = Element.objects.all()
        if lock:
            qs = qs.select_for_update()
        element = qs.filter(pk=element_id).first()
        return element_info(element) if element else None

    def get_element_by_code(self, code):
        element = Element.objects.filter(code=code).first()
        return element_info(element) if element else None

    def list_elements(self, status=None, type=None, location_id=None):
        qs = Element.objects.matching(status=status, type=type, location_id=location_id)
        return [element_info(e) for e in qs]

    def update_element_status(self, element_id, status, location_id=None):
        # update() skips auto_now, so updated_at is set explicitly.
        changes = {'status': status, 'updated_at': timezone.now()}
        if location_id is not None:
            changes['current_location_id'] = location_id

        updated = Element.objects.filter(pk=element_id).update(**changes)
        if not updated:
            raise TrackingError('ELEMENT_NOT_FOUND', element_id=element_id)

        return element_info(Element.objects.get(pk=element_id))

    def count_elements_by_status(self):
        rows = Element.objects.order_by().values('status').annotate(n=Count('id'))
        return {row['status']: row['n'] for row in rows}

    # ══════════════════════════════════════════════════════════════
    # MOVEMENTS
    # ══════════════════════════════════════════════════════════════

    def add_movement(self, element_id, to_location_id, operation, operator_id,
                     from_location_id=None, comments='', photo_url='',
                     latitude=None, longitude=None):
        movement = Movement.objects.create(
            element_id=element_id,
            to_location_id=to_location_id,
            from_location_id=from_location_id,
            operation=operation,
            operator_id=operator_id,
            comments=comments or '',
            photo_url=photo_url or '',
            latitude=latitude,
            longitude=longitude,
        )
        return movement_info(movement)

    def list_movements(self, element_id):
        qs = Movement.objects.filter(element_id=element_id).order_by('-timestamp', '-id')
        return [movement_info(m) for m in qs]

    def recent_movements(self, limit):
        qs = Movement.objects.order_by('-timestamp', '-id')[:limit]
        return [movement_info(m) for m in qs]
