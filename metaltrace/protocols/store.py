"""
Tracking Store Protocol — Persistence interface for the tracking registries.

The registries (control points, elements, movements) talk to a TrackingStore
instead of the ORM, so a request handler or a test can be given any
implementation: the Django ORM one in production, an in-memory one in tests.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class ControlPointInfo:
    """Control point snapshot."""

    id: int
    name: str
    type: str
    address: str = ''
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class ElementInfo:
    """Element snapshot."""

    id: int
    code: str
    type: str
    status: str
    drawing: str = ''
    batch: str = ''
    gost: str = ''
    length: Decimal | None = None
    width: Decimal | None = None
    height: Decimal | None = None
    weight: Decimal | None = None
    current_location_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class MovementInfo:
    """Movement snapshot."""

    id: int
    element_id: int
    to_location_id: int
    operation: str
    operator_id: int
    from_location_id: int | None = None
    comments: str = ''
    photo_url: str = ''
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    timestamp: datetime | None = None


# Technical attributes accepted by create_element()
ELEMENT_ATTRIBUTES = ('drawing', 'batch', 'gost', 'length', 'width', 'height', 'weight')


@runtime_checkable
class TrackingStore(Protocol):
    """
    Protocol for tracking persistence.

    Implementations:
        - DjangoTrackingStore: Django ORM (default)
        - InMemoryTrackingStore: dict-backed, for tests
    """

    def atomic(self) -> AbstractContextManager:
        """
        All-or-nothing block.

        Every write inside the block is discarded if the block raises.
        """
        ...

    # Control points

    def create_control_point(self, name: str, type: str, address: str = '',
                             latitude: Decimal | None = None,
                             longitude: Decimal | None = None) -> ControlPointInfo:
        ...

    def get_control_point(self, point_id: int) -> ControlPointInfo | None:
        ...

    def list_control_points(self) -> list[ControlPointInfo]:
        """All control points ordered by name."""
        ...

    # Elements

    def create_element(self, code: str, type: str, **attrs) -> ElementInfo:
        """
        Insert an element with status 'production' and no location.

        Raises:
            DuplicateCodeError: If the code is already taken
        """
        ...

    def get_element(self, element_id: int, lock: bool = False) -> ElementInfo | None:
        """
        Args:
            element_id: Element pk
            lock: Hold a row lock until the enclosing atomic() ends
        """
        ...

    def get_element_by_code(self, code: str) -> ElementInfo | None:
        ...

    def list_elements(self, status: str | None = None, type: str | None = None,
                      location_id: int | None = None) -> list[ElementInfo]:
        """AND-combined filters, most recently created first."""
        ...

    def update_element_status(self, element_id: int, status: str,
                              location_id: int | None = None) -> ElementInfo:
        """
        Set status (and location, when given). Always bumps updated_at.
        """
        ...

    def count_elements_by_status(self) -> dict[str, int]:
        """Element count per status. Statuses with no element may be absent."""
        ...

    # Movements

    def add_movement(self, element_id: int, to_location_id: int, operation: str,
                     operator_id: int, from_location_id: int | None = None,
                     comments: str = '', photo_url: str = '',
                     latitude: Decimal | None = None,
                     longitude: Decimal | None = None) -> MovementInfo:
        ...

    def list_movements(self, element_id: int) -> list[MovementInfo]:
        """Every movement of the element, newest first."""
        ...

    def recent_movements(self, limit: int) -> list[MovementInfo]:
        """Newest movements across all elements."""
        ...
