"""
Metaltrace Models.

Core models for element traceability:
- ControlPoint: Where elements are checked in
- Element: Marked structural piece, with current status and location
- Movement: Immutable ledger of custody changes
- Operator: Role of a user account
"""

from metaltrace.models.control_point import ControlPoint
from metaltrace.models.element import Element
from metaltrace.models.enums import (
    ControlPointType,
    ElementStatus,
    ElementType,
    MovementOperation,
    Role,
)
from metaltrace.models.movement import Movement
from metaltrace.models.operator import Operator

__all__ = [
    'ControlPointType',
    'ElementType',
    'ElementStatus',
    'MovementOperation',
    'Role',
    'ControlPoint',
    'Element',
    'Movement',
    'Operator',
]
