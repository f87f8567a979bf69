"""
Django Metaltrace — Rastreabilidade de elementos metálicos.

Elementos marcados (DataMatrix) passam por pontos de controle:
fábrica → depósito → canteiro de obra.

Uso:
    from metaltrace import tracking, TrackingError

    point = tracking.control_points.create('Fábrica Central', 'factory')
    element = tracking.elements.create('BM-2024-000001', 'beam')
    tracking.movements.record(element.id, point.id, 'reception', operator_id=user.pk)
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'tracking':
        from metaltrace.service import get_tracking
        return get_tracking()
    elif name == 'Tracking':
        from metaltrace.service import Tracking
        return Tracking
    elif name == 'TrackingError':
        from metaltrace.exceptions import TrackingError
        return TrackingError
    elif name == 'DuplicateCodeError':
        from metaltrace.exceptions import DuplicateCodeError
        return DuplicateCodeError
    elif name == 'ControlPoint':
        from metaltrace.models.control_point import ControlPoint
        return ControlPoint
    elif name == 'Element':
        from metaltrace.models.element import Element
        return Element
    elif name == 'Movement':
        from metaltrace.models.movement import Movement
        return Movement
    elif name == 'Operator':
        from metaltrace.models.operator import Operator
        return Operator
    elif name == 'ElementStatus':
        from metaltrace.models.enums import ElementStatus
        return ElementStatus
    elif name == 'ControlPointType':
        from metaltrace.models.enums import ControlPointType
        return ControlPointType
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'tracking',
    'Tracking',
    'TrackingError',
    'DuplicateCodeError',
    'ControlPoint',
    'Element',
    'Movement',
    'Operator',
    'ElementStatus',
    'ControlPointType',
]

__version__ = '0.1.0'
