"""
Tracking endpoints: control points, elements, movements, dashboard.
"""

from metaltrace.exceptions import TrackingError
from metaltrace.forms import (
    ControlPointForm,
    ElementFilterForm,
    ElementForm,
    ElementStatusForm,
    MovementForm,
)
from metaltrace.protocols.store import ELEMENT_ATTRIBUTES
from metaltrace.serializers import control_point_as_dict, element_as_dict, movement_as_dict
from metaltrace.views.base import (
    ADMINISTRATORS,
    ELEMENT_WRITERS,
    FIELD_OPERATORS,
    ApiView,
    snake_keys,
)


# ══════════════════════════════════════════════════════════════
# ELEMENTS
# ══════════════════════════════════════════════════════════════


class ElementCollectionView(ApiView):
    """GET list (status/type/locationId filters), POST mark a new element."""

    roles = {'post': ELEMENT_WRITERS}

    def get(self, request):
        filters = self.bind(ElementFilterForm, snake_keys(request.GET.dict()))
        elements = self.tracking.elements.list(
            status=filters['status'] or None,
            type=filters['type'] or None,
            location_id=filters['location_id'],
        )
        return self.json([element_as_dict(e) for e in elements])

    def post(self, request):
        data = self.bind(ElementForm, self.payload())
        attrs = {k: data[k] for k in ELEMENT_ATTRIBUTES}
        element = self.tracking.elements.create(data['code'], data['type'], **attrs)
        return self.json(element_as_dict(element), status=201)


class ElementDetailView(ApiView):
    def get(self, request, pk):
        return self.json(element_as_dict(self.tracking.elements.get(pk)))


class ElementByCodeView(ApiView):
    """Lookup by the scanned DataMatrix code."""

    def get(self, request, code):
        return self.json(element_as_dict(self.tracking.elements.get_by_code(code)))


class ElementStatusView(ApiView):
    """PATCH administrative status override. No transition check."""

    roles = {'patch': FIELD_OPERATORS}

    def patch(self, request, pk):
        data = self.bind(ElementStatusForm, self.payload())
        element = self.tracking.elements.set_status(pk, data['status'], data['location_id'])
        return self.json(element_as_dict(element))


# ══════════════════════════════════════════════════════════════
# MOVEMENTS
# ══════════════════════════════════════════════════════════════


class MovementCollectionView(ApiView):
    """POST record a movement; the element status follows the destination."""

    roles = {'post': FIELD_OPERATORS}

    def post(self, request):
        data = self.bind(MovementForm, self.payload())
        movement = self.tracking.movements.record(
            element_id=data['element_id'],
            to_location_id=data['to_location_id'],
            operation=data['operation'],
            operator_id=request.user.pk,
            from_location_id=data['from_location_id'],
            comments=data['comments'],
            photo_url=data['photo_url'],
            latitude=data['latitude'],
            longitude=data['longitude'],
        )
        return self.json(movement_as_dict(movement), status=201)


class ElementMovementsView(ApiView):
    """GET full movement history of an element, newest first."""

    def get(self, request, element_id):
        movements = self.tracking.movements.history(element_id)
        return self.json([movement_as_dict(m) for m in movements])


# ══════════════════════════════════════════════════════════════
# CONTROL POINTS
# ══════════════════════════════════════════════════════════════


class ControlPointCollectionView(ApiView):
    roles = {'post': ADMINISTRATORS}

    def get(self, request):
        points = self.tracking.control_points.list()
        return self.json([control_point_as_dict(p) for p in points])

    def post(self, request):
        data = self.bind(ControlPointForm, self.payload())
        point = self.tracking.control_points.create(
            name=data['name'],
            type=data['type'],
            address=data['address'],
            latitude=data['latitude'],
            longitude=data['longitude'],
        )
        return self.json(control_point_as_dict(point), status=201)


class ControlPointDetailView(ApiView):
    def get(self, request, pk):
        return self.json(control_point_as_dict(self.tracking.control_points.get(pk)))


# ══════════════════════════════════════════════════════════════
# DASHBOARD
# ══════════════════════════════════════════════════════════════


class DashboardStatsView(ApiView):
    def get(self, request):
        return self.json(self.tracking.dashboard.stats())


class RecentMovementsView(ApiView):
    """GET newest movements; optional ?limit= (1..100)."""

    def get(self, request):
        limit = None
        raw = request.GET.get('limit')
        if raw:
            try:
                limit = max(1, min(int(raw), 100))
            except ValueError:
                raise TrackingError('VALIDATION_ERROR', field='limit')
        movements = self.tracking.dashboard.recent_movements(limit)
        return self.json([movement_as_dict(m) for m in movements])
