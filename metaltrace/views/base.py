"""
Base view for the JSON API.

Handles, for every endpoint:
- bearer token → request user (401 otherwise)
- role gate per HTTP method (403 otherwise)
- JSON body parsing and form binding (400 otherwise)
- TrackingError → JSON error response with the mapped HTTP status
- anything else → 500 with a generic message, logged
"""

import json
import logging
import re

from django.http import JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from metaltrace.auth import require_role, resolve_token
from metaltrace.exceptions import TrackingError
from metaltrace.models.enums import Role
from metaltrace.service import get_tracking

logger = logging.getLogger(__name__)


# Who may write what
ADMINISTRATORS = [Role.ADMINISTRATOR]
ELEMENT_WRITERS = [Role.ADMINISTRATOR, Role.FACTORY_OPERATOR]
FIELD_OPERATORS = [
    Role.ADMINISTRATOR,
    Role.FACTORY_OPERATOR,
    Role.WAREHOUSE_KEEPER,
    Role.SITE_MASTER,
]

HTTP_STATUS_BY_CODE = {
    'VALIDATION_ERROR': 400,
    'INVALID_JSON': 400,
    'INVALID_TYPE': 400,
    'INVALID_STATUS': 400,
    'INVALID_OPERATION': 400,
    'UNKNOWN_ELEMENT': 400,
    'UNKNOWN_LOCATION': 400,
    'DUPLICATE_CODE': 400,
    'INVALID_CREDENTIALS': 400,
    'NOT_AUTHENTICATED': 401,
    'INVALID_TOKEN': 401,
    'TOKEN_EXPIRED': 401,
    'PERMISSION_DENIED': 403,
    'ELEMENT_NOT_FOUND': 404,
    'CONTROL_POINT_NOT_FOUND': 404,
    'NOT_FOUND': 404,
    'METHOD_NOT_ALLOWED': 405,
}

_CAMEL = re.compile(r'(?<!^)(?=[A-Z])')


def snake_keys(data) -> dict:
    """{'toLocationId': 1} → {'to_location_id': 1}"""
    return {_CAMEL.sub('_', key).lower(): value for key, value in data.items()}


def error_response(error: TrackingError) -> JsonResponse:
    status = HTTP_STATUS_BY_CODE.get(error.code, 400)
    return JsonResponse(error.as_dict(), status=status)


@method_decorator(csrf_exempt, name='dispatch')
class ApiView(View):
    """
    JSON endpoint base.

    Attributes:
        public: Skip authentication
        roles: {'post': [Role, ...]}; methods not listed are open to any
               authenticated user
        store: TrackingStore to use (None = configured store). Can be given
               per URL with as_view(store=...)
    """

    public = False
    roles: dict = {}
    store = None

    def dispatch(self, request, *args, **kwargs):
        try:
            if not self.public:
                request.user = self.authenticate(request)
                allowed = self.roles.get(request.method.lower())
                if allowed is not None:
                    require_role(request.user, allowed)
            return super().dispatch(request, *args, **kwargs)
        except TrackingError as e:
            if e.code in ('NOT_AUTHENTICATED', 'INVALID_TOKEN', 'TOKEN_EXPIRED', 'PERMISSION_DENIED'):
                logger.warning("api.denied", extra={"path": request.path, "code": e.code})
            return error_response(e)
        except Exception:
            logger.exception("api.unhandled", extra={"path": request.path, "method": request.method})
            return JsonResponse({'message': 'Erro interno do servidor'}, status=500)

    def http_method_not_allowed(self, request, *args, **kwargs):
        response = error_response(TrackingError('METHOD_NOT_ALLOWED', method=request.method))
        response['Allow'] = ', '.join(self._allowed_methods())
        return response

    def authenticate(self, request):
        header = request.headers.get('Authorization', '')
        scheme, _, token = header.partition(' ')
        if scheme.lower() != 'bearer' or not token.strip():
            raise TrackingError('NOT_AUTHENTICATED')
        return resolve_token(token.strip())

    @property
    def tracking(self):
        return get_tracking(self.store)

    def payload(self) -> dict:
        """Request body as a snake_case dict."""
        if not self.request.body:
            return {}
        try:
            data = json.loads(self.request.body)
        except (ValueError, UnicodeDecodeError):
            raise TrackingError('INVALID_JSON')
        if not isinstance(data, dict):
            raise TrackingError('INVALID_JSON')
        return snake_keys(data)

    def bind(self, form_class, data) -> dict:
        """
        Validated form data.

        Raises:
            TrackingError('VALIDATION_ERROR'): With the form errors in data['errors']
        """
        form = form_class(data)
        if not form.is_valid():
            errors = {field: [str(m) for m in messages] for field, messages in form.errors.items()}
            raise TrackingError('VALIDATION_ERROR', errors=errors)
        return form.cleaned_data

    def json(self, data, status=200) -> JsonResponse:
        return JsonResponse(data, status=status, safe=not isinstance(data, list))


@method_decorator(csrf_exempt, name='dispatch')
class NotFoundView(ApiView):
    """JSON 404 for any /api/ path no other route matches."""

    public = True

    def dispatch(self, request, *args, **kwargs):
        return error_response(TrackingError('NOT_FOUND', path=request.path))
