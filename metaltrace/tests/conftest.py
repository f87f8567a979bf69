"""
Pytest fixtures for Metaltrace tests.
"""

import json

import pytest
from django.contrib.auth import get_user_model

from metaltrace.adapters import reset_tracking_store
from metaltrace.adapters.memory import InMemoryTrackingStore
from metaltrace.auth import issue_token
from metaltrace.models import Operator, Role
from metaltrace.service import Tracking, get_tracking


User = get_user_model()


@pytest.fixture(autouse=True)
def _fresh_store():
    """Each test loads the configured store again."""
    reset_tracking_store()
    yield
    reset_tracking_store()


@pytest.fixture
def make_operator(db):
    """Create a user with an Operator row for the given role."""
    def _make(role, email=None, password='pass1234'):
        email = email or f'{role}@test.com'
        user = User.objects.create_user(username=email, email=email, password=password)
        Operator.objects.create(user=user, role=role)
        return user
    return _make


@pytest.fixture
def administrator(make_operator):
    return make_operator(Role.ADMINISTRATOR)


@pytest.fixture
def factory_operator(make_operator):
    return make_operator(Role.FACTORY_OPERATOR)


@pytest.fixture
def site_master(make_operator):
    return make_operator(Role.SITE_MASTER)


@pytest.fixture
def customer(make_operator):
    return make_operator(Role.CUSTOMER_OPERATOR)


@pytest.fixture
def tracking(db):
    """Tracking over the Django ORM store."""
    return get_tracking()


@pytest.fixture
def memory_tracking():
    """Tracking over a fresh in-memory store."""
    return Tracking(InMemoryTrackingStore())


@pytest.fixture
def factory(tracking):
    return tracking.control_points.create('Fábrica Central', 'factory', address='Rua 1')


@pytest.fixture
def storage(tracking):
    return tracking.control_points.create('Depósito Norte', 'storage')


@pytest.fixture
def site(tracking):
    return tracking.control_points.create('Canteiro Centro', 'usage_site')


@pytest.fixture
def element(tracking):
    """A freshly marked beam."""
    return tracking.elements.create('BM-2024-000001', 'beam', drawing='D-100', gost='GOST 8239-89')


class ApiClient:
    """Django test client sending JSON with a bearer token."""

    def __init__(self, client, user=None):
        self.client = client
        self.headers = {}
        if user is not None:
            self.headers['HTTP_AUTHORIZATION'] = f'Bearer {issue_token(user)}'

    def get(self, path, params=None):
        return self.client.get(path, params or {}, **self.headers)

    def post(self, path, data=None):
        return self.client.post(
            path, data=json.dumps(data or {}), content_type='application/json', **self.headers
        )

    def patch(self, path, data=None):
        return self.client.patch(
            path, data=json.dumps(data or {}), content_type='application/json', **self.headers
        )


@pytest.fixture
def api(client):
    """api(user) → ApiClient authenticated as user (anonymous if None)."""
    def _api(user=None):
        return ApiClient(client, user)
    return _api
