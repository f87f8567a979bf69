"""
Tests for the JSON API.
"""

from decimal import Decimal

import pytest
from django.test import override_settings

from metaltrace.auth import issue_token
from metaltrace.models import Element, Movement


pytestmark = pytest.mark.django_db


class TestAuthentication:

    def test_missing_token(self, api):
        """Requests without a bearer token get 401."""
        response = api().get('/api/elements')
        assert response.status_code == 401
        assert response.json()['code'] == 'NOT_AUTHENTICATED'

    def test_tampered_token(self, client):
        """A token with a bad signature gets 401 INVALID_TOKEN."""
        response = client.get('/api/elements', HTTP_AUTHORIZATION='Bearer nope:nope')
        assert response.status_code == 401
        assert response.json()['code'] == 'INVALID_TOKEN'

    @override_settings(METALTRACE={'TOKEN_MAX_AGE': -1})
    def test_expired_token(self, api, site_master):
        """A token older than TOKEN_MAX_AGE gets 401 TOKEN_EXPIRED."""
        response = api(site_master).get('/api/elements')
        assert response.status_code == 401
        assert response.json()['code'] == 'TOKEN_EXPIRED'

    def test_inactive_user(self, api, site_master):
        """A deactivated account can no longer use its token."""
        site_master.is_active = False
        site_master.save()

        assert api(site_master).get('/api/elements').status_code == 401


class TestRoles:

    def test_customer_cannot_mark_elements(self, api, customer):
        """Customers cannot create elements."""
        response = api(customer).post('/api/elements', {'code': 'X-1', 'type': 'beam'})

        assert response.status_code == 403
        assert response.json()['code'] == 'PERMISSION_DENIED'
        assert not Element.objects.exists()

    def test_customer_can_read(self, api, customer, element):
        """Any authenticated role may list elements."""
        response = api(customer).get('/api/elements')
        assert response.status_code == 200
        assert [e['code'] for e in response.json()] == [element.code]

    def test_customer_cannot_move(self, api, customer, element, storage):
        """Customers cannot record movements."""
        response = api(customer).post('/api/movements', {
            'elementId': element.id, 'toLocationId': storage.id, 'operation': 'reception',
        })
        assert response.status_code == 403
        assert not Movement.objects.exists()

    def test_only_administrator_creates_control_points(self, api, factory_operator, administrator):
        """Control points are created by administrators only."""
        payload = {'name': 'Canteiro Sul', 'type': 'usage_site'}

        assert api(factory_operator).post('/api/control-points', payload).status_code == 403
        assert api(administrator).post('/api/control-points', payload).status_code == 201


class TestElementsEndpoint:

    def test_create(self, api, factory_operator):
        """New elements start in production, whatever status is sent."""
        response = api(factory_operator).post('/api/elements', {
            'code': 'BM-2024-000777',
            'type': 'beam',
            'drawing': 'KM-12',
            'weight': '350.25',
            'status': 'in_operation',
        })

        assert response.status_code == 201
        body = response.json()
        assert body['code'] == 'BM-2024-000777'
        assert body['status'] == 'production'
        assert body['currentLocationId'] is None
        assert body['weight'] == '350.25'

    def test_create_duplicate(self, api, factory_operator, element):
        """A repeated code is a 400 DUPLICATE_CODE and adds no row."""
        response = api(factory_operator).post('/api/elements', {'code': element.code, 'type': 'beam'})

        assert response.status_code == 400
        body = response.json()
        assert body['code'] == 'DUPLICATE_CODE'
        assert body['data']['element_code'] == element.code
        assert Element.objects.filter(code=element.code).count() == 1

    def test_create_invalid_payload(self, api, factory_operator):
        """Form errors come back per field."""
        response = api(factory_operator).post('/api/elements', {'type': 'plate'})

        assert response.status_code == 400
        body = response.json()
        assert body['code'] == 'VALIDATION_ERROR'
        assert set(body['data']['errors']) == {'code', 'type'}

    def test_invalid_json(self, client, factory_operator):
        """A body that is not JSON is a 400 INVALID_JSON."""
        response = client.post(
            '/api/elements', data='{not json', content_type='application/json',
            HTTP_AUTHORIZATION=f'Bearer {issue_token(factory_operator)}',
        )
        assert response.status_code == 400
        assert response.json()['code'] == 'INVALID_JSON'

    def test_get_by_id_and_code(self, api, customer, element):
        """Elements are found by id and by scanned code."""
        by_id = api(customer).get(f'/api/elements/{element.id}')
        by_code = api(customer).get(f'/api/elements/code/{element.code}')

        assert by_id.status_code == 200
        assert by_code.json()['id'] == element.id

    def test_get_unknown(self, api, customer):
        """Unknown id is a 404."""
        response = api(customer).get('/api/elements/999')
        assert response.status_code == 404
        assert response.json()['code'] == 'ELEMENT_NOT_FOUND'

    def test_get_by_unknown_code(self, api, customer, element):
        """Scanning a code nobody marked is a 404, not a server error."""
        response = api(customer).get('/api/elements/code/BM-NAO-MARCADO')

        assert response.status_code == 404
        body = response.json()
        assert body['code'] == 'ELEMENT_NOT_FOUND'
        assert body['data']['element_code'] == 'BM-NAO-MARCADO'

    def test_list_filters(self, api, tracking, customer, site, site_master):
        """Query filters are combined."""
        beam = tracking.elements.create('A-1', 'beam')
        tracking.elements.create('A-2', 'beam')
        tracking.movements.record(beam.id, site.id, 'reception', operator_id=site_master.pk)

        response = api(customer).get('/api/elements', {'status': 'in_operation', 'locationId': site.id})

        assert [e['id'] for e in response.json()] == [beam.id]

    def test_list_invalid_filter(self, api, customer):
        """An unknown status filter is a 400."""
        response = api(customer).get('/api/elements', {'status': 'lost'})
        assert response.status_code == 400


class TestStatusOverrideEndpoint:

    def test_patch_status(self, api, site_master, element):
        """PATCH sets in_transit directly, without a movement."""
        response = api(site_master).patch(f'/api/elements/{element.id}/status', {'status': 'in_transit'})

        assert response.status_code == 200
        assert response.json()['status'] == 'in_transit'
        assert Element.objects.get(pk=element.id).status == 'in_transit'
        assert not Movement.objects.exists()

    def test_patch_invalid_status(self, api, site_master, element):
        """An unknown status leaves the element unchanged."""
        response = api(site_master).patch(f'/api/elements/{element.id}/status', {'status': 'lost'})

        assert response.status_code == 400
        assert Element.objects.get(pk=element.id).status == 'production'

    def test_patch_unknown_element(self, api, site_master):
        """Overriding an unknown element is a 404."""
        response = api(site_master).patch('/api/elements/999/status', {'status': 'in_transit'})
        assert response.status_code == 404


class TestMovementsEndpoint:

    def test_record_uses_authenticated_operator(self, api, site_master, customer, element, site):
        """The operator is the caller, not the operatorId in the body."""
        response = api(site_master).post('/api/movements', {
            'elementId': element.id,
            'toLocationId': site.id,
            'operation': 'reception',
            'operatorId': customer.pk,
            'comments': 'Descarregado',
        })

        assert response.status_code == 201
        body = response.json()
        assert body['operatorId'] == site_master.pk
        assert body['comments'] == 'Descarregado'

    def test_device_coordinates_rounded(self, api, site_master, element, site):
        """Raw GPS floats are accepted and stored with 8 decimal places."""
        response = api(site_master).post('/api/movements', {
            'elementId': element.id,
            'toLocationId': site.id,
            'operation': 'reception',
            'latitude': 55.755826123456,
            'longitude': 37.617299999999,
        })

        assert response.status_code == 201
        body = response.json()
        assert body['latitude'] == '55.75582612'
        assert body['longitude'] == '37.61730000'
        movement = Movement.objects.get(pk=body['id'])
        assert movement.latitude == Decimal('55.75582612')

    def test_latitude_out_of_range(self, api, site_master, element, site):
        """Latitude beyond ±90 is rejected."""
        response = api(site_master).post('/api/movements', {
            'elementId': element.id,
            'toLocationId': site.id,
            'operation': 'reception',
            'latitude': 123.4,
        })

        assert response.status_code == 400
        assert 'latitude' in response.json()['data']['errors']
        assert not Movement.objects.exists()

    def test_unknown_location(self, api, site_master, element):
        """Unknown destination is a 400 and the element stays put."""
        response = api(site_master).post('/api/movements', {
            'elementId': element.id, 'toLocationId': 999, 'operation': 'reception',
        })

        assert response.status_code == 400
        assert response.json()['code'] == 'UNKNOWN_LOCATION'
        assert Element.objects.get(pk=element.id).status == 'production'

    def test_unknown_element(self, api, site_master, site):
        """Unknown element is a 400 UNKNOWN_ELEMENT."""
        response = api(site_master).post('/api/movements', {
            'elementId': 999, 'toLocationId': site.id, 'operation': 'reception',
        })
        assert response.status_code == 400
        assert response.json()['code'] == 'UNKNOWN_ELEMENT'

    def test_history_unknown_element(self, api, customer):
        """History of an unknown element is a 404."""
        assert api(customer).get('/api/movements/element/999').status_code == 404


class TestElementJourney:
    """Marking at the factory, through the warehouse, to the site."""

    def test_factory_to_site(self, api, administrator, factory_operator, site_master, customer):
        """Status follows each destination and history lists the route backwards."""
        points = {}
        for name, kind in [('Fábrica', 'factory'), ('Depósito', 'storage'), ('Canteiro', 'usage_site')]:
            response = api(administrator).post('/api/control-points', {'name': name, 'type': kind})
            points[kind] = response.json()['id']

        element_id = api(factory_operator).post(
            '/api/elements', {'code': 'TR-2024-000010', 'type': 'truss'}
        ).json()['id']
        never_moved = api(factory_operator).post(
            '/api/elements', {'code': 'TR-2024-000011', 'type': 'truss'}
        ).json()['id']

        route = [
            (factory_operator, 'factory', 'production'),
            (site_master, 'storage', 'in_storage'),
            (site_master, 'usage_site', 'in_operation'),
        ]
        previous = None
        for user, kind, expected in route:
            response = api(user).post('/api/movements', {
                'elementId': element_id,
                'toLocationId': points[kind],
                'fromLocationId': previous,
                'operation': 'reception',
            })
            assert response.status_code == 201
            element = api(customer).get(f'/api/elements/{element_id}').json()
            assert element['status'] == expected
            assert element['currentLocationId'] == points[kind]
            previous = points[kind]

        history = api(customer).get(f'/api/movements/element/{element_id}').json()
        assert [m['toLocationId'] for m in history] == [
            points['usage_site'], points['storage'], points['factory'],
        ]

        in_operation = api(customer).get('/api/elements', {'status': 'in_operation'}).json()
        assert [e['id'] for e in in_operation] == [element_id]
        assert never_moved not in [e['id'] for e in in_operation]


class TestControlPointsEndpoint:

    def test_list(self, api, customer, factory, storage):
        """Control points are listed by name."""
        response = api(customer).get('/api/control-points')
        assert [p['name'] for p in response.json()] == ['Depósito Norte', 'Fábrica Central']

    def test_detail(self, api, customer, factory):
        """A control point is fetched by id."""
        body = api(customer).get(f'/api/control-points/{factory.id}').json()
        assert body['type'] == 'factory'
        assert body['address'] == 'Rua 1'

    def test_detail_unknown(self, api, customer):
        """Unknown control point is a 404."""
        assert api(customer).get('/api/control-points/999').status_code == 404

    def test_invalid_type(self, api, administrator):
        """An unknown control point type is a 400 INVALID_TYPE."""
        response = api(administrator).post('/api/control-points', {'name': 'Porto', 'type': 'harbour'})
        assert response.status_code == 400
        assert response.json()['code'] == 'INVALID_TYPE'


class TestDashboardEndpoints:

    def test_stats(self, api, tracking, customer, storage, site_master):
        """Stats count elements per status."""
        element = tracking.elements.create('A-1', 'beam')
        tracking.elements.create('A-2', 'beam')
        tracking.movements.record(element.id, storage.id, 'reception', operator_id=site_master.pk)

        body = api(customer).get('/api/dashboard/stats').json()

        assert body['totalElements'] == 2
        assert body['inStorage'] == 1
        assert body['byStatus']['production'] == 1

    def test_recent_movements(self, api, tracking, customer, element, factory, storage, site_master):
        """limit caps the feed, newest first."""
        tracking.movements.record(element.id, factory.id, 'reception', operator_id=site_master.pk)
        tracking.movements.record(element.id, storage.id, 'shipping', operator_id=site_master.pk)

        body = api(customer).get('/api/dashboard/recent-movements', {'limit': 1}).json()

        assert len(body) == 1
        assert body[0]['toLocationId'] == storage.id

    def test_recent_movements_bad_limit(self, api, customer):
        """A non-numeric limit is a 400."""
        response = api(customer).get('/api/dashboard/recent-movements', {'limit': 'many'})
        assert response.status_code == 400


class TestAccountEndpoints:

    def test_login(self, api, make_operator):
        """Login returns the user with role and a token."""
        make_operator('site_master', email='mestre@test.com', password='s3nha-forte')

        response = api().post('/api/auth/login', {'email': 'mestre@test.com', 'password': 's3nha-forte'})

        assert response.status_code == 200
        body = response.json()
        assert body['user']['role'] == 'site_master'
        assert body['token']

    def test_login_wrong_password(self, api, make_operator):
        """Wrong password is a 400 INVALID_CREDENTIALS."""
        make_operator('site_master', email='mestre@test.com', password='s3nha-forte')

        response = api().post('/api/auth/login', {'email': 'mestre@test.com', 'password': 'errada'})

        assert response.status_code == 400
        assert response.json()['code'] == 'INVALID_CREDENTIALS'

    def test_register_then_me(self, client, api):
        """A new account is a customer and its token works at once."""
        response = api().post('/api/auth/register', {
            'email': 'novo@test.com', 'password': 'segredo1', 'firstName': 'Ana',
        })

        assert response.status_code == 201
        token = response.json()['token']
        me = client.get('/api/auth/user', HTTP_AUTHORIZATION=f'Bearer {token}').json()
        assert me['email'] == 'novo@test.com'
        assert me['firstName'] == 'Ana'
        assert me['role'] == 'customer_operator'

    def test_register_duplicate_email(self, api, customer):
        """An e-mail already in use is rejected."""
        response = api().post('/api/auth/register', {'email': customer.email, 'password': 'segredo1'})
        assert response.status_code == 400
        assert response.json()['code'] == 'VALIDATION_ERROR'


class TestFallbackResponses:
    """Unrouted paths and unsupported methods still answer in JSON."""

    def test_unknown_api_path(self, api):
        """Any unmatched /api/ path is a JSON 404."""
        response = api().get('/api/nothing-here')

        assert response.status_code == 404
        assert response['Content-Type'] == 'application/json'
        assert response.json()['code'] == 'NOT_FOUND'

    def test_non_integer_id(self, api, customer):
        """An id that is not a number does not reach Django's HTML 404."""
        response = api(customer).get('/api/elements/abc')

        assert response.status_code == 404
        assert response['Content-Type'] == 'application/json'
        assert response.json()['message']

    def test_unknown_api_path_post(self, api):
        """POST to an unmatched path is also a JSON 404."""
        response = api().post('/api/nothing-here', {})
        assert response.status_code == 404

    def test_method_not_allowed(self, api, customer, element):
        """A method the endpoint does not serve is a JSON 405 with Allow."""
        response = api(customer).post(f'/api/elements/code/{element.code}', {})

        assert response.status_code == 405
        assert response['Content-Type'] == 'application/json'
        assert response.json()['code'] == 'METHOD_NOT_ALLOWED'
        assert 'GET' in response['Allow']
