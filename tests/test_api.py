"""End-to-end tests through the REST API."""

import pytest
from rest_framework.test import APIClient

from audit.models import AuditLog
from core.constants import UserRole, PropertyStatus
from occupancy.models import TenantAssignment
from tests.conftest import make_property, make_user

pytestmark = pytest.mark.django_db


def client_for(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


class TestProperties:
    def test_create_waits_for_approval(self, owner_client):
        response = owner_client.post('/api/properties/', {
            'title': 'Lakeview PG',
            'address_line1': '4 Lake Road',
            'city': 'Pune',
            'state': 'Maharashtra',
            'zip_code': '411001',
        }, format='json')

        assert response.status_code == 201
        assert response.data['status'] == PropertyStatus.PENDING
        assert response.data['room_types'] == []

    def test_list_is_paginated_and_scoped(self, owner_client, pg, other_owner):
        make_property(other_owner, title="Someone Else's PG")

        response = owner_client.get('/api/properties/')

        assert response.status_code == 200
        assert response.data['count'] == 1
        assert [item['id'] for item in response.data['results']] == [pg.id]

    def test_other_owner_property_is_hidden(self, api_client, pg, other_owner):
        api_client.force_authenticate(user=other_owner)
        assert api_client.get(f'/api/properties/{pg.id}/').status_code == 404

    def test_define_room_type(self, owner_client, pg):
        response = owner_client.post(f'/api/properties/{pg.id}/room-types/', {
            'sharing_kind': 'triple',
            'base_price': '6500.00',
            'room_count': 2,
        }, format='json')

        assert response.status_code == 201
        assert response.data['beds_per_room'] == 3
        assert response.data['room_count'] == 2
        assert AuditLog.objects.filter(action=AuditLog.ACTION_CREATE, resource_id=response.data['id']).exists()

    def test_define_room_type_bad_kind(self, owner_client, pg):
        response = owner_client.post(f'/api/properties/{pg.id}/room-types/', {
            'sharing_kind': 'dorm',
            'base_price': '100',
            'room_count': 1,
        }, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_SHARING_KIND'

    def test_occupancy_and_breakdown(self, owner_client, pg, define, engine, make_tenant):
        room = define("double")[0]
        engine.assign(make_tenant().id, room.id)

        occupancy = owner_client.get(f'/api/properties/{pg.id}/occupancy/')
        breakdown = owner_client.get(f'/api/properties/{pg.id}/breakdown/')

        assert occupancy.data == {'capacity': 2, 'occupied': 1, 'available': 1, 'status': 'partial'}
        assert breakdown.data['room_types'][0]['rooms'][0]['room_number'] == room.room_number

    def test_only_admins_approve(self, owner_client, admin_user, owner):
        prop = make_property(owner, title="New PG", status=PropertyStatus.PENDING)

        assert owner_client.post(f'/api/properties/{prop.id}/approve/').status_code == 403

        response = client_for(admin_user).post(f'/api/properties/{prop.id}/approve/')
        assert response.status_code == 200
        assert response.data['status'] == PropertyStatus.APPROVED


class TestRooms:
    def test_rename_conflict(self, owner_client, define):
        first, second = define("single", room_count=2)

        response = owner_client.post(f'/api/rooms/{second.id}/rename/', {'room_number': first.room_number})

        assert response.status_code == 409
        assert response.data['code'] == 'ROOM_NUMBER_TAKEN'

    def test_delete_occupied_room(self, owner_client, define, engine, make_tenant):
        room = define("single")[0]
        engine.assign(make_tenant().id, room.id)

        response = owner_client.delete(f'/api/rooms/{room.id}/')

        assert response.status_code == 409
        assert response.data['code'] == 'ROOM_OCCUPIED'

    def test_delete_empty_room_is_audited(self, owner_client, define):
        room = define("single")[0]

        assert owner_client.delete(f'/api/rooms/{room.id}/').status_code == 204
        assert AuditLog.objects.filter(action=AuditLog.ACTION_DELETE, resource_id=room.id).exists()

    def test_room_occupancy(self, owner_client, define):
        room = define("quad")[0]
        response = owner_client.get(f'/api/rooms/{room.id}/occupancy/')
        assert response.data == {'capacity': 4, 'occupied': 0, 'available': 4, 'status': 'empty'}

    def test_available_rooms(self, owner_client, define, engine, make_tenant):
        full, free = define("single", room_count=2)
        engine.assign(make_tenant().id, full.id)

        response = owner_client.get('/api/rooms/available/')

        assert [room['id'] for room in response.data] == [free.id]
        assert response.data[0]['available'] == 1

    def test_other_owner_room_hidden(self, api_client, define, other_owner):
        room = define("single")[0]
        api_client.force_authenticate(user=other_owner)
        assert api_client.get(f'/api/rooms/{room.id}/').status_code == 404


class TestAssignments:
    def test_assign(self, owner_client, define, make_tenant):
        room = define("double")[0]
        tenant = make_tenant()

        response = owner_client.post('/api/assignments/assign/', {
            'tenant_id': tenant.id, 'room_id': room.id, 'bed_slot': 1,
        }, format='json')

        assert response.status_code == 201
        assert response.data['bed_slot'] == 1
        assert response.data['bed_label'] == f"{room.room_number}-B2"
        assert response.data['status'] == 'active'

    def test_room_full(self, owner_client, define, engine, make_tenant):
        room = define("single")[0]
        engine.assign(make_tenant("A").id, room.id)

        response = owner_client.post('/api/assignments/assign/', {
            'tenant_id': make_tenant("B").id, 'room_id': room.id,
        }, format='json')

        assert response.status_code == 409
        assert response.data['code'] == 'ROOM_FULL'
        assert response.data['details']['room_id'] == room.id

    def test_gender_mismatch(self, owner_client, define, make_tenant):
        room = define("double", gender_restriction="female")[0]

        response = owner_client.post('/api/assignments/assign/', {
            'tenant_id': make_tenant(gender="male").id, 'room_id': room.id,
        }, format='json')

        assert response.status_code == 409
        assert response.data['code'] == 'GENDER_MISMATCH'

    def test_invalid_bed_slot(self, owner_client, define, make_tenant):
        room = define("double")[0]

        response = owner_client.post('/api/assignments/assign/', {
            'tenant_id': make_tenant().id, 'room_id': room.id, 'bed_slot': 5,
        }, format='json')

        assert response.status_code == 400
        assert response.data['code'] == 'INVALID_BED_SLOT'

    def test_unknown_tenant(self, owner_client, define):
        room = define("double")[0]
        response = owner_client.post('/api/assignments/assign/', {'tenant_id': 9999, 'room_id': room.id})
        assert response.status_code == 404

    def test_missing_fields(self, owner_client):
        assert owner_client.post('/api/assignments/assign/', {}).status_code == 400

    def test_cannot_use_another_owners_room(self, api_client, define, other_owner, make_tenant):
        room = define("double")[0]
        outsider_tenant = make_tenant(tenant_owner=other_owner)
        api_client.force_authenticate(user=other_owner)

        response = api_client.post('/api/assignments/assign/', {
            'tenant_id': outsider_tenant.id, 'room_id': room.id,
        }, format='json')

        assert response.status_code == 403
        assert not TenantAssignment.objects.exists()

    def test_transfer(self, owner_client, define, engine, make_tenant):
        old_room, new_room = define("double", room_count=2)
        tenant = make_tenant()
        engine.assign(tenant.id, old_room.id)

        response = owner_client.post('/api/assignments/transfer/', {
            'tenant_id': tenant.id, 'room_id': new_room.id,
        }, format='json')

        assert response.status_code == 200
        assert response.data['room'] == new_room.id

    def test_remove_twice(self, owner_client, define, engine, make_tenant):
        room = define("double")[0]
        tenant = make_tenant()
        engine.assign(tenant.id, room.id)

        first = owner_client.post('/api/assignments/remove/', {'tenant_id': tenant.id})
        second = owner_client.post('/api/assignments/remove/', {'tenant_id': tenant.id})

        assert first.status_code == 200
        assert first.data['status'] == 'ended'
        assert second.status_code == 404
        assert second.data['code'] == 'NO_ACTIVE_ASSIGNMENT'

    def test_notice(self, owner_client, define, engine, make_tenant):
        room = define("double")[0]
        tenant = make_tenant()
        engine.assign(tenant.id, room.id)

        response = owner_client.post('/api/assignments/notice/', {'tenant_id': tenant.id, 'reason': 'Job change'})

        assert response.status_code == 200
        assert response.data['notice_status'] == 'IN_NOTICE_PERIOD'

    def test_tenant_sees_only_own_assignments(self, owner, define, engine, make_tenant):
        room = define("double")[0]
        resident = make_user("resident", role=UserRole.TENANT)
        mine = make_tenant("Mine", user=resident)
        engine.assign(mine.id, room.id)
        engine.assign(make_tenant("Roommate").id, room.id)

        response = client_for(resident).get('/api/assignments/')

        assert response.data['count'] == 1
        assert response.data['results'][0]['tenant'] == mine.id

    def test_tenant_cannot_assign(self, define, make_tenant):
        room = define("double")[0]
        resident = make_user("resident", role=UserRole.TENANT)

        response = client_for(resident).post('/api/assignments/assign/', {
            'tenant_id': make_tenant().id, 'room_id': room.id,
        })

        assert response.status_code == 403

    def test_current_assignment_of_tenant(self, owner_client, make_tenant):
        tenant = make_tenant()
        response = owner_client.get(f'/api/tenants/{tenant.id}/assignment/')
        assert response.status_code == 404
        assert response.data['code'] == 'NO_ACTIVE_ASSIGNMENT'


class TestAuthAndHealth:
    def test_requires_authentication(self, api_client):
        assert api_client.get('/api/properties/').status_code == 401

    def test_jwt_login(self, api_client, owner):
        response = api_client.post('/api/auth/login/', {'username': 'owner', 'password': 's3cret-pass'})

        assert response.status_code == 200
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access']}")
        assert api_client.get('/api/properties/').status_code == 200

    def test_health(self, client):
        response = client.get('/health/')
        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    def test_readiness(self, client):
        assert client.get('/health/ready/').json()['checks'] == {'database': True, 'cache': True}

    def test_request_id_echoed(self, client):
        response = client.get('/health/', HTTP_X_REQUEST_ID='abc-123')
        assert response['X-Request-ID'] == 'abc-123'


class TestAuditApi:
    def test_owner_sees_own_trail(self, owner, owner_client, other_owner, define, engine, make_tenant,
                                  django_capture_on_commit_callbacks):
        room = define("double")[0]
        tenant = make_tenant()
        with django_capture_on_commit_callbacks(execute=True):
            assignment = engine.assign(tenant.id, room.id, performed_by=owner)

        response = owner_client.get('/api/audit/', {'action': AuditLog.ACTION_ASSIGN_TENANT})
        assert response.data['count'] == 1
        entry = response.data['results'][0]
        assert (entry['tenant_id'], entry['room_id']) == (tenant.id, room.id)

        trail = owner_client.get('/api/audit/resource_trail/', {
            'resource_type': AuditLog.RESOURCE_ASSIGNMENT, 'resource_id': assignment.id,
        })
        assert trail.data['count'] == 1

        assert client_for(other_owner).get('/api/audit/').data['count'] == 0
