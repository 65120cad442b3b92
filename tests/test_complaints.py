"""Tests for tenant complaints."""

import pytest
from rest_framework.test import APIClient

from complaints.models import Complaint
from complaints.services import ComplaintService
from core.constants import UserRole, ComplaintStatus, ComplaintPriority
from core.exceptions import ConflictError, PermissionDeniedError, PreconditionError, ValidationError
from tests.conftest import make_user

pytestmark = pytest.mark.django_db


@pytest.fixture
def resident(db):
    return make_user("resident", role=UserRole.TENANT)


@pytest.fixture
def housed(resident, define, engine, make_tenant):
    """Tenant linked to the resident login, living in a double room"""
    room = define("double")[0]
    tenant = make_tenant("Meera", user=resident)
    engine.assign(tenant.id, room.id)
    return tenant


def submit(user, **fields):
    fields.setdefault('subject', "Leaking tap")
    fields.setdefault('description', "Bathroom tap drips all night")
    fields.setdefault('category', "MAINTENANCE")
    return ComplaintService().submit_complaint(user, **fields)


class TestSubmitComplaint:
    def test_pinned_to_current_room(self, resident, housed):
        complaint = submit(resident)

        room = housed.current_room
        assert (complaint.tenant, complaint.room, complaint.property) == (housed, room, room.property)
        assert complaint.status == ComplaintStatus.PENDING
        assert complaint.priority == ComplaintPriority.LOW

    def test_owner_files_for_own_tenant(self, owner, housed):
        complaint = submit(owner, tenant_id=housed.id, priority="URGENT")
        assert complaint.priority == "URGENT"

    def test_owner_needs_tenant_id(self, owner, housed):
        with pytest.raises(ValidationError) as exc:
            submit(owner)
        assert exc.value.code == "TENANT_REQUIRED"

    def test_other_owner_cannot_file(self, other_owner, housed):
        with pytest.raises(PermissionDeniedError):
            submit(other_owner, tenant_id=housed.id)

    def test_unassigned_tenant(self, resident, make_tenant):
        make_tenant("Meera", user=resident)
        with pytest.raises(PreconditionError) as exc:
            submit(resident)
        assert exc.value.code == "NO_ACTIVE_ASSIGNMENT"

    def test_account_without_tenant_profile(self, resident):
        with pytest.raises(PermissionDeniedError):
            submit(resident)

    def test_unknown_category(self, resident, housed):
        with pytest.raises(ValidationError) as exc:
            submit(resident, category="PARKING")
        assert exc.value.code == "INVALID_CATEGORY"
        assert not Complaint.objects.exists()

    def test_stays_with_property_after_move_out(self, resident, housed, engine):
        complaint = submit(resident)
        engine.remove(housed.id)

        complaint.refresh_from_db()
        assert complaint.room is not None


class TestUpdateStatus:
    def test_resolve_stamps_date(self, resident, housed):
        complaint = submit(resident)

        updated = ComplaintService().update_status(complaint.id, ComplaintStatus.RESOLVED, notes="Washer replaced")

        assert updated.resolved_date is not None
        assert updated.notes == "Washer replaced"

    def test_reopen_clears_date(self, resident, housed):
        complaint = submit(resident)
        service = ComplaintService()
        service.update_status(complaint.id, ComplaintStatus.RESOLVED)

        reopened = service.update_status(complaint.id, ComplaintStatus.IN_PROGRESS, assigned_to="Plumber")

        reopened.refresh_from_db()
        assert reopened.resolved_date is None
        assert reopened.assigned_to == "Plumber"

    def test_closed_is_final(self, resident, housed):
        complaint = submit(resident)
        service = ComplaintService()
        service.update_status(complaint.id, ComplaintStatus.CLOSED)

        with pytest.raises(ConflictError) as exc:
            service.update_status(complaint.id, ComplaintStatus.PENDING)
        assert exc.value.code == "COMPLAINT_CLOSED"


class TestComplaintApi:
    def test_tenant_raises_and_lists_own(self, resident, housed):
        client = APIClient()
        client.force_authenticate(user=resident)

        response = client.post('/api/complaints/', {
            'subject': 'No hot water', 'description': 'Geyser broken', 'category': 'UTILITY',
        }, format='json')

        assert response.status_code == 201
        assert response.data['room_number'] == housed.current_room.room_number
        listed = client.get('/api/complaints/')
        assert [item['id'] for item in listed.data['results']] == [response.data['id']]

    def test_tenant_cannot_update_status(self, resident, housed):
        complaint = submit(resident)
        client = APIClient()
        client.force_authenticate(user=resident)

        response = client.post(f'/api/complaints/{complaint.id}/status/', {'status': 'RESOLVED'})

        assert response.status_code == 403

    def test_owner_updates_status(self, owner_client, resident, housed):
        complaint = submit(resident)

        response = owner_client.post(f'/api/complaints/{complaint.id}/status/', {'status': 'IN_PROGRESS'})

        assert response.status_code == 200
        assert response.data['status'] == 'IN_PROGRESS'

    def test_open_and_scoping(self, owner_client, other_owner, resident, housed):
        first = submit(resident)
        second = submit(resident, subject="Noisy neighbours", category="NOISE")
        ComplaintService().update_status(first.id, ComplaintStatus.RESOLVED)

        response = owner_client.get('/api/complaints/open/')
        assert [item['id'] for item in response.data] == [second.id]

        outsider = APIClient()
        outsider.force_authenticate(user=other_owner)
        assert outsider.get('/api/complaints/').data['count'] == 0
        assert outsider.post(f'/api/complaints/{first.id}/status/', {'status': 'CLOSED'}).status_code == 404

    def test_bad_status_value(self, owner_client, resident, housed):
        complaint = submit(resident)
        response = owner_client.post(f'/api/complaints/{complaint.id}/status/', {'status': 'DONE'})
        assert response.status_code == 400
