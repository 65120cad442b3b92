from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from core.constants import UserRole, PropertyStatus
from core.dto import RoomTypeDTO
from occupancy.locks import KeyedLockRegistry
from occupancy.projection import OccupancyProjection
from occupancy.services import AllocationEngine
from properties.models import Property
from rooms.services import InventoryService
from tenants.models import Tenant
from users.models import User


def make_user(username, role=UserRole.OWNER, **extra):
    return User.objects.create_user(username=username, password='s3cret-pass', role=role, **extra)


def make_property(owner, title="Sunrise PG", status=PropertyStatus.APPROVED, **extra):
    fields = dict(
        owner=owner,
        title=title,
        address_line1="12 MG Road",
        city="Bengaluru",
        state="Karnataka",
        zip_code="560001",
        status=status,
    )
    fields.update(extra)
    return Property.objects.create(**fields)


@pytest.fixture
def owner(db):
    return make_user("owner")


@pytest.fixture
def other_owner(db):
    return make_user("other-owner")


@pytest.fixture
def admin_user(db):
    return make_user("admin", role=UserRole.ADMIN)


@pytest.fixture
def pg(owner):
    return make_property(owner)


@pytest.fixture
def locks():
    return KeyedLockRegistry()


@pytest.fixture
def inventory(locks):
    return InventoryService(locks=locks)


@pytest.fixture
def engine(locks):
    return AllocationEngine(locks=locks)


@pytest.fixture
def projection():
    return OccupancyProjection()


@pytest.fixture
def define(inventory, pg):
    """define(kind, count=1, **dto_fields) -> list of rooms of the new room type, by number"""
    def _define(sharing_kind, room_count=1, prop=None, **fields):
        fields.setdefault('base_price', Decimal('8000'))
        room_type = inventory.define_room_type(
            (prop or pg).id,
            RoomTypeDTO(sharing_kind=sharing_kind, room_count=room_count, **fields),
        )
        return list(room_type.rooms.order_by('room_number'))
    return _define


@pytest.fixture
def make_tenant(owner):
    def _make_tenant(name="Ravi", gender='', tenant_owner=None, **extra):
        return Tenant.objects.create(owner=tenant_owner or owner, name=name, gender=gender, **extra)
    return _make_tenant


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def owner_client(api_client, owner):
    api_client.force_authenticate(user=owner)
    return api_client
