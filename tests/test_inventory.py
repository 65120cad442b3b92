"""Tests for room/bed provisioning and property lifecycle."""

from decimal import Decimal

import pytest

from core.constants import PropertyStatus, AssignmentStatus, UserRole
from core.dto import RoomTypeDTO, PropertyDTO
from core.exceptions import (
    ValidationError, NotFoundError, ConflictError, PreconditionError, PermissionDeniedError,
)
from occupancy.models import TenantAssignment
from properties.models import RoomType
from properties.services import PropertyService
from rooms.models import Room, Bed
from tests.conftest import make_property, make_user

pytestmark = pytest.mark.django_db


class TestDefineRoomType:
    def test_provisions_rooms_with_beds(self, define):
        rooms = define("double", room_count=3)

        assert [room.room_number for room in rooms] == ["D01", "D02", "D03"]
        for room in rooms:
            assert room.capacity == 2
            assert [bed.slot_index for bed in room.beds.all()] == [0, 1]
        assert rooms[0].room_type.room_count == 3

    def test_bed_labels_follow_room_number(self, define):
        room = define("triple")[0]
        assert [bed.label for bed in room.beds.all()] == ["T01-B1", "T01-B2", "T01-B3"]

    @pytest.mark.parametrize("kind, beds", [("single", 1), ("double", 2), ("triple", 3), ("quad", 4)])
    def test_bed_count_per_sharing_kind(self, define, kind, beds):
        room = define(kind)[0]
        assert room.beds.count() == beds

    def test_auto_numbers_continue_after_existing_rooms(self, define):
        define("double", room_count=2)
        rooms = define("double", room_count=2, base_price=Decimal("9500"), label="AC Double")
        assert [room.room_number for room in rooms] == ["D03", "D04"]

    def test_auto_numbers_after_delete(self, define, inventory):
        first, _ = define("double", room_count=2)
        inventory.delete_room(first.id)

        rooms = define("double")

        assert [room.room_number for room in rooms] == ["D03"]

    def test_auto_numbers_after_rename(self, define, inventory):
        room = define("double")[0]
        inventory.rename_room(room.id, "D02")

        rooms = define("double")

        assert [room.room_number for room in rooms] == ["D03"]

    def test_auto_numbers_ignore_other_prefixes(self, define):
        define("single", room_numbers=["D7X"])
        assert [room.room_number for room in define("double")] == ["D01"]

    def test_explicit_room_numbers(self, define):
        rooms = define("single", room_count=2, room_numbers=["101", " 102 "])
        assert [room.room_number for room in rooms] == ["101", "102"]

    def test_gender_restriction_applies_to_all_rooms(self, define):
        rooms = define("double", room_count=2, gender_restriction="female")
        assert {room.gender_restriction for room in rooms} == {"female"}

    def test_unknown_sharing_kind(self, inventory, pg):
        with pytest.raises(ValidationError) as exc:
            inventory.define_room_type(pg.id, RoomTypeDTO(sharing_kind="penta", base_price=1, room_count=1))
        assert exc.value.code == "INVALID_SHARING_KIND"
        assert not RoomType.objects.exists()

    @pytest.mark.parametrize("room_count", [0, -2])
    def test_non_positive_room_count(self, inventory, pg, room_count):
        with pytest.raises(ValidationError) as exc:
            inventory.define_room_type(pg.id, RoomTypeDTO(sharing_kind="double", base_price=1, room_count=room_count))
        assert exc.value.code == "INVALID_ROOM_COUNT"

    def test_negative_base_price(self, inventory, pg):
        with pytest.raises(ValidationError) as exc:
            inventory.define_room_type(pg.id, RoomTypeDTO(sharing_kind="double", base_price=-1, room_count=1))
        assert exc.value.code == "INVALID_BASE_PRICE"

    def test_collision_with_existing_room_creates_nothing(self, define):
        define("single", room_numbers=["101"])

        with pytest.raises(ValidationError) as exc:
            define("double", room_count=2, room_numbers=["100", "101"])

        assert exc.value.code == "ROOM_NUMBER_COLLISION"
        assert exc.value.details["room_numbers"] == ["101"]
        assert RoomType.objects.count() == 1
        assert Room.objects.count() == 1

    def test_repeated_explicit_numbers(self, define):
        with pytest.raises(ValidationError) as exc:
            define("single", room_count=2, room_numbers=["5", "5"])
        assert exc.value.code == "ROOM_NUMBER_COLLISION"

    def test_room_numbers_must_match_count(self, define):
        with pytest.raises(ValidationError) as exc:
            define("single", room_count=3, room_numbers=["1", "2"])
        assert exc.value.code == "ROOM_NUMBERS_MISMATCH"

    def test_same_number_allowed_in_another_property(self, define, owner):
        other = make_property(owner, title="Second PG")
        define("single", room_numbers=["101"])
        rooms = define("single", room_numbers=["101"], prop=other)
        assert rooms[0].room_number == "101"

    def test_inactive_property(self, inventory, owner):
        prop = make_property(owner, status=PropertyStatus.INACTIVE)
        with pytest.raises(PreconditionError) as exc:
            inventory.define_room_type(prop.id, RoomTypeDTO(sharing_kind="single", base_price=1, room_count=1))
        assert exc.value.code == "PROPERTY_INACTIVE"

    def test_unknown_property(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.define_room_type(9999, RoomTypeDTO(sharing_kind="single", base_price=1, room_count=1))


class TestUpdateRoomType:
    def test_price_change_keeps_existing_rent(self, define, inventory, engine, make_tenant):
        room = define("double", base_price=Decimal("8000"))[0]
        assignment = engine.assign(make_tenant().id, room.id)

        inventory.update_room_type(room.room_type_id, base_price="9000", label="Premium")

        assignment.refresh_from_db()
        room.room_type.refresh_from_db()
        assert assignment.rent == Decimal("8000")
        assert room.room_type.base_price == Decimal("9000")
        assert room.room_type.label == "Premium"

    def test_unknown_room_type(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.update_room_type(9999, label="x")


class TestRenameRoom:
    def test_rename_moves_bed_labels(self, define, inventory):
        room = define("double")[0]
        inventory.rename_room(room.id, "201")
        assert [bed.label for bed in Bed.objects.filter(room=room)] == ["201-B1", "201-B2"]

    def test_number_taken(self, define, inventory):
        first, second = define("single", room_count=2)
        with pytest.raises(ConflictError) as exc:
            inventory.rename_room(second.id, first.room_number)
        assert exc.value.code == "ROOM_NUMBER_TAKEN"

    def test_blank_number(self, define, inventory):
        room = define("single")[0]
        with pytest.raises(ValidationError):
            inventory.rename_room(room.id, "   ")

    def test_rename_to_same_number_is_noop(self, define, inventory):
        room = define("single")[0]
        assert inventory.rename_room(room.id, room.room_number).room_number == room.room_number


class TestSetGenderRestriction:
    def test_conflicting_occupant(self, define, inventory, engine, make_tenant):
        room = define("double")[0]
        tenant = make_tenant(gender="male")
        engine.assign(tenant.id, room.id)

        with pytest.raises(ConflictError) as exc:
            inventory.set_gender_restriction(room.id, "female")

        assert exc.value.code == "GENDER_MISMATCH"
        assert exc.value.details["tenant_ids"] == [tenant.id]
        room.refresh_from_db()
        assert room.gender_restriction == ""

    def test_unknown_gender_occupant_does_not_block(self, define, inventory, engine, make_tenant):
        room = define("double")[0]
        engine.assign(make_tenant(gender="").id, room.id)
        assert inventory.set_gender_restriction(room.id, "female").gender_restriction == "female"

    def test_clear_restriction(self, define, inventory):
        room = define("double", gender_restriction="male")[0]
        assert inventory.set_gender_restriction(room.id, "").gender_restriction == ""

    def test_invalid_value(self, define, inventory):
        room = define("double")[0]
        with pytest.raises(ValidationError):
            inventory.set_gender_restriction(room.id, "other")


class TestDeleteRoom:
    def test_occupied_room(self, define, inventory, engine, make_tenant):
        room = define("double")[0]
        engine.assign(make_tenant().id, room.id)

        with pytest.raises(PreconditionError) as exc:
            inventory.delete_room(room.id)

        assert exc.value.code == "ROOM_OCCUPIED"
        assert Room.objects.filter(id=room.id).exists()

    def test_deletes_beds_and_ended_history(self, define, inventory, engine, make_tenant):
        room = define("double")[0]
        tenant = make_tenant()
        engine.assign(tenant.id, room.id)
        engine.remove(tenant.id)

        inventory.delete_room(room.id)

        assert not Room.objects.filter(id=room.id).exists()
        assert not Bed.objects.filter(room_id=room.id).exists()
        assert not TenantAssignment.objects.filter(tenant=tenant).exists()

    def test_room_count_follows_deletion(self, define, inventory):
        rooms = define("single", room_count=2)
        inventory.delete_room(rooms[0].id)
        assert rooms[1].room_type.room_count == 1

    def test_unknown_room(self, inventory):
        with pytest.raises(NotFoundError):
            inventory.delete_room(9999)


class TestPropertyService:
    def test_new_property_waits_for_approval(self, owner):
        prop = PropertyService().create_property(owner, PropertyDTO(title="  Green PG  ", city="Pune"))
        assert prop.title == "Green PG"
        assert prop.status == PropertyStatus.PENDING

    def test_only_owners_create_properties(self, db):
        tenant_user = make_user("resident", role=UserRole.TENANT)
        with pytest.raises(PermissionDeniedError):
            PropertyService().create_property(tenant_user, PropertyDTO(title="Mine"))

    def test_blank_title(self, owner):
        with pytest.raises(ValidationError):
            PropertyService().create_property(owner, PropertyDTO(title=" "))

    def test_delete_refused_while_tenants_assigned(self, pg, define, engine, make_tenant):
        room = define("single")[0]
        engine.assign(make_tenant().id, room.id)

        with pytest.raises(PreconditionError) as exc:
            PropertyService().delete_property(pg.id)
        assert exc.value.code == "PROPERTY_OCCUPIED"

    def test_deactivate_keeps_assignments(self, pg, define, engine, make_tenant):
        room = define("single")[0]
        tenant = make_tenant()
        engine.assign(tenant.id, room.id)

        PropertyService().deactivate_property(pg.id)

        pg.refresh_from_db()
        assert pg.status == PropertyStatus.INACTIVE
        assert TenantAssignment.objects.get(tenant=tenant).status == AssignmentStatus.ACTIVE

    def test_delete_empty_property(self, pg, define):
        define("double", room_count=2)
        PropertyService().delete_property(pg.id)
        assert not Room.objects.exists()

    def test_moderation(self, pg):
        service = PropertyService()
        assert service.reject_property(pg.id).status == PropertyStatus.REJECTED
        assert service.approve_property(pg.id).status == PropertyStatus.APPROVED

    def test_inactive_property_cannot_be_moderated(self, owner):
        prop = make_property(owner, status=PropertyStatus.INACTIVE)
        with pytest.raises(PreconditionError):
            PropertyService().approve_property(prop.id)
