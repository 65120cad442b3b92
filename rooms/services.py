"""
Inventory service - provisioning and maintenance of rooms and beds.

Room shape changes that race with allocation (gender restriction,
deletion) run under the same per-room lock the allocation engine uses.
"""
from django.db import transaction, IntegrityError
from core.services import BaseService
from core.constants import SharingKind
from core.dto import RoomTypeDTO
from core.exceptions import NotFoundError, ValidationError, ConflictError, PreconditionError
from core.validators import RoomTypeValidator, RoomValidator
from occupancy.locks import allocation_locks
from properties.models import Property, RoomType
from properties.repositories import PropertyRepository, RoomTypeRepository
from .models import Room, Bed
from .repositories import RoomRepository, BedRepository


class InventoryService(BaseService):
    """Service for the room/bed inventory of a property"""

    def __init__(self, locks=None):
        super().__init__()
        self.locks = locks or allocation_locks
        self.property_repo = PropertyRepository(Property)
        self.room_type_repo = RoomTypeRepository(RoomType)
        self.room_repo = RoomRepository(Room)
        self.bed_repo = BedRepository(Bed)

    def define_room_type(self, property_id: int, room_type_data: RoomTypeDTO) -> RoomType:
        """
        Define a room type and provision its rooms, each with
        bed_count(sharing_kind) empty beds.

        Args:
            property_id: Property ID
            room_type_data: sharing kind, base price, room count and optional
                explicit room numbers / gender restriction

        Returns:
            Created RoomType instance

        Raises:
            ValidationError: Unknown sharing kind, room_count <= 0, negative
                price, or a room number collision within the property
            PreconditionError: If the property is inactive
        """
        RoomTypeValidator.validate_sharing_kind(room_type_data.sharing_kind)
        RoomTypeValidator.validate_room_count(room_type_data.room_count)
        base_price = RoomTypeValidator.validate_base_price(room_type_data.base_price)
        gender = RoomValidator.validate_gender_restriction(room_type_data.gender_restriction)

        numbers = []
        try:
            with transaction.atomic():
                prop = self.property_repo.get_for_update(property_id)
                if not prop:
                    raise NotFoundError(resource_type="Property", resource_id=property_id)
                if not prop.is_active:
                    raise PreconditionError(
                        message="Cannot add rooms to an inactive property",
                        code="PROPERTY_INACTIVE",
                        details={"property_id": property_id}
                    )

                numbers = self._room_numbers(prop, room_type_data)
                taken = self.room_repo.taken_numbers(prop.id, numbers)
                if taken:
                    raise self._collision(taken)

                room_type = self.room_type_repo.create(
                    property=prop,
                    sharing_kind=room_type_data.sharing_kind,
                    base_price=base_price,
                    label=room_type_data.label,
                )
                for number in numbers:
                    room = self.room_repo.create(
                        property=prop,
                        room_type=room_type,
                        room_number=number,
                        gender_restriction=gender,
                    )
                    self.bed_repo.provision(room)
        except IntegrityError:
            # Lost a race with a concurrent definition on the same property
            raise self._collision(numbers)

        self.log_info(
            f"Room type defined: {room_type}",
            property_id=prop.id, room_type_id=room_type.id,
            sharing_kind=room_type.sharing_kind, rooms=numbers,
        )
        return room_type

    def update_room_type(self, room_type_id: int, base_price=None, label=None) -> RoomType:
        """Edit price/label. Active assignments keep the rent captured at check-in."""
        with transaction.atomic():
            room_type = self.room_type_repo.get_for_update(room_type_id)
            if not room_type:
                raise NotFoundError(resource_type="RoomType", resource_id=room_type_id)
            changes = {}
            if base_price is not None:
                changes['base_price'] = RoomTypeValidator.validate_base_price(base_price)
            if label is not None:
                changes['label'] = label
            if changes:
                self.room_type_repo.update(room_type, **changes)
                self.log_info("Room type updated", room_type_id=room_type_id, fields=sorted(changes))
            return room_type

    def rename_room(self, room_id: int, new_number: str) -> Room:
        """
        Raises:
            ConflictError: If the number is already used in the same property
        """
        new_number = RoomValidator.validate_room_number(new_number)
        try:
            with transaction.atomic():
                room = self.room_repo.get_for_update(room_id)
                if not room:
                    raise NotFoundError(resource_type="Room", resource_id=room_id)
                if room.room_number == new_number:
                    return room
                if self.room_repo.exists(property_id=room.property_id, room_number=new_number):
                    raise self._number_taken(room, new_number)
                old_number = room.room_number
                self.room_repo.update(room, room_number=new_number)
        except IntegrityError:
            raise self._number_taken(room, new_number)

        self.log_info(f"Room renamed {old_number} -> {new_number}", room_id=room_id, property_id=room.property_id)
        return room

    def set_gender_restriction(self, room_id: int, gender: str) -> Room:
        """
        Restrict a room to one gender (or clear with '').

        Raises:
            ConflictError: If a current occupant's known gender contradicts it
        """
        gender = RoomValidator.validate_gender_restriction(gender)
        with self.locks.rooms(room_id):
            with transaction.atomic():
                room = self.room_repo.get_for_update(room_id)
                if not room:
                    raise NotFoundError(resource_type="Room", resource_id=room_id)
                if gender:
                    conflicts = list(self.room_repo.conflicting_occupants(room_id, gender))
                    if conflicts:
                        raise ConflictError(
                            message=f"Room {room.room_number} has occupants who are not {gender}",
                            code="GENDER_MISMATCH",
                            details={"room_id": room_id, "tenant_ids": [a.tenant_id for a in conflicts]}
                        )
                self.room_repo.update(room, gender_restriction=gender)

        self.log_info("Room gender restriction set", room_id=room_id, gender=gender or None)
        return room

    def delete_room(self, room_id: int) -> None:
        """
        Delete a room with its beds and ended assignment history.

        Raises:
            PreconditionError: If any bed has an active assignment
        """
        with self.locks.rooms(room_id):
            with transaction.atomic():
                room = self.room_repo.get_for_update(room_id)
                if not room:
                    raise NotFoundError(resource_type="Room", resource_id=room_id)
                if self.room_repo.has_active_assignments(room_id):
                    raise PreconditionError(
                        message=f"Room {room.room_number} still has tenants assigned",
                        code="ROOM_OCCUPIED",
                        details={"room_id": room_id}
                    )
                self.room_repo.delete(room)

        self.log_info(f"Room deleted: {room.room_number}", room_id=room_id, property_id=room.property_id)

    def _room_numbers(self, prop, room_type_data: RoomTypeDTO):
        if room_type_data.room_numbers:
            numbers = [RoomValidator.validate_room_number(n) for n in room_type_data.room_numbers]
            if len(numbers) != room_type_data.room_count:
                raise ValidationError(
                    message="Number of room numbers must match room count",
                    code="ROOM_NUMBERS_MISMATCH",
                    details={"room_count": room_type_data.room_count, "room_numbers": len(numbers)}
                )
            duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
            if duplicates:
                raise self._collision(duplicates)
            return numbers

        # Kind initial + 2-digit sequence (D01, D02, ...)
        prefix = SharingKind.room_prefix(room_type_data.sharing_kind)
        start = self.room_repo.highest_sequence(prop.id, prefix)
        return [f"{prefix}{start + i:02d}" for i in range(1, room_type_data.room_count + 1)]

    @staticmethod
    def _collision(numbers):
        return ValidationError(
            message=f"Room number(s) already in use: {', '.join(numbers)}",
            code="ROOM_NUMBER_COLLISION",
            details={"room_numbers": list(numbers)}
        )

    @staticmethod
    def _number_taken(room, new_number):
        return ConflictError(
            message=f"Room number {new_number} already exists in this property",
            code="ROOM_NUMBER_TAKEN",
            details={"room_id": room.id, "room_number": new_number}
        )
