"""
Allocation engine - the only code that creates, moves or ends
tenant-to-bed assignments.

Critical sections:
- every mutation holds the tenant lock, then the lock(s) of the rooms it
  touches (in-process, see occupancy.locks);
- inside, a transaction takes row locks on the tenant row and then the
  room rows (sorted), so other processes on PostgreSQL/MySQL serialize too;
- the insert of the active assignment is itself a conditional write,
  guarded by the partial unique constraints. Losing that race is retried
  against the next free slot.

The ORM is synchronous; async callers wrap these methods with
asgiref's sync_to_async and go through the same locks.
"""
from datetime import timedelta
from functools import partial
from django.conf import settings
from django.db import transaction, IntegrityError
from django.utils import timezone
from core.services import BaseService
from core.constants import AssignmentStatus, DefaultLimits
from core.repositories import BaseRepository
from core.exceptions import (
    NotFoundError, ConflictError, CapacityError, PreconditionError, ConcurrencyConflict, ValidationError,
)
from core.validators import AssignmentValidator
from rooms.models import Room, Bed
from rooms.repositories import RoomRepository, BedRepository
from tenants.models import Tenant
from .locks import allocation_locks
from .models import TenantAssignment
from .repositories import TenantAssignmentRepository
from .signals import tenant_assigned, tenant_removed


class AllocationEngine(BaseService):
    """Assign, transfer and remove tenant-to-bed bindings"""

    def __init__(self, locks=None):
        super().__init__()
        self.locks = locks or allocation_locks
        self.tenant_repo = BaseRepository(Tenant)
        self.room_repo = RoomRepository(Room)
        self.bed_repo = BedRepository(Bed)
        self.assignment_repo = TenantAssignmentRepository(TenantAssignment)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def assign(self, tenant_id: int, room_id: int, bed_slot=None, check_in_date=None,
               performed_by=None) -> TenantAssignment:
        """
        Assign a tenant to a bed in a room.

        Args:
            tenant_id: Tenant ID
            room_id: Room ID
            bed_slot: Preferred 0-based slot; the lowest free slot is used if
                omitted or already taken
            check_in_date: Defaults to today; may not exceed today plus
                OCCUPANCY_CHECK_IN_GRACE_DAYS
            performed_by: User performing the action, forwarded to receivers

        Returns:
            The created active TenantAssignment

        Raises:
            ValidationError: Bad bed slot or check-in date
            NotFoundError: Unknown tenant or room
            PreconditionError: Room belongs to an inactive property
            ConflictError: TENANT_ALREADY_ASSIGNED or GENDER_MISMATCH
            CapacityError: ROOM_FULL
            ConcurrencyConflict: Claim retries exhausted while slots remained
        """
        check_in_date = check_in_date or timezone.localdate()
        AssignmentValidator.validate_check_in_date(check_in_date)

        with self.locks.tenant(tenant_id):
            with self.locks.rooms(room_id):
                with transaction.atomic():
                    tenant = self._lock_tenant(tenant_id)
                    room = self._lock_rooms(room_id)[room_id]
                    assignment = self._assign_locked(tenant, room, bed_slot, check_in_date)
                    self._emit_assigned(assignment, performed_by)

        self.log_info(
            f"Tenant assigned: {tenant.name} -> {assignment.bed.label}",
            tenant_id=tenant_id, room_id=room_id, bed_id=assignment.bed_id, assignment_id=assignment.id,
        )
        return assignment

    def transfer(self, tenant_id: int, new_room_id: int, bed_slot=None, performed_by=None) -> TenantAssignment:
        """
        Move a tenant to another room (or another bed of the same room).

        The current assignment is ended and the new one created in a single
        transaction: if the new room rejects the tenant, the previous
        assignment is left untouched.

        Raises:
            NotFoundError: Tenant has no active assignment
            Any error of assign() for the target room
        """
        with self.locks.tenant(tenant_id):
            current = self._require_active(tenant_id)
            with self.locks.rooms(current.room_id, new_room_id):
                with transaction.atomic():
                    tenant = self._lock_tenant(tenant_id)
                    rooms = self._lock_rooms(current.room_id, new_room_id)
                    current = self._relock_active(current)

                    today = timezone.localdate()
                    self.assignment_repo.end(current, max(today, current.check_in_date))
                    assignment = self._assign_locked(tenant, rooms[new_room_id], bed_slot, today)

                    self._emit_removed(current, performed_by, transfer=True)
                    self._emit_assigned(assignment, performed_by, transfer=True)

        self.log_info(
            f"Tenant transferred: {tenant.name} {current.bed.label} -> {assignment.bed.label}",
            tenant_id=tenant_id, from_room_id=current.room_id, to_room_id=new_room_id,
            assignment_id=assignment.id,
        )
        return assignment

    def remove(self, tenant_id: int, end_date=None, performed_by=None) -> TenantAssignment:
        """
        End the tenant's active assignment and free the bed.

        Calling it again right after yields NotFoundError and changes nothing.

        Returns:
            The ended TenantAssignment

        Raises:
            NotFoundError: Unknown tenant or no active assignment
            ValidationError: end_date before check-in
        """
        with self.locks.tenant(tenant_id):
            current = self._require_active(tenant_id)
            with self.locks.rooms(current.room_id):
                with transaction.atomic():
                    self._lock_tenant(tenant_id)
                    self._lock_rooms(current.room_id)
                    current = self._relock_active(current)

                    end_date = end_date or max(timezone.localdate(), current.check_in_date)
                    if end_date < current.check_in_date:
                        raise ValidationError(
                            message="End date cannot be before check-in date",
                            code="INVALID_END_DATE",
                            details={"end_date": end_date.isoformat(),
                                     "check_in_date": current.check_in_date.isoformat()}
                        )
                    self.assignment_repo.end(current, end_date)
                    self._emit_removed(current, performed_by)

        self.log_info("Tenant removed", tenant_id=tenant_id, room_id=current.room_id,
                      bed_id=current.bed_id, assignment_id=current.id)
        return current

    def give_notice(self, tenant_id: int, notice_date=None, reason: str = '') -> TenantAssignment:
        """
        Record the tenant's notice to vacate on the active assignment.
        Expected checkout = notice date + the property's notice period.
        """
        notice_date = notice_date or timezone.localdate()
        with self.locks.tenant(tenant_id):
            with transaction.atomic():
                self._lock_tenant(tenant_id)
                current = self._relock_active(self._require_active(tenant_id))
                AssignmentValidator.validate_notice_date(notice_date, current.check_in_date)
                notice_days = current.room.property.notice_period_days
                self.assignment_repo.update(
                    current,
                    notice_date=notice_date,
                    expected_checkout_date=notice_date + timedelta(days=notice_days),
                    notice_reason=reason or '',
                )

        self.log_info("Notice recorded", tenant_id=tenant_id, assignment_id=current.id,
                      expected_checkout_date=current.expected_checkout_date.isoformat())
        return current

    def current_assignment(self, tenant_id: int):
        return self.assignment_repo.active_for_tenant(tenant_id)

    # ------------------------------------------------------------------
    # Critical section internals - callers hold tenant and room locks
    # ------------------------------------------------------------------

    def _assign_locked(self, tenant, room, bed_slot, check_in_date) -> TenantAssignment:
        AssignmentValidator.validate_bed_slot(bed_slot, room.capacity)

        if not room.property.is_active:
            raise PreconditionError(
                message=f"Property {room.property.title} is inactive",
                code="PROPERTY_INACTIVE",
                details={"property_id": room.property_id}
            )

        existing = self.assignment_repo.active_for_tenant(tenant.id)
        if existing:
            raise self._already_assigned(tenant, existing)

        occupied = self.assignment_repo.count_active_in_room(room.id)
        if occupied >= room.capacity:
            raise self._room_full(room)

        if room.gender_restriction and tenant.gender and tenant.gender != room.gender_restriction:
            raise ConflictError(
                message=f"Room {room.room_number} is designated for {room.gender_restriction} tenants only",
                code="GENDER_MISMATCH",
                details={"room_id": room.id, "room_gender": room.gender_restriction, "tenant_gender": tenant.gender}
            )

        return self._claim_bed(tenant, room, bed_slot, check_in_date)

    def _claim_bed(self, tenant, room, bed_slot, check_in_date) -> TenantAssignment:
        """
        Insert the active assignment. The partial unique constraint on the
        bed rejects the insert if someone else claimed it first; then the
        next free slot is tried, up to OCCUPANCY_CLAIM_RETRIES more times.
        """
        retries = getattr(settings, 'OCCUPANCY_CLAIM_RETRIES', DefaultLimits.CLAIM_RETRIES)
        lost_bed_ids = set()

        for attempt in range(retries + 1):
            free = [bed for bed in self._free_beds(room) if bed.id not in lost_bed_ids]
            if not free:
                raise self._room_full(room)
            bed = self._select_bed(free, bed_slot)
            try:
                with transaction.atomic():
                    return self.assignment_repo.create(
                        tenant=tenant,
                        room=room,
                        bed=bed,
                        status=AssignmentStatus.ACTIVE,
                        check_in_date=check_in_date,
                        rent=room.room_type.base_price,
                    )
            except IntegrityError:
                existing = self.assignment_repo.active_for_tenant(tenant.id)
                if existing:
                    raise self._already_assigned(tenant, existing)
                lost_bed_ids.add(bed.id)
                self.log_warning("Lost claim on bed", room_id=room.id, bed_id=bed.id, attempt=attempt + 1)

        raise ConcurrencyConflict(
            message=f"Could not claim a bed in room {room.room_number} after {retries + 1} attempts",
            details={"room_id": room.id, "attempts": retries + 1}
        )

    def _free_beds(self, room):
        return list(self.bed_repo.free_beds(room.id))

    @staticmethod
    def _select_bed(free_beds, bed_slot):
        """Preferred slot if free, else the lowest free slot"""
        if bed_slot is not None:
            for bed in free_beds:
                if bed.slot_index == bed_slot:
                    return bed
        return min(free_beds, key=lambda bed: bed.slot_index)

    def _lock_tenant(self, tenant_id):
        tenant = self.tenant_repo.get_for_update(tenant_id)
        if not tenant:
            raise NotFoundError(resource_type="Tenant", resource_id=tenant_id)
        return tenant

    def _lock_rooms(self, *room_ids):
        """Row-lock rooms in id order; returns {room_id: room}"""
        rooms = {}
        for room_id in sorted(set(room_ids)):
            room = self.room_repo.get_for_update(room_id)
            if not room:
                raise NotFoundError(resource_type="Room", resource_id=room_id)
            rooms[room_id] = room
        return rooms

    def _require_active(self, tenant_id):
        current = self.assignment_repo.active_for_tenant(tenant_id)
        if current:
            return current
        if not self.tenant_repo.exists(id=tenant_id):
            raise NotFoundError(resource_type="Tenant", resource_id=tenant_id)
        raise NotFoundError(
            message=f"Tenant {tenant_id} has no active assignment",
            code="NO_ACTIVE_ASSIGNMENT",
            details={"tenant_id": tenant_id}
        )

    def _relock_active(self, assignment):
        """Re-read the assignment under the row locks; another process may have ended it"""
        locked = self.assignment_repo.get_for_update(assignment.id, status=AssignmentStatus.ACTIVE)
        if not locked:
            raise NotFoundError(
                message=f"Tenant {assignment.tenant_id} has no active assignment",
                code="NO_ACTIVE_ASSIGNMENT",
                details={"tenant_id": assignment.tenant_id}
            )
        return locked

    @staticmethod
    def _already_assigned(tenant, existing):
        return ConflictError(
            message=f"Tenant {tenant.name} is already assigned to room {existing.room.room_number}",
            code="TENANT_ALREADY_ASSIGNED",
            details={"tenant_id": tenant.id, "room_id": existing.room_id, "bed_id": existing.bed_id}
        )

    @staticmethod
    def _room_full(room):
        return CapacityError(
            message=f"Room {room.room_number} is at full capacity",
            code="ROOM_FULL",
            details={"room_id": room.id, "capacity": room.capacity}
        )

    # ------------------------------------------------------------------
    # Outbound events, delivered after commit
    # ------------------------------------------------------------------

    @staticmethod
    def _emit_assigned(assignment, performed_by, transfer=False):
        transaction.on_commit(partial(
            tenant_assigned.send,
            sender=TenantAssignment,
            assignment=assignment,
            tenant_id=assignment.tenant_id,
            room_id=assignment.room_id,
            bed_id=assignment.bed_id,
            check_in_date=assignment.check_in_date,
            performed_by=performed_by,
            transfer=transfer,
        ))

    @staticmethod
    def _emit_removed(assignment, performed_by, transfer=False):
        transaction.on_commit(partial(
            tenant_removed.send,
            sender=TenantAssignment,
            assignment=assignment,
            tenant_id=assignment.tenant_id,
            room_id=assignment.room_id,
            bed_id=assignment.bed_id,
            end_date=assignment.end_date,
            performed_by=performed_by,
            transfer=transfer,
        ))
