"""
Occupancy projection - read-only aggregates over the assignment ledger.

Nothing here is stored: every figure is recomputed from active assignments,
so it cannot drift from the ledger.
"""
from dataclasses import dataclass, asdict
from typing import List
from django.db.models import Count, Q
from core.constants import SharingKind, OccupancyStatus, PropertyStatus, AssignmentStatus
from core.exceptions import NotFoundError
from core.services import BaseService
from properties.models import Property, RoomType
from rooms.models import Room
from .models import TenantAssignment


@dataclass(frozen=True)
class OccupancySnapshot:
    capacity: int = 0
    occupied: int = 0

    @property
    def available(self) -> int:
        return self.capacity - self.occupied

    @property
    def status(self) -> str:
        if self.occupied == 0:
            return OccupancyStatus.EMPTY
        if self.occupied >= self.capacity:
            return OccupancyStatus.FULL
        return OccupancyStatus.PARTIAL

    def __add__(self, other):
        return OccupancySnapshot(self.capacity + other.capacity, self.occupied + other.occupied)

    def as_dict(self):
        data = asdict(self)
        data.update(available=self.available, status=self.status)
        return data


class OccupancyProjection(BaseService):
    """Occupancy per room, per room type and per property"""

    def room_occupancy(self, room_id: int) -> OccupancySnapshot:
        if not Room.objects.filter(id=room_id).exists():
            raise NotFoundError(resource_type="Room", resource_id=room_id)
        return self._snapshot(Room.objects.filter(id=room_id), Q(room_id=room_id))

    def room_type_occupancy(self, room_type_id: int) -> OccupancySnapshot:
        if not RoomType.objects.filter(id=room_type_id).exists():
            raise NotFoundError(resource_type="RoomType", resource_id=room_type_id)
        return self._snapshot(
            Room.objects.filter(room_type_id=room_type_id),
            Q(room__room_type_id=room_type_id),
        )

    def property_occupancy(self, property_id: int) -> OccupancySnapshot:
        if not Property.objects.filter(id=property_id).exists():
            raise NotFoundError(resource_type="Property", resource_id=property_id)
        return self._snapshot(
            Room.objects.filter(property_id=property_id),
            Q(room__property_id=property_id),
        )

    def property_breakdown(self, property_id: int) -> List[dict]:
        """One entry per room type: type info, its rooms' occupancy and the snapshot"""
        prop = Property.objects.filter(id=property_id).first()
        if not prop:
            raise NotFoundError(resource_type="Property", resource_id=property_id)

        breakdown = []
        for room_type in prop.room_types.all():
            rooms = self._rooms_with_occupancy(Room.objects.filter(room_type=room_type))
            snapshot = OccupancySnapshot(
                capacity=sum(room.capacity for room in rooms),
                occupied=sum(room.occupied for room in rooms),
            )
            breakdown.append({
                'room_type_id': room_type.id,
                'sharing_kind': room_type.sharing_kind,
                'label': room_type.label,
                'base_price': room_type.base_price,
                'room_count': len(rooms),
                'occupancy': snapshot.as_dict(),
                'rooms': [
                    {
                        'room_id': room.id,
                        'room_number': room.room_number,
                        'gender_restriction': room.gender_restriction,
                        'occupancy': OccupancySnapshot(room.capacity, room.occupied).as_dict(),
                    }
                    for room in rooms
                ],
            })
        return breakdown

    def available_rooms(self, owner) -> List[Room]:
        """Rooms with at least one free bed in the owner's active properties"""
        rooms = Room.objects.filter(property__owner=owner).exclude(property__status=PropertyStatus.INACTIVE)
        return [room for room in self._rooms_with_occupancy(rooms) if room.occupied < room.capacity]

    # ------------------------------------------------------------------

    @staticmethod
    def _snapshot(rooms, assignment_scope) -> OccupancySnapshot:
        kinds = rooms.values_list('room_type__sharing_kind', flat=True)
        capacity = sum(SharingKind.bed_count(kind) for kind in kinds)
        occupied = (
            TenantAssignment.objects.active()
            .filter(assignment_scope)
            .values('tenant_id').distinct().count()
        )
        return OccupancySnapshot(capacity=capacity, occupied=occupied)

    @staticmethod
    def _rooms_with_occupancy(rooms):
        return list(
            rooms.select_related('property', 'room_type')
            .annotate(occupied=Count(
                'assignments__tenant',
                filter=Q(assignments__status=AssignmentStatus.ACTIVE),
                distinct=True,
            ))
            .order_by('room_number')
        )
