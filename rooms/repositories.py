"""
Room repository - Data access layer for the room/bed inventory.
"""
import re
from typing import List
from django.db.models import QuerySet
from core.constants import SharingKind, AssignmentStatus
from core.repositories import BaseRepository
from .models import Room, Bed


class RoomRepository(BaseRepository[Room]):
    """Repository for Room model"""

    def taken_numbers(self, property_id: int, numbers: List[str]) -> List[str]:
        """Room numbers from the list already used in the property"""
        return sorted(
            self.get_all(property_id=property_id, room_number__in=numbers).values_list('room_number', flat=True)
        )

    def highest_sequence(self, property_id: int, prefix: str) -> int:
        """Largest N among room numbers of the form <prefix>N in the property, 0 if none"""
        pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
        numbers = self.get_all(property_id=property_id, room_number__startswith=prefix).values_list('room_number', flat=True)
        matches = (pattern.match(number) for number in numbers)
        return max((int(match.group(1)) for match in matches if match), default=0)

    def has_active_assignments(self, room_id: int) -> bool:
        from occupancy.models import TenantAssignment
        return TenantAssignment.objects.filter(room_id=room_id, status=AssignmentStatus.ACTIVE).exists()

    def conflicting_occupants(self, room_id: int, gender: str):
        """Active tenants whose known gender differs from the given restriction"""
        from occupancy.models import TenantAssignment
        return TenantAssignment.objects.filter(
            room_id=room_id,
            status=AssignmentStatus.ACTIVE,
        ).exclude(tenant__gender='').exclude(tenant__gender=gender).select_related('tenant')


class BedRepository(BaseRepository[Bed]):
    """Repository for Bed model"""

    def provision(self, room: Room) -> List[Bed]:
        """Create the room's bed slots, count fixed by its sharing kind"""
        beds = [
            Bed(room=room, slot_index=slot)
            for slot in range(SharingKind.bed_count(room.room_type.sharing_kind))
        ]
        return self.bulk_create(beds)

    def free_beds(self, room_id: int) -> QuerySet[Bed]:
        """Beds without an active assignment, lowest slot first"""
        return self.get_all(room_id=room_id).exclude(
            assignments__status=AssignmentStatus.ACTIVE
        ).order_by('slot_index')
