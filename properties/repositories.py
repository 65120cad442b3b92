"""
Property repository - Data access layer for Property domain.
Follows Repository pattern for clean separation of concerns.
"""
from core.repositories import BaseRepository
from .models import Property, RoomType


class PropertyRepository(BaseRepository[Property]):
    """Repository for Property model"""

    def has_active_assignments(self, property_id: int) -> bool:
        from occupancy.models import TenantAssignment
        return TenantAssignment.objects.active().filter(room__property_id=property_id).exists()


class RoomTypeRepository(BaseRepository[RoomType]):
    """Repository for RoomType model"""
