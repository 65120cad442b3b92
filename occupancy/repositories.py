"""
Assignment repository - Data access layer for the assignment ledger.
"""
from typing import Optional
from django.db.models import QuerySet
from core.constants import AssignmentStatus
from core.repositories import BaseRepository
from .models import TenantAssignment


class TenantAssignmentRepository(BaseRepository[TenantAssignment]):
    """Repository for TenantAssignment model"""

    def active_for_tenant(self, tenant_id: int) -> Optional[TenantAssignment]:
        return self.model.objects.active().for_tenant(tenant_id).select_related('room', 'bed').first()

    def active_in_room(self, room_id: int) -> QuerySet[TenantAssignment]:
        return self.model.objects.active().for_room(room_id)

    def count_active_in_room(self, room_id: int) -> int:
        return self.active_in_room(room_id).count()

    def end(self, assignment: TenantAssignment, end_date) -> TenantAssignment:
        return self.update(assignment, status=AssignmentStatus.ENDED, end_date=end_date)
