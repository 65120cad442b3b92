"""
Tenant service - onboarding and profile edits.
"""
from django.db import transaction
from core.services import BaseService
from core.exceptions import NotFoundError, ConflictError, PermissionDeniedError
from core.repositories import BaseRepository
from occupancy.locks import allocation_locks
from .models import Tenant


class TenantService(BaseService):
    """Service for tenant profiles"""

    def __init__(self, locks=None):
        super().__init__()
        self.locks = locks or allocation_locks
        self.tenant_repo = BaseRepository(Tenant)

    def create_tenant(self, owner, **fields) -> Tenant:
        if not (owner.is_owner or owner.is_platform_admin):
            raise PermissionDeniedError("Only owners can onboard tenants")
        tenant = self.tenant_repo.create(owner=owner, **fields)
        self.log_info(f"Tenant created: {tenant.name}", tenant_id=tenant.id, owner_id=owner.id)
        return tenant

    def update_tenant(self, tenant_id: int, **changes) -> Tenant:
        """
        Edit a tenant profile. A gender change is refused while the tenant
        occupies a bed in a room restricted to another gender.
        """
        with self.locks.tenant(tenant_id):
            with transaction.atomic():
                tenant = self.tenant_repo.get_for_update(tenant_id)
                if not tenant:
                    raise NotFoundError(resource_type="Tenant", resource_id=tenant_id)

                gender = changes.get('gender')
                if gender and gender != tenant.gender:
                    room = tenant.current_room
                    if room and room.gender_restriction and room.gender_restriction != gender:
                        raise ConflictError(
                            message=f"Tenant occupies room {room.room_number}, designated for "
                                    f"{room.gender_restriction} tenants only",
                            code="GENDER_MISMATCH",
                            details={"tenant_id": tenant_id, "room_id": room.id}
                        )

                self.tenant_repo.update(tenant, **changes)

        self.log_info("Tenant updated", tenant_id=tenant_id, fields=sorted(changes))
        return tenant
