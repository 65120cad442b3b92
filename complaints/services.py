"""
Complaint service - tenants raise complaints, owners work them to resolution.

A complaint is pinned to the property and room the tenant occupies when it
is raised, so it stays with that property after the tenant moves out.
"""
from django.db import transaction
from django.utils import timezone
from core.services import BaseService
from core.constants import ComplaintStatus, ComplaintPriority
from core.exceptions import NotFoundError, PermissionDeniedError, PreconditionError, ConflictError, ValidationError
from core.repositories import BaseRepository
from core.validators import ComplaintValidator
from tenants.models import Tenant
from .models import Complaint


class ComplaintService(BaseService):
    """Service for tenant complaints"""

    def __init__(self):
        super().__init__()
        self.complaint_repo = BaseRepository(Complaint)
        self.tenant_repo = BaseRepository(Tenant)

    def submit_complaint(self, user, subject, description, category,
                         priority=ComplaintPriority.LOW, tenant_id=None) -> Complaint:
        """
        Raise a complaint for the property the tenant currently lives in.

        Tenant users complain for themselves; owners and admins may file on
        behalf of a tenant by passing tenant_id.

        Raises:
            ValidationError: Bad subject/category/priority, or tenant_id missing for an owner
            PermissionDeniedError: Caller may not file for this tenant
            NotFoundError: Unknown tenant
            PreconditionError: Tenant has no active assignment
        """
        subject = ComplaintValidator.validate_subject(subject)
        category = ComplaintValidator.validate_category(category)
        priority = ComplaintValidator.validate_priority(priority)
        if not (description or '').strip():
            raise ValidationError(message="Description is required", code="INVALID_DESCRIPTION")

        tenant = self._resolve_tenant(user, tenant_id)
        assignment = tenant.current_assignment
        if not assignment:
            raise PreconditionError(
                message=f"Tenant {tenant.id} has no active assignment",
                code="NO_ACTIVE_ASSIGNMENT",
                details={"tenant_id": tenant.id}
            )

        complaint = self.complaint_repo.create(
            tenant=tenant,
            property=assignment.room.property,
            room=assignment.room,
            subject=subject,
            description=description.strip(),
            category=category,
            priority=priority,
        )
        self.log_info(
            f"Complaint raised: {complaint.subject}",
            complaint_id=complaint.id, tenant_id=tenant.id,
            property_id=complaint.property_id, priority=priority,
        )
        return complaint

    def update_status(self, complaint_id: int, status: str, notes=None, assigned_to=None) -> Complaint:
        """
        Move a complaint through PENDING -> IN_PROGRESS -> RESOLVED -> CLOSED.
        Resolved complaints may be reopened; closed ones are final.

        Raises:
            ConflictError: If the complaint is already closed
        """
        status = ComplaintValidator.validate_status(status)
        with transaction.atomic():
            complaint = self.complaint_repo.get_for_update(complaint_id)
            if not complaint:
                raise NotFoundError(resource_type="Complaint", resource_id=complaint_id)
            if complaint.status == ComplaintStatus.CLOSED:
                raise ConflictError(
                    message=f"Complaint {complaint_id} is closed",
                    code="COMPLAINT_CLOSED",
                    details={"complaint_id": complaint_id}
                )

            changes = {'status': status}
            if status in ComplaintStatus.OPEN:
                changes['resolved_date'] = None
            elif not complaint.resolved_date:
                changes['resolved_date'] = timezone.now()
            if notes is not None:
                changes['notes'] = notes
            if assigned_to is not None:
                changes['assigned_to'] = assigned_to
            previous = complaint.status
            self.complaint_repo.update(complaint, **changes)

        self.log_info(
            f"Complaint status {previous} -> {status}",
            complaint_id=complaint_id, property_id=complaint.property_id,
        )
        return complaint

    def _resolve_tenant(self, user, tenant_id):
        if user.is_owner or user.is_platform_admin:
            if tenant_id is None:
                raise ValidationError(message="tenant_id is required", code="TENANT_REQUIRED")
            tenant = self.tenant_repo.get_by_id(tenant_id)
            if not tenant:
                raise NotFoundError(resource_type="Tenant", resource_id=tenant_id)
            if not user.is_platform_admin and tenant.owner_id != user.id:
                raise PermissionDeniedError("You can only file complaints for your own tenants")
            return tenant

        tenant = self.tenant_repo.get_all(user=user).first()
        if not tenant:
            raise PermissionDeniedError("No tenant profile is linked to this account")
        if tenant_id is not None and tenant_id != tenant.id:
            raise PermissionDeniedError("Tenants can only file their own complaints")
        return tenant
