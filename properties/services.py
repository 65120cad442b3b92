"""
Property service - Business logic layer for Property domain.
Services orchestrate repositories and contain business rules.
"""
from django.db import transaction
from core.services import BaseService
from core.constants import PropertyStatus
from core.exceptions import NotFoundError, PermissionDeniedError, PreconditionError, ValidationError
from core.dto import PropertyDTO
from .repositories import PropertyRepository
from .models import Property


class PropertyService(BaseService):
    """Service for property lifecycle: create, edit, soft delete and moderation"""

    def __init__(self):
        super().__init__()
        self.property_repo = PropertyRepository(Property)

    def get_property(self, property_id: int) -> Property:
        prop = self.property_repo.get_by_id(property_id)
        if not prop:
            raise NotFoundError(resource_type="Property", resource_id=property_id)
        return prop

    def create_property(self, owner, property_data: PropertyDTO) -> Property:
        """
        Create a new property for an owner. New listings wait for admin approval.

        Raises:
            PermissionDeniedError: If user is not an owner
            ValidationError: If title is blank
        """
        if not owner.is_owner:
            raise PermissionDeniedError("Only owners can create properties")
        if not property_data.title.strip():
            raise ValidationError(message="Property title is required", code="INVALID_TITLE")

        with transaction.atomic():
            prop = self.property_repo.create(
                owner=owner,
                title=property_data.title.strip(),
                description=property_data.description,
                address_line1=property_data.address_line1,
                city=property_data.city,
                state=property_data.state,
                zip_code=property_data.zip_code,
                notice_period_days=property_data.notice_period_days,
                status=PropertyStatus.PENDING,
            )
            self.log_info(f"Property created: {prop.title}", property_id=prop.id, owner_id=owner.id)
            return prop

    def update_property(self, property_id: int, **changes) -> Property:
        with transaction.atomic():
            prop = self.property_repo.get_for_update(property_id)
            if not prop:
                raise NotFoundError(resource_type="Property", resource_id=property_id)
            self.property_repo.update(prop, **changes)
            self.log_info(f"Property updated: {prop.title}", property_id=prop.id, fields=sorted(changes))
            return prop

    def deactivate_property(self, property_id: int) -> Property:
        """Soft delete - the property stays in place so assigned tenants keep their beds"""
        prop = self.update_property(property_id, status=PropertyStatus.INACTIVE)
        self.log_info(f"Property deactivated: {prop.title}", property_id=prop.id)
        return prop

    def delete_property(self, property_id: int) -> None:
        """
        Hard delete a property with its rooms.

        Raises:
            PreconditionError: While any tenant is assigned; deactivate instead
        """
        with transaction.atomic():
            prop = self.property_repo.get_for_update(property_id)
            if not prop:
                raise NotFoundError(resource_type="Property", resource_id=property_id)
            if self.property_repo.has_active_assignments(property_id):
                raise PreconditionError(
                    message="Property has assigned tenants. Deactivate it instead of deleting.",
                    code="PROPERTY_OCCUPIED",
                    details={"property_id": property_id}
                )
            self.property_repo.delete(prop)
            self.log_info(f"Property deleted: {prop.title}", property_id=property_id)

    def approve_property(self, property_id: int) -> Property:
        return self._moderate(property_id, PropertyStatus.APPROVED)

    def reject_property(self, property_id: int) -> Property:
        return self._moderate(property_id, PropertyStatus.REJECTED)

    def _moderate(self, property_id: int, new_status: str) -> Property:
        prop = self.get_property(property_id)
        if prop.status == PropertyStatus.INACTIVE:
            raise PreconditionError(
                message="Inactive properties cannot be moderated",
                code="PROPERTY_INACTIVE",
                details={"property_id": property_id}
            )
        return self.update_property(property_id, status=new_status)
