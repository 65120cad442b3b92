"""
Audit Logging Helper Functions

Provides a centralized way to log allocation and inventory actions.
"""

from audit.models import AuditLog
import logging

logger = logging.getLogger(__name__)


def log_action(owner, action, resource_type, resource_id, description, user=None, request=None, metadata=None):
    """
    Log an action to the audit log.

    Args:
        owner: Owner of the property the action touched
        action: Action type (ASSIGN_TENANT, DELETE, ...)
        resource_type: Type of resource (Room, Assignment, ...)
        resource_id: ID of the resource
        description: Human-readable description
        user: User who performed the action (None for system actions)
        request: Django request object (optional)
        metadata: Additional context data (optional)

    Returns:
        AuditLog instance, or None if writing the entry failed

    Example:
        log_action(
            owner=room.property.owner,
            action=AuditLog.ACTION_DELETE,
            resource_type=AuditLog.RESOURCE_ROOM,
            resource_id=room.id,
            description=f"Deleted room {room.room_number}",
            user=request.user,
            request=request
        )
    """
    try:
        ip_address = None
        user_agent = None
        if request:
            ip_address = get_client_ip(request)
            user_agent = request.META.get('HTTP_USER_AGENT', '')[:500]

        audit_log = AuditLog.objects.create(
            owner=owner,
            user=user if user is not None and user.is_authenticated else None,
            action=action,
            resource_type=resource_type,
            resource_id=resource_id,
            description=description,
            ip_address=ip_address,
            user_agent=user_agent,
            metadata=metadata or {}
        )

        logger.info(f"Audit: {audit_log.user_display} - {action} - {resource_type} #{resource_id}")
        return audit_log

    except Exception as e:
        # The audited operation has already committed
        logger.error(f"Failed to create audit log: {e}", exc_info=True)
        return None


def get_client_ip(request):
    """
    Extract client IP address from request.
    Handles proxies and load balancers.
    """
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


def _assignment_metadata(assignment):
    return {
        'tenant_id': assignment.tenant_id,
        'tenant_name': assignment.tenant.name,
        'property_id': assignment.room.property_id,
        'room_id': assignment.room_id,
        'bed_id': assignment.bed_id,
        'bed_label': assignment.bed.label,
    }


def log_tenant_assignment(assignment, user=None):
    """Log tenant assignment to a bed"""
    metadata = _assignment_metadata(assignment)
    metadata.update(check_in_date=assignment.check_in_date.isoformat(), rent=str(assignment.rent))
    return log_action(
        owner=assignment.room.property.owner,
        action=AuditLog.ACTION_ASSIGN_TENANT,
        resource_type=AuditLog.RESOURCE_ASSIGNMENT,
        resource_id=assignment.id,
        description=f"Assigned tenant {assignment.tenant.name} to bed {assignment.bed.label}",
        user=user,
        metadata=metadata,
    )


def log_tenant_transfer(assignment, previous, user=None):
    """Log a move from the previous assignment's bed to the new one"""
    metadata = _assignment_metadata(assignment)
    metadata.update(
        previous_assignment_id=previous.id,
        from_room_id=previous.room_id,
        from_bed_label=previous.bed.label,
    )
    return log_action(
        owner=assignment.room.property.owner,
        action=AuditLog.ACTION_TRANSFER_TENANT,
        resource_type=AuditLog.RESOURCE_ASSIGNMENT,
        resource_id=assignment.id,
        description=f"Transferred tenant {assignment.tenant.name} from {previous.bed.label} to {assignment.bed.label}",
        user=user,
        metadata=metadata,
    )


def log_tenant_removal(assignment, user=None):
    """Log tenant leaving a bed"""
    metadata = _assignment_metadata(assignment)
    metadata['end_date'] = assignment.end_date.isoformat() if assignment.end_date else None
    return log_action(
        owner=assignment.room.property.owner,
        action=AuditLog.ACTION_REMOVE_TENANT,
        resource_type=AuditLog.RESOURCE_ASSIGNMENT,
        resource_id=assignment.id,
        description=f"Tenant {assignment.tenant.name} vacated bed {assignment.bed.label}",
        user=user,
        metadata=metadata,
    )


def log_room_deleted(room, user=None, request=None):
    return log_action(
        owner=room.property.owner,
        action=AuditLog.ACTION_DELETE,
        resource_type=AuditLog.RESOURCE_ROOM,
        resource_id=room.id,
        description=f"Deleted room {room.room_number} in {room.property.title}",
        user=user,
        request=request,
        metadata={'property_id': room.property_id, 'room_number': room.room_number},
    )


def log_room_type_defined(room_type, user=None, request=None):
    return log_action(
        owner=room_type.property.owner,
        action=AuditLog.ACTION_CREATE,
        resource_type=AuditLog.RESOURCE_ROOM_TYPE,
        resource_id=room_type.id,
        description=f"Defined {room_type.get_sharing_kind_display()} room type with {room_type.room_count} room(s)",
        user=user,
        request=request,
        metadata={
            'property_id': room_type.property_id,
            'sharing_kind': room_type.sharing_kind,
            'base_price': str(room_type.base_price),
        },
    )
