"""
Audit Log Model

IMMUTABLE: Audit logs cannot be edited or deleted after creation.
Records who moved which tenant where, and what happened to the inventory.
"""

from django.db import models
from django.conf import settings
from django.core.exceptions import PermissionDenied


class AuditLogQuerySet(models.QuerySet):
    """Custom queryset for audit logs with filtering helpers"""

    def for_owner(self, owner):
        """Filter logs for properties of a specific owner"""
        return self.filter(owner=owner)

    def for_resource(self, resource_type, resource_id):
        return self.filter(resource_type=resource_type, resource_id=resource_id)

    def for_action(self, action):
        return self.filter(action=action)


class AuditLog(models.Model):
    """
    Immutable audit log for allocation and inventory actions.

    Security:
    - Logs CANNOT be edited after creation
    - Logs CANNOT be deleted (except via cascading owner deletion)
    - Owner sees logs of their own properties, admins see all
    """

    # Action types
    ACTION_CREATE = 'CREATE'
    ACTION_UPDATE = 'UPDATE'
    ACTION_DELETE = 'DELETE'
    ACTION_ASSIGN_TENANT = 'ASSIGN_TENANT'
    ACTION_TRANSFER_TENANT = 'TRANSFER_TENANT'
    ACTION_REMOVE_TENANT = 'REMOVE_TENANT'

    ACTION_CHOICES = [
        (ACTION_CREATE, 'Create'),
        (ACTION_UPDATE, 'Update'),
        (ACTION_DELETE, 'Delete'),
        (ACTION_ASSIGN_TENANT, 'Assign Tenant'),
        (ACTION_TRANSFER_TENANT, 'Transfer Tenant'),
        (ACTION_REMOVE_TENANT, 'Remove Tenant'),
    ]

    # Resource types
    RESOURCE_PROPERTY = 'Property'
    RESOURCE_ROOM_TYPE = 'RoomType'
    RESOURCE_ROOM = 'Room'
    RESOURCE_TENANT = 'Tenant'
    RESOURCE_ASSIGNMENT = 'Assignment'

    RESOURCE_TYPE_CHOICES = [
        (RESOURCE_PROPERTY, 'Property'),
        (RESOURCE_ROOM_TYPE, 'Room Type'),
        (RESOURCE_ROOM, 'Room'),
        (RESOURCE_TENANT, 'Tenant'),
        (RESOURCE_ASSIGNMENT, 'Assignment'),
    ]

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='owned_audit_logs',
        help_text="Owner of the property this action belongs to"
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='audit_logs',
        help_text="User who performed the action"
    )

    action = models.CharField(max_length=20, choices=ACTION_CHOICES, db_index=True)
    resource_type = models.CharField(max_length=50, choices=RESOURCE_TYPE_CHOICES, db_index=True)
    resource_id = models.IntegerField(db_index=True, null=True, blank=True)
    description = models.TextField(help_text="Human-readable description of the action")

    ip_address = models.GenericIPAddressField(null=True, blank=True)
    user_agent = models.TextField(null=True, blank=True)

    metadata = models.JSONField(default=dict, blank=True, help_text="Additional context data")

    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = AuditLogQuerySet.as_manager()

    class Meta:
        verbose_name = "Audit Log"
        verbose_name_plural = "Audit Logs"
        ordering = ['-timestamp', '-id']
        indexes = [
            models.Index(fields=['owner', '-timestamp'], name='auditlog_owner_ts_idx'),
            models.Index(fields=['resource_type', 'resource_id'], name='auditlog_resource_idx'),
            models.Index(fields=['action', '-timestamp'], name='auditlog_action_ts_idx'),
        ]

    def __str__(self):
        username = self.user.username if self.user else 'System'
        return f"{username} - {self.action} - {self.resource_type} #{self.resource_id} - {self.timestamp}"

    def save(self, *args, **kwargs):
        """Only allow creation, not updates."""
        if self.pk is not None:
            raise PermissionDenied("Audit logs are immutable and cannot be modified after creation.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise PermissionDenied("Audit logs are immutable and cannot be deleted.")

    @property
    def user_display(self):
        if self.user:
            return self.user.get_full_name() or self.user.username
        return "System"
