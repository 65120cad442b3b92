"""
Audit Log Serializers
"""

from rest_framework import serializers
from audit.models import AuditLog


class AuditLogSerializer(serializers.ModelSerializer):
    """Read-only: entries are written by audit.helpers, never through the API."""

    performed_by = serializers.CharField(source='user_display', read_only=True)
    action_display = serializers.CharField(source='get_action_display', read_only=True)
    tenant_id = serializers.SerializerMethodField()
    room_id = serializers.SerializerMethodField()

    class Meta:
        model = AuditLog
        fields = [
            'id', 'owner', 'performed_by', 'action', 'action_display',
            'resource_type', 'resource_id', 'tenant_id', 'room_id',
            'description', 'metadata', 'timestamp',
        ]
        read_only_fields = fields

    def get_tenant_id(self, obj):
        return obj.metadata.get('tenant_id')

    def get_room_id(self, obj):
        return obj.metadata.get('room_id')
