from rest_framework import serializers
from .models import TenantAssignment


class TenantAssignmentSerializer(serializers.ModelSerializer):
    """Serializer for TenantAssignment (read only - writes go through the engine)"""
    tenant_name = serializers.CharField(source='tenant.name', read_only=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True)
    property_id = serializers.IntegerField(source='room.property_id', read_only=True)
    bed_label = serializers.CharField(source='bed.label', read_only=True)
    bed_slot = serializers.IntegerField(source='bed.slot_index', read_only=True)
    notice_status = serializers.ReadOnlyField()

    class Meta:
        model = TenantAssignment
        fields = [
            'id', 'tenant', 'tenant_name', 'property_id', 'room', 'room_number',
            'bed', 'bed_label', 'bed_slot', 'status', 'check_in_date', 'end_date', 'rent',
            'notice_date', 'expected_checkout_date', 'notice_reason', 'notice_status',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class AssignSerializer(serializers.Serializer):
    tenant_id = serializers.IntegerField()
    room_id = serializers.IntegerField()
    bed_slot = serializers.IntegerField(required=False, allow_null=True)
    check_in_date = serializers.DateField(required=False, allow_null=True)


class TransferSerializer(serializers.Serializer):
    tenant_id = serializers.IntegerField()
    room_id = serializers.IntegerField(help_text="Target room")
    bed_slot = serializers.IntegerField(required=False, allow_null=True)


class RemoveSerializer(serializers.Serializer):
    tenant_id = serializers.IntegerField()
    end_date = serializers.DateField(required=False, allow_null=True)


class NoticeSerializer(serializers.Serializer):
    tenant_id = serializers.IntegerField()
    notice_date = serializers.DateField(required=False, allow_null=True)
    reason = serializers.CharField(required=False, allow_blank=True, default='')
