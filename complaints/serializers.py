from rest_framework import serializers
from core.constants import ComplaintStatus, ComplaintCategory, ComplaintPriority
from .models import Complaint


class ComplaintSerializer(serializers.ModelSerializer):
    """Serializer for Complaint"""
    tenant_name = serializers.CharField(source='tenant.name', read_only=True)
    property_title = serializers.CharField(source='property.title', read_only=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True, allow_null=True)

    class Meta:
        model = Complaint
        fields = [
            'id', 'tenant', 'tenant_name', 'property', 'property_title', 'room', 'room_number',
            'subject', 'description', 'category', 'priority', 'status',
            'assigned_to', 'notes', 'resolved_date', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ComplaintListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    tenant_name = serializers.CharField(source='tenant.name', read_only=True)
    property_title = serializers.CharField(source='property.title', read_only=True)
    room_number = serializers.CharField(source='room.room_number', read_only=True, allow_null=True)

    class Meta:
        model = Complaint
        fields = [
            'id', 'property_title', 'room_number', 'tenant_name',
            'subject', 'category', 'priority', 'status', 'created_at'
        ]


class SubmitComplaintSerializer(serializers.Serializer):
    subject = serializers.CharField(max_length=100)
    description = serializers.CharField()
    category = serializers.ChoiceField(choices=ComplaintCategory.CHOICES)
    priority = serializers.ChoiceField(choices=ComplaintPriority.CHOICES, default=ComplaintPriority.LOW)
    tenant_id = serializers.IntegerField(required=False)


class ComplaintStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ComplaintStatus.CHOICES)
    notes = serializers.CharField(required=False, allow_blank=True)
    assigned_to = serializers.CharField(required=False, allow_blank=True, max_length=255)
