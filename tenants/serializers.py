from rest_framework import serializers
from .models import Tenant


class TenantSerializer(serializers.ModelSerializer):
    """Serializer for Tenant"""
    current_location = serializers.SerializerMethodField()

    class Meta:
        model = Tenant
        fields = [
            'id', 'owner', 'user', 'name', 'phone', 'email', 'gender',
            'occupation', 'emergency_contact', 'current_location',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'owner', 'user', 'created_at', 'updated_at']

    def get_current_location(self, obj):
        assignment = obj.current_assignment
        if assignment:
            return assignment.location
        return None


class TenantListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    is_assigned = serializers.SerializerMethodField()

    class Meta:
        model = Tenant
        fields = ['id', 'name', 'phone', 'email', 'gender', 'is_assigned']

    def get_is_assigned(self, obj):
        return obj.current_assignment is not None
