from rest_framework import serializers
from .models import Property, RoomType


class RoomTypeSerializer(serializers.ModelSerializer):
    beds_per_room = serializers.IntegerField(read_only=True)
    room_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = RoomType
        fields = [
            'id', 'property', 'sharing_kind', 'base_price', 'label',
            'beds_per_room', 'room_count', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'property', 'sharing_kind', 'created_at', 'updated_at']


class RoomTypeDefinitionSerializer(serializers.Serializer):
    """
    Input for provisioning a room type. Only shape is checked here;
    value rules (positive room count, non-negative price, collisions)
    belong to InventoryService.
    """
    sharing_kind = serializers.CharField()
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    room_count = serializers.IntegerField()
    label = serializers.CharField(required=False, allow_blank=True, default='')
    gender_restriction = serializers.CharField(required=False, allow_blank=True, default='')
    room_numbers = serializers.ListField(child=serializers.CharField(), required=False, default=list)


class PropertySerializer(serializers.ModelSerializer):
    """Serializer for Property"""
    owner_username = serializers.CharField(source='owner.username', read_only=True)
    room_types = RoomTypeSerializer(many=True, read_only=True)

    class Meta:
        model = Property
        fields = [
            'id', 'owner', 'owner_username', 'title', 'description',
            'address_line1', 'city', 'state', 'zip_code', 'notice_period_days',
            'status', 'room_types', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'owner', 'status', 'created_at', 'updated_at']


class PropertyListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""

    class Meta:
        model = Property
        fields = ['id', 'title', 'city', 'status']

