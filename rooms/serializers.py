from rest_framework import serializers
from .models import Room, Bed


class BedSerializer(serializers.ModelSerializer):
    label = serializers.ReadOnlyField()
    occupant_id = serializers.SerializerMethodField()
    occupant_name = serializers.SerializerMethodField()
    move_in_date = serializers.ReadOnlyField()

    class Meta:
        model = Bed
        fields = ['id', 'slot_index', 'label', 'occupant_id', 'occupant_name', 'move_in_date']

    def get_occupant_id(self, obj):
        occupant = obj.occupant
        return occupant.id if occupant else None

    def get_occupant_name(self, obj):
        occupant = obj.occupant
        return occupant.name if occupant else None


class RoomSerializer(serializers.ModelSerializer):
    """Serializer for Room with its beds"""
    sharing_kind = serializers.ReadOnlyField()
    capacity = serializers.ReadOnlyField()
    occupied_beds = serializers.ReadOnlyField()
    vacant_beds = serializers.ReadOnlyField()
    beds = BedSerializer(many=True, read_only=True)

    class Meta:
        model = Room
        fields = [
            'id', 'property', 'room_type', 'room_number', 'gender_restriction', 'sharing_kind',
            'capacity', 'occupied_beds', 'vacant_beds', 'beds', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class RoomListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list view"""
    sharing_kind = serializers.ReadOnlyField()
    capacity = serializers.ReadOnlyField()

    class Meta:
        model = Room
        fields = ['id', 'property', 'room_type', 'room_number', 'gender_restriction', 'sharing_kind', 'capacity']


class RenameRoomSerializer(serializers.Serializer):
    room_number = serializers.CharField(allow_blank=True, trim_whitespace=False)


class GenderRestrictionSerializer(serializers.Serializer):
    gender = serializers.CharField(allow_blank=True)
