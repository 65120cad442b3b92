from django.contrib import admin
from .models import Room, Bed


class BedInline(admin.TabularInline):
    model = Bed
    extra = 0
    fields = ['slot_index', 'label', 'occupant']
    readonly_fields = ['slot_index', 'label', 'occupant']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Room)
class RoomAdmin(admin.ModelAdmin):
    """Bed slots are fixed by the room type, so they are shown read only"""
    list_display = ['room_number', 'property', 'room_type', 'gender_restriction', 'capacity', 'occupied_beds']
    list_filter = ['gender_restriction', 'room_type__sharing_kind']
    search_fields = ['room_number', 'property__title']
    readonly_fields = ['property', 'room_type']
    inlines = [BedInline]
