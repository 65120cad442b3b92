from django.contrib import admin
from .models import Property, RoomType


class RoomTypeInline(admin.TabularInline):
    model = RoomType
    extra = 0
    fields = ['sharing_kind', 'base_price', 'label']
    readonly_fields = ['sharing_kind']


@admin.register(Property)
class PropertyAdmin(admin.ModelAdmin):
    list_display = ['title', 'owner', 'city', 'status', 'notice_period_days', 'created_at']
    list_filter = ['status', 'city']
    search_fields = ['title', 'city', 'owner__username']
    raw_id_fields = ['owner']
    inlines = [RoomTypeInline]


@admin.register(RoomType)
class RoomTypeAdmin(admin.ModelAdmin):
    list_display = ['__str__', 'sharing_kind', 'base_price', 'room_count']
    list_filter = ['sharing_kind']
    search_fields = ['property__title', 'label']
