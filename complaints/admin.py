from django.contrib import admin
from .models import Complaint


@admin.register(Complaint)
class ComplaintAdmin(admin.ModelAdmin):
    list_display = ['subject', 'tenant', 'property', 'room', 'category', 'priority', 'status', 'created_at']
    list_filter = ['status', 'priority', 'category']
    search_fields = ['subject', 'description', 'tenant__name', 'room__room_number']
    raw_id_fields = ['tenant', 'property', 'room']
    readonly_fields = ['resolved_date', 'created_at', 'updated_at']
