from django.contrib import admin
from .models import Tenant


@admin.register(Tenant)
class TenantAdmin(admin.ModelAdmin):
    list_display = ['name', 'phone', 'email', 'gender', 'owner', 'current_room', 'created_at']
    list_filter = ['gender', 'owner']
    search_fields = ['name', 'phone', 'email']
    raw_id_fields = ['owner', 'user']
    readonly_fields = ['current_room']
