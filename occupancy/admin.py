from django.contrib import admin
from .models import TenantAssignment


@admin.register(TenantAssignment)
class TenantAssignmentAdmin(admin.ModelAdmin):
    """
    Read-mostly view of the ledger. Creating or ending assignments here
    would bypass the allocation locks, so those fields are read only.
    """
    list_display = ['tenant', 'room', 'bed', 'status', 'check_in_date', 'end_date', 'rent', 'notice_date']
    list_filter = ['status', 'room__property']
    search_fields = ['tenant__name', 'room__room_number']
    date_hierarchy = 'check_in_date'
    readonly_fields = ['tenant', 'room', 'bed', 'status', 'check_in_date', 'end_date', 'rent', 'created_at', 'updated_at']

    def has_add_permission(self, request):
        return False
