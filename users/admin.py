from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    User management - Admins, PG Owners and Tenants.

    Owners onboard tenants and manage their properties through the API.
    A tenant user may be linked to a Tenant profile so they can see
    their own assignment.
    """
    list_display = ['username', 'email', 'role', 'gender', 'is_active', 'is_staff', 'date_joined']
    list_filter = ['role', 'gender', 'is_active', 'is_staff']
    search_fields = ['username', 'email', 'phone']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Role & Profile', {
            'fields': ('role', 'phone', 'gender'),
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Role & Profile', {
            'fields': ('role', 'phone', 'gender'),
        }),
    )
