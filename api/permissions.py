"""
Role permissions - owners manage their own properties, admins moderate everything
"""
from rest_framework import permissions

from properties.models import Property


class IsOwnerOrAdmin(permissions.BasePermission):
    """
    Allow OWNER and ADMIN roles. An owner may only touch objects of
    their own properties, or tenants they onboarded.
    """

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        return request.user.is_owner or request.user.is_platform_admin

    def has_object_permission(self, request, view, obj):
        user = request.user
        if user.is_platform_admin:
            return True
        if isinstance(obj, Property):
            return obj.owner_id == user.id

        prop = getattr(obj, 'property', None)
        if prop is None and hasattr(obj, 'room'):
            prop = obj.room.property
        if prop is not None:
            return prop.owner_id == user.id

        # Tenant profiles
        return getattr(obj, 'owner_id', None) == user.id


class IsPlatformAdmin(permissions.BasePermission):
    """Moderation actions (approve/reject) are admin only"""

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_platform_admin)
