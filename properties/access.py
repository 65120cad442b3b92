"""
Property Access Control Helper Functions

Access Rules:
- ADMIN: Has access to ALL properties
- OWNER: Has access ONLY to properties they own
- TENANT: No management access (sees only their own assignment)
"""

from core.constants import UserRole
from properties.models import Property


def get_accessible_properties(user):
    """
    Get all properties the user may manage.

    Usage:
        properties = get_accessible_properties(request.user)
    """
    if not user or not user.is_authenticated:
        return Property.objects.none()

    if user.is_platform_admin:
        return Property.objects.all()

    if user.role == UserRole.OWNER:
        return Property.objects.filter(owner=user)

    return Property.objects.none()


def filter_by_accessible_properties(queryset, user, property_field='property'):
    """
    Filter any queryset down to rows whose property the user may manage.

    Usage:
        rooms = filter_by_accessible_properties(Room.objects.all(), request.user)
        beds = filter_by_accessible_properties(Bed.objects.all(), request.user, 'room__property')
    """
    if not user or not user.is_authenticated:
        return queryset.none()

    if user.is_platform_admin:
        return queryset

    if user.role == UserRole.OWNER:
        return queryset.filter(**{f'{property_field}__owner': user})

    return queryset.none()
