"""
Scoping filters - users only see rows of properties they may manage
"""
from rest_framework import filters

from properties.access import filter_by_accessible_properties


class AccessiblePropertyFilterBackend(filters.BaseFilterBackend):
    """
    Filter queryset to rows whose property the user may manage.
    Views name the lookup to the property with `property_field`
    (default 'property').
    """

    def filter_queryset(self, request, queryset, view):
        property_field = getattr(view, 'property_field', 'property')
        return filter_by_accessible_properties(queryset, request.user, property_field)
