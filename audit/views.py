"""
Audit Log API Views

Provides read-only access to audit logs with role-based filtering.
"""

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from audit.models import AuditLog
from audit.serializers import AuditLogSerializer


class AuditLogViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only ViewSet for audit logs.

    Access Rules:
    - ADMIN: all logs
    - OWNER: logs of their own properties
    - TENANT: none
    """

    serializer_class = AuditLogSerializer
    permission_classes = [IsAuthenticated]
    search_fields = ['description']
    ordering_fields = ['timestamp', 'action']

    def get_queryset(self):
        user = self.request.user
        queryset = AuditLog.objects.select_related('user')
        action_filter = self.request.query_params.get('action')
        if action_filter:
            queryset = queryset.for_action(action_filter)
        resource_type = self.request.query_params.get('resource_type')
        if resource_type:
            queryset = queryset.filter(resource_type=resource_type)
        if user.is_platform_admin:
            return queryset
        if user.is_owner:
            return queryset.for_owner(user)
        return AuditLog.objects.none()

    @action(detail=False, methods=['get'])
    def resource_trail(self, request):
        """
        Get audit trail for a specific resource.

        Example: GET /api/audit/resource_trail/?resource_type=Assignment&resource_id=12
        """
        resource_type = request.query_params.get('resource_type')
        resource_id = request.query_params.get('resource_id')

        if not resource_type or not resource_id:
            return Response(
                {'detail': 'Both resource_type and resource_id are required', 'code': 'VALIDATION_ERROR'},
                status=status.HTTP_400_BAD_REQUEST
            )

        queryset = self.get_queryset().for_resource(resource_type, resource_id)
        serializer = self.get_serializer(queryset, many=True)
        return Response({
            'resource_type': resource_type,
            'resource_id': resource_id,
            'audit_trail': serializer.data,
            'count': len(serializer.data)
        })
