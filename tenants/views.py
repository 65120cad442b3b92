from rest_framework import viewsets, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from core.constants import AssignmentStatus
from .models import Tenant
from .serializers import TenantSerializer, TenantListSerializer
from .services import TenantService
from api.permissions import IsOwnerOrAdmin


class TenantViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Tenant management
    Owners see the tenants they onboarded; admins see all
    """
    permission_classes = [IsAuthenticated, IsOwnerOrAdmin]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'phone', 'email']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    def get_serializer_class(self):
        if self.action in ('list', 'available'):
            return TenantListSerializer
        return TenantSerializer

    def get_queryset(self):
        user = self.request.user
        queryset = Tenant.objects.select_related('owner')
        if user.is_platform_admin:
            return queryset
        return queryset.filter(owner=user)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tenant = TenantService().create_tenant(request.user, **serializer.validated_data)
        return Response(TenantSerializer(tenant).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):
        tenant = self.get_object()
        serializer = self.get_serializer(tenant, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        tenant = TenantService().update_tenant(tenant.id, **serializer.validated_data)
        return Response(TenantSerializer(tenant).data)

    @action(detail=False, methods=['get'])
    def available(self, request):
        """Tenants without an active assignment, ready to be placed"""
        tenants = self.filter_queryset(self.get_queryset()).exclude(assignments__status=AssignmentStatus.ACTIVE)
        serializer = self.get_serializer(tenants, many=True)
        return Response(serializer.data)

    @action(detail=True, methods=['get'])
    def assignment(self, request, pk=None):
        """The tenant's current assignment, or 404 if unassigned"""
        from occupancy.serializers import TenantAssignmentSerializer

        tenant = self.get_object()
        current = tenant.current_assignment
        if not current:
            return Response(
                {'detail': f'Tenant {tenant.id} has no active assignment', 'code': 'NO_ACTIVE_ASSIGNMENT'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(TenantAssignmentSerializer(current).data)
