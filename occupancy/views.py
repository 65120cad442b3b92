from rest_framework import viewsets, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from core.constants import UserRole
from core.exceptions import PermissionDeniedError
from rooms.models import Room
from tenants.models import Tenant
from .models import TenantAssignment
from .serializers import (
    TenantAssignmentSerializer, AssignSerializer, TransferSerializer, RemoveSerializer, NoticeSerializer,
)
from .services import AllocationEngine
from api.permissions import IsOwnerOrAdmin


class AssignmentViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Assignment ledger and allocation operations.

    Reading:
    - ADMIN: every assignment
    - OWNER: assignments in their properties
    - TENANT: their own assignments only

    Writing (assign/transfer/remove/notice) goes through the AllocationEngine;
    its exceptions are rendered by api.exceptions.exception_handler.
    """
    serializer_class = TenantAssignmentSerializer
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['tenant__name', 'room__room_number']
    ordering_fields = ['check_in_date', 'created_at']
    ordering = ['-check_in_date', '-id']

    def get_permissions(self):
        if self.action in ('list', 'retrieve'):
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsOwnerOrAdmin()]

    def get_queryset(self):
        user = self.request.user
        queryset = TenantAssignment.objects.select_related('tenant', 'room', 'room__property', 'bed', 'bed__room')

        if user.is_platform_admin:
            pass
        elif user.role == UserRole.OWNER:
            queryset = queryset.filter(room__property__owner=user)
        else:
            queryset = queryset.filter(tenant__user=user)

        for param, lookup in (('status', 'status'), ('room', 'room_id'), ('tenant', 'tenant_id')):
            value = self.request.query_params.get(param)
            if value:
                queryset = queryset.filter(**{lookup: value})
        return queryset

    @action(detail=False, methods=['post'])
    def assign(self, request):
        data = self._validated(AssignSerializer)
        self._check_scope(data['tenant_id'], data['room_id'])
        assignment = AllocationEngine().assign(
            data['tenant_id'],
            data['room_id'],
            bed_slot=data.get('bed_slot'),
            check_in_date=data.get('check_in_date'),
            performed_by=request.user,
        )
        return Response(self.get_serializer(assignment).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=['post'])
    def transfer(self, request):
        data = self._validated(TransferSerializer)
        self._check_scope(data['tenant_id'], data['room_id'])
        assignment = AllocationEngine().transfer(
            data['tenant_id'],
            data['room_id'],
            bed_slot=data.get('bed_slot'),
            performed_by=request.user,
        )
        return Response(self.get_serializer(assignment).data)

    @action(detail=False, methods=['post'])
    def remove(self, request):
        data = self._validated(RemoveSerializer)
        self._check_scope(data['tenant_id'])
        assignment = AllocationEngine().remove(
            data['tenant_id'],
            end_date=data.get('end_date'),
            performed_by=request.user,
        )
        return Response(self.get_serializer(assignment).data)

    @action(detail=False, methods=['post'])
    def notice(self, request):
        data = self._validated(NoticeSerializer)
        self._check_scope(data['tenant_id'])
        assignment = AllocationEngine().give_notice(
            data['tenant_id'],
            notice_date=data.get('notice_date'),
            reason=data.get('reason', ''),
        )
        return Response(self.get_serializer(assignment).data)

    def _validated(self, serializer_class):
        serializer = serializer_class(data=self.request.data)
        serializer.is_valid(raise_exception=True)
        return serializer.validated_data

    def _check_scope(self, tenant_id, room_id=None):
        """Owners may only move their own tenants into their own rooms. Unknown ids are left to the engine."""
        user = self.request.user
        if user.is_platform_admin:
            return
        tenant_owner = Tenant.objects.filter(id=tenant_id).values_list('owner_id', flat=True).first()
        if tenant_owner is not None and tenant_owner != user.id:
            raise PermissionDeniedError(
                message="You do not manage this tenant",
                details={"tenant_id": tenant_id}
            )
        if room_id is not None:
            room_owner = Room.objects.filter(id=room_id).values_list('property__owner_id', flat=True).first()
            if room_owner is not None and room_owner != user.id:
                raise PermissionDeniedError(
                    message="You do not manage this room",
                    details={"room_id": room_id}
                )
