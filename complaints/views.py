from rest_framework import viewsets, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from core.constants import UserRole, ComplaintStatus
from .models import Complaint
from .serializers import (
    ComplaintSerializer, ComplaintListSerializer, SubmitComplaintSerializer, ComplaintStatusSerializer,
)
from .services import ComplaintService
from api.permissions import IsOwnerOrAdmin


class ComplaintViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Complaint tracking

    - ADMIN: every complaint
    - OWNER: complaints raised in their properties; may update status
    - TENANT: their own complaints; may raise new ones
    """
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['subject', 'description', 'room__room_number', 'tenant__name']
    ordering_fields = ['created_at', 'priority', 'status']
    ordering = ['-created_at', '-id']

    def get_serializer_class(self):
        if self.action in ('list', 'open'):
            return ComplaintListSerializer
        return ComplaintSerializer

    def get_permissions(self):
        if self.action == 'update_status':
            return [IsAuthenticated(), IsOwnerOrAdmin()]
        return [IsAuthenticated()]

    def get_queryset(self):
        user = self.request.user
        queryset = Complaint.objects.select_related('tenant', 'property', 'room')

        if user.is_platform_admin:
            pass
        elif user.role == UserRole.OWNER:
            queryset = queryset.filter(property__owner=user)
        else:
            queryset = queryset.filter(tenant__user=user)

        for param in ('status', 'priority', 'category', 'property'):
            value = self.request.query_params.get(param)
            if value:
                queryset = queryset.filter(**{param: value})
        return queryset

    def create(self, request, *args, **kwargs):
        serializer = SubmitComplaintSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        complaint = ComplaintService().submit_complaint(request.user, **serializer.validated_data)
        return Response(ComplaintSerializer(complaint).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['post'], url_path='status')
    def update_status(self, request, pk=None):
        complaint = self.get_object()
        serializer = ComplaintStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        complaint = ComplaintService().update_status(complaint.id, **serializer.validated_data)
        return Response(ComplaintSerializer(complaint).data)

    @action(detail=False, methods=['get'])
    def open(self, request):
        """Complaints still pending or in progress"""
        complaints = self.filter_queryset(self.get_queryset()).filter(status__in=ComplaintStatus.OPEN)
        serializer = self.get_serializer(complaints, many=True)
        return Response(serializer.data)
