from rest_framework import viewsets, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from core.dto import PropertyDTO, RoomTypeDTO
from rooms.services import InventoryService
from occupancy.projection import OccupancyProjection
from audit.helpers import log_room_type_defined
from .access import get_accessible_properties
from .serializers import (
    PropertySerializer, PropertyListSerializer, RoomTypeSerializer, RoomTypeDefinitionSerializer,
)
from .services import PropertyService
from api.permissions import IsOwnerOrAdmin, IsPlatformAdmin


class PropertyViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Property management

    Access Control:
    - OWNER: their own properties
    - ADMIN: all properties, plus approve/reject
    """
    permission_classes = [IsAuthenticated, IsOwnerOrAdmin]
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['title', 'city']
    ordering_fields = ['title', 'created_at']
    ordering = ['title']
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_serializer_class(self):
        if self.action == 'list':
            return PropertyListSerializer
        return PropertySerializer

    def get_permissions(self):
        if self.action in ('approve', 'reject'):
            return [IsAuthenticated(), IsPlatformAdmin()]
        return super().get_permissions()

    def get_queryset(self):
        return get_accessible_properties(self.request.user).select_related('owner')

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        prop = PropertyService().create_property(request.user, PropertyDTO(**serializer.validated_data))
        return Response(PropertySerializer(prop).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, *args, **kwargs):
        prop = self.get_object()
        serializer = self.get_serializer(prop, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        prop = PropertyService().update_property(prop.id, **serializer.validated_data)
        return Response(PropertySerializer(prop).data)

    def destroy(self, request, *args, **kwargs):
        prop = self.get_object()
        PropertyService().delete_property(prop.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['post'], url_path='room-types')
    def room_types(self, request, pk=None):
        """Define a room type and provision its rooms and beds"""
        prop = self.get_object()
        serializer = RoomTypeDefinitionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        room_type = InventoryService().define_room_type(prop.id, RoomTypeDTO(**serializer.validated_data))
        log_room_type_defined(room_type, user=request.user, request=request)
        return Response(RoomTypeSerializer(room_type).data, status=status.HTTP_201_CREATED)

    @action(detail=True, methods=['get'])
    def occupancy(self, request, pk=None):
        prop = self.get_object()
        return Response(OccupancyProjection().property_occupancy(prop.id).as_dict())

    @action(detail=True, methods=['get'])
    def breakdown(self, request, pk=None):
        """Occupancy grouped by room type, with each room's figures"""
        prop = self.get_object()
        return Response({
            'property_id': prop.id,
            'occupancy': OccupancyProjection().property_occupancy(prop.id).as_dict(),
            'room_types': OccupancyProjection().property_breakdown(prop.id),
        })

    @action(detail=True, methods=['post'])
    def deactivate(self, request, pk=None):
        prop = self.get_object()
        prop = PropertyService().deactivate_property(prop.id)
        return Response(PropertySerializer(prop).data)

    @action(detail=True, methods=['post'])
    def approve(self, request, pk=None):
        prop = PropertyService().approve_property(self.get_object().id)
        return Response(PropertySerializer(prop).data)

    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        prop = PropertyService().reject_property(self.get_object().id)
        return Response(PropertySerializer(prop).data)
