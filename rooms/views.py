from rest_framework import viewsets, mixins, status, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from properties.models import RoomType
from properties.serializers import RoomTypeSerializer
from occupancy.projection import OccupancyProjection
from audit.helpers import log_room_deleted
from .models import Room
from .serializers import RoomSerializer, RoomListSerializer, RenameRoomSerializer, GenderRestrictionSerializer
from .services import InventoryService
from api.filters import AccessiblePropertyFilterBackend
from api.permissions import IsOwnerOrAdmin


class RoomTypeViewSet(mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      mixins.UpdateModelMixin,
                      viewsets.GenericViewSet):
    """Room type listing and price/label edits. Creation goes through /properties/{id}/room-types/."""
    permission_classes = [IsAuthenticated, IsOwnerOrAdmin]
    filter_backends = [AccessiblePropertyFilterBackend, filters.OrderingFilter]
    serializer_class = RoomTypeSerializer
    ordering = ['property', 'sharing_kind', 'id']
    http_method_names = ['get', 'patch', 'head', 'options']

    def get_queryset(self):
        queryset = RoomType.objects.select_related('property')
        property_id = self.request.query_params.get('property')
        if property_id:
            queryset = queryset.filter(property_id=property_id)
        return queryset

    def partial_update(self, request, *args, **kwargs):
        room_type = self.get_object()
        room_type = InventoryService().update_room_type(
            room_type.id,
            base_price=request.data.get('base_price'),
            label=request.data.get('label'),
        )
        return Response(self.get_serializer(room_type).data)

    @action(detail=True, methods=['get'])
    def occupancy(self, request, pk=None):
        room_type = self.get_object()
        return Response(OccupancyProjection().room_type_occupancy(room_type.id).as_dict())


class RoomViewSet(mixins.ListModelMixin,
                  mixins.RetrieveModelMixin,
                  mixins.DestroyModelMixin,
                  viewsets.GenericViewSet):
    """
    Rooms and their beds.
    Renames, gender restriction and deletion go through InventoryService.
    """
    permission_classes = [IsAuthenticated, IsOwnerOrAdmin]
    filter_backends = [AccessiblePropertyFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['room_number']
    ordering_fields = ['room_number', 'created_at']
    ordering = ['property', 'room_number']
    http_method_names = ['get', 'post', 'delete', 'head', 'options']

    def get_serializer_class(self):
        if self.action in ('list', 'available'):
            return RoomListSerializer
        return RoomSerializer

    def get_queryset(self):
        queryset = Room.objects.select_related('property', 'room_type').prefetch_related('beds')
        for param, lookup in (('property', 'property_id'), ('room_type', 'room_type_id')):
            value = self.request.query_params.get(param)
            if value:
                queryset = queryset.filter(**{lookup: value})
        return queryset

    def destroy(self, request, *args, **kwargs):
        room = self.get_object()
        InventoryService().delete_room(room.id)
        log_room_deleted(room, user=request.user, request=request)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=['post'])
    def rename(self, request, pk=None):
        room = self.get_object()
        serializer = RenameRoomSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        room = InventoryService().rename_room(room.id, serializer.validated_data['room_number'])
        return Response(RoomSerializer(room).data)

    @action(detail=True, methods=['post'])
    def gender(self, request, pk=None):
        room = self.get_object()
        serializer = GenderRestrictionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        room = InventoryService().set_gender_restriction(room.id, serializer.validated_data['gender'])
        return Response(RoomSerializer(room).data)

    @action(detail=True, methods=['get'])
    def occupancy(self, request, pk=None):
        room = self.get_object()
        return Response(OccupancyProjection().room_occupancy(room.id).as_dict())

    @action(detail=False, methods=['get'])
    def available(self, request):
        """Rooms with a free bed in the caller's active properties"""
        rooms = OccupancyProjection().available_rooms(request.user)
        data = [
            dict(RoomListSerializer(room).data, occupied=room.occupied, available=room.capacity - room.occupied)
            for room in rooms
        ]
        return Response(data)
