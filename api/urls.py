"""
API URLs for PGNest
"""
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from properties.views import PropertyViewSet
from rooms.views import RoomTypeViewSet, RoomViewSet
from tenants.views import TenantViewSet
from occupancy.views import AssignmentViewSet
from complaints.views import ComplaintViewSet
from audit.views import AuditLogViewSet

router = DefaultRouter()
router.register(r'properties', PropertyViewSet, basename='property')
router.register(r'room-types', RoomTypeViewSet, basename='roomtype')
router.register(r'rooms', RoomViewSet, basename='room')
router.register(r'tenants', TenantViewSet, basename='tenant')
router.register(r'assignments', AssignmentViewSet, basename='assignment')
router.register(r'complaints', ComplaintViewSet, basename='complaint')
router.register(r'audit', AuditLogViewSet, basename='auditlog')

urlpatterns = [
    # JWT Authentication
    path('auth/login/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('auth/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API routes
    path('', include(router.urls)),
]
