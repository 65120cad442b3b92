"""
URL configuration for pgnest project.
"""
from django.contrib import admin
from django.urls import path, include

from common.health import get_health_urls

admin.site.site_header = "PGNest - Admin Panel"
admin.site.site_title = "PGNest Admin"
admin.site.index_title = "Property & Occupancy Administration"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('api.urls')),
]

# Health check endpoints (for load balancers, monitoring)
urlpatterns += get_health_urls()
