"""
Health Check Endpoints

- Liveness (is the app running?)
- Readiness (can the app reach its database and cache?)
"""

import time
import logging
from django.db import connection, DatabaseError
from django.core.cache import cache
from django.http import JsonResponse
from django.urls import path
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@require_GET
def health_check(request):
    """Returns 200 if the app is running."""
    return JsonResponse({
        'status': 'healthy',
        'timestamp': time.time(),
    })


@require_GET
def readiness_check(request):
    """Checks database and cache connectivity; 503 if either fails."""
    checks = {'database': False, 'cache': False}
    errors = []

    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
        checks['database'] = True
    except DatabaseError as e:
        errors.append(f'Database: {e}')
        logger.error(f'Health check - Database error: {e}')

    cache_key = 'health_check_test'
    cache.set(cache_key, 'ok', 10)
    if cache.get(cache_key) == 'ok':
        checks['cache'] = True
        cache.delete(cache_key)
    else:
        errors.append('Cache: Failed to read/write')
        logger.error('Health check - Cache read/write failed')

    all_healthy = all(checks.values())
    return JsonResponse({
        'status': 'ready' if all_healthy else 'not_ready',
        'timestamp': time.time(),
        'checks': checks,
        'errors': errors or None,
    }, status=200 if all_healthy else 503)


def get_health_urls():
    return [
        path('health/', health_check, name='health_check'),
        path('health/ready/', readiness_check, name='readiness_check'),
    ]
