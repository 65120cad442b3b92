"""
ASGI config for pgnest project.

The allocation engine is synchronous; Django runs sync views in a thread
pool under ASGI, so requests still go through the same locks.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'pgnest.settings')

application = get_asgi_application()
