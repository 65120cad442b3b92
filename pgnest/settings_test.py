"""
Settings for the test run (pytest-django).
"""
import os

os.environ.setdefault('DJANGO_SECRET_KEY', 'pgnest-test-secret-key')

from .settings import *  # noqa: E402,F401,F403

DEBUG = False

# File-backed so threads in transactional tests share one database
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'test_db.sqlite3',  # noqa: F405
        'OPTIONS': {'timeout': 20},
        'TEST': {'NAME': BASE_DIR / 'test_db.sqlite3'},  # noqa: F405
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

OCCUPANCY_CHECK_IN_GRACE_DAYS = 7
OCCUPANCY_CLAIM_RETRIES = 3
OCCUPANCY_LOCK_TIMEOUT = 5
