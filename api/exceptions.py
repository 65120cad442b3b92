"""
Translate application exceptions into API responses.

Body shape for every domain error: {"detail": ..., "code": ..., "details": {...}}
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from core.exceptions import (
    BaseApplicationException, ValidationError, NotFoundError, PermissionDeniedError,
    ConflictError, CapacityError, PreconditionError, ConcurrencyConflict,
)

logger = logging.getLogger(__name__)

STATUS_BY_EXCEPTION = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (CapacityError, status.HTTP_409_CONFLICT),
    (PreconditionError, status.HTTP_409_CONFLICT),
    (ConcurrencyConflict, status.HTTP_409_CONFLICT),
]


def status_for(exc):
    for exc_class, status_code in STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def exception_handler(exc, context):
    """DRF EXCEPTION_HANDLER: application exceptions first, then DRF's own handling"""
    if isinstance(exc, BaseApplicationException):
        status_code = status_for(exc)
        view = context.get('view')
        logger.warning(
            f"{exc.code} in {view.__class__.__name__ if view else 'unknown view'}: {exc.message}"
        )
        response = Response(
            {'detail': exc.message, 'code': exc.code, 'details': exc.details},
            status=status_code,
        )
        if exc.retryable:
            response['Retry-After'] = '1'
        return response

    return drf_exception_handler(exc, context)
