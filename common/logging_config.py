"""
Logging configuration with request ID support
"""
import logging
import threading
import uuid

_local = threading.local()


def current_request_id():
    return getattr(_local, 'request_id', None)


class RequestIDFilter(logging.Filter):
    """
    Logging filter to add request ID to log records.
    Records logged outside a request (engine calls from a shell, tests) get 'N/A'.
    """
    def filter(self, record):
        request_id = getattr(record, 'request_id', None) or current_request_id()
        record.request_id = request_id or 'N/A'
        return True


class RequestIDMiddleware:
    """
    Middleware to generate and attach unique request ID to each request.
    Request ID is available in request.request_id and in all log messages.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.META.get('HTTP_X_REQUEST_ID') or str(uuid.uuid4())[:8]
        request.request_id = request_id
        _local.request_id = request_id
        try:
            response = self.get_response(request)
        finally:
            _local.request_id = None
        response['X-Request-ID'] = request_id
        return response

    def process_exception(self, request, exception):
        """Log exceptions with request ID"""
        request_id = getattr(request, 'request_id', 'N/A')
        logging.getLogger('django.request').error(
            f"Exception: {type(exception).__name__}: {exception}",
            exc_info=True,
            extra={'request_id': request_id}
        )
