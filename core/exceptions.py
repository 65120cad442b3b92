"""
Custom exceptions for the application.
Following domain-driven design principles with specific exception types.

Every exception carries a machine-readable ``code`` so the API boundary can
tell apart outcomes of the same kind (e.g. ROOM_FULL vs GENDER_MISMATCH).
"""


class BaseApplicationException(Exception):
    """Base exception for all application-specific exceptions"""
    default_message = "An application error occurred"
    default_code = "APPLICATION_ERROR"
    retryable = False

    def __init__(self, message=None, code=None, details=None):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseApplicationException):
    """Raised when input is malformed (bad sharing kind, non-positive counts)"""
    default_message = "Validation failed"
    default_code = "VALIDATION_ERROR"


class NotFoundError(BaseApplicationException):
    """Raised when a resource is not found or not in the expected state"""
    default_message = "Resource not found"
    default_code = "NOT_FOUND"

    def __init__(self, resource_type=None, resource_id=None, **kwargs):
        self.resource_type = resource_type
        self.resource_id = resource_id
        if 'message' not in kwargs and resource_type:
            kwargs['message'] = f"{resource_type} {resource_id} not found"
        super().__init__(**kwargs)


class PermissionDeniedError(BaseApplicationException):
    """Raised when user doesn't have permission"""
    default_message = "Permission denied"
    default_code = "PERMISSION_DENIED"


class BusinessLogicError(BaseApplicationException):
    """Raised when business rule is violated"""
    default_message = "Business rule violation"
    default_code = "BUSINESS_RULE_VIOLATION"


class ConflictError(BusinessLogicError):
    """Raised on state conflicts: tenant already assigned, gender mismatch, duplicate room number"""
    default_message = "Request conflicts with the current state"
    default_code = "CONFLICT"


class CapacityError(BusinessLogicError):
    """Raised when a room has no free bed left"""
    default_message = "Room is at full capacity"
    default_code = "ROOM_FULL"


class PreconditionError(BusinessLogicError):
    """Raised when an operation is not allowed in the resource's current state"""
    default_message = "Precondition failed"
    default_code = "PRECONDITION_FAILED"


class ConcurrencyConflict(BusinessLogicError):
    """Raised when another operation won the race for the same bed or lock"""
    default_message = "Resource is being modified by another request. Please retry."
    default_code = "CONCURRENCY_CONFLICT"
    retryable = True
