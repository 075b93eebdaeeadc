"""Error kinds raised by the stores and the matching engine.

The API layer turns these into HTTP responses; nothing below the API
knows about status codes.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    UNAVAILABLE = "UNAVAILABLE"


class ServiceError(Exception):
    """
    Base class for failures surfaced to API callers.

    Attributes:
        message: Human readable description
        kind: Which of the error kinds this is
        field: Offending input field, when the failure is tied to one
    """

    kind: ErrorKind = ErrorKind.UNAVAILABLE

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ValidationFailed(ServiceError):
    kind = ErrorKind.VALIDATION


class NotFound(ServiceError):
    kind = ErrorKind.NOT_FOUND


class Conflict(ServiceError):
    kind = ErrorKind.CONFLICT


class Unavailable(ServiceError):
    kind = ErrorKind.UNAVAILABLE
