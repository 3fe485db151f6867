"""Application error taxonomy for Workboard.

Every error raised by the service layer is an ``AppError`` whose ``kind``
attribute identifies which of a fixed set of failure categories it belongs
to. The HTTP layer translates kinds to status codes; nothing downstream
inspects error attributes structurally.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    """Closed set of error categories."""
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    BUSINESS_RULE = "business_rule"
    RATE_LIMITED = "rate_limited"
    INTERNAL = "internal"


class AppError(Exception):
    """Base class for all application errors."""

    kind: ErrorKind = ErrorKind.INTERNAL
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Render the error as the ``error`` member of a response envelope."""
        data: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            data["details"] = self.details
        return data

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value}, message={self.message!r})"


class ValidationError(AppError):
    """Malformed or out-of-range input supplied by the caller."""

    kind = ErrorKind.VALIDATION
    code = "VALIDATION_ERROR"


class UnauthorizedError(AppError):
    """Caller could not be authenticated."""

    kind = ErrorKind.UNAUTHORIZED
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Unauthorized", details: Optional[Any] = None):
        super().__init__(message, details)


class TokenError(UnauthorizedError):
    """Bearer token missing, malformed, or expired."""

    code = "TOKEN_ERROR"

    def __init__(self, message: str = "Invalid or expired token", details: Optional[Any] = None):
        super().__init__(message, details)


class ForbiddenError(AppError):
    """Caller is authenticated but lacks access to the resource."""

    kind = ErrorKind.FORBIDDEN
    code = "FORBIDDEN"

    def __init__(self, message: str = "Forbidden", details: Optional[Any] = None):
        super().__init__(message, details)


class NotFoundError(AppError):
    """Referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, resource: str, details: Optional[Any] = None):
        super().__init__(f"{resource} not found", details)
        self.resource = resource


class ConflictError(AppError):
    """Request collides with the current state of the stored entity."""

    kind = ErrorKind.CONFLICT
    code = "CONFLICT"


class BusinessLogicError(AppError):
    """Well-formed, authorized request that breaks a domain rule."""

    kind = ErrorKind.BUSINESS_RULE
    code = "BUSINESS_LOGIC_ERROR"


class RateLimitError(AppError):
    """Client sent more requests than its window allows."""

    kind = ErrorKind.RATE_LIMITED
    code = "RATE_LIMIT_EXCEEDED"

    def __init__(
        self,
        message: str = "Too many API requests, please try again later",
        details: Optional[Any] = None,
    ):
        super().__init__(message, details)


class PersistenceError(AppError):
    """Storage failure. The message is safe to show to callers."""

    kind = ErrorKind.INTERNAL
    code = "DATABASE_ERROR"
