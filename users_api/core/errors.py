"""Error Hierarchy — typed, categorized exceptions for every users API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the exact body the HTTP contract promises:
      {error: details} for validation, {user: null} for not-found,
      {error: "Internal Server Error"} for storage
    - StorageError never exposes the underlying cause to clients

Design Decisions:
    - Single hierarchy with UsersApiError base: one FastAPI handler catches all
    - Missing file and corrupt file collapse into the same StorageError
"""

from enum import Enum
from typing import Any

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"


class UsersApiError(Exception):
    """Base exception for all users API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(UsersApiError):
    """Update payload failed schema validation."""
    def __init__(self, details: list[dict[str, Any]]):
        super().__init__(
            f"Invalid user payload ({len(details)} problem(s))",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        return {"error": self.details}


class NotFoundError(UsersApiError):
    """No user with the requested identifier."""
    def __init__(self, user_id: str | int):
        super().__init__(
            f"User '{user_id}' not found",
            "USER_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, 404,
        )
        self.user_id = user_id

    def to_response(self) -> dict:
        return {"user": None}


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(UsersApiError):
    """Reading or writing the backing file failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation

    def to_response(self) -> dict:
        return {"error": INTERNAL_ERROR_MESSAGE}
