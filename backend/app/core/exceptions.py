"""
Service layer custom exceptions.

Every service exception carries an ``ErrorKind`` tag. Services only raise;
the HTTP layer is the single place where a kind becomes a status code.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Caller-visible error categories."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


class ServiceException(Exception):
    """Base exception for all service layer errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.service = service
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.service and self.operation:
            return f"[{self.service}.{self.operation}] {self.message}"
        return self.message


class BadRequestError(ServiceException):
    """Raised when caller input violates a validation rule."""

    kind = ErrorKind.BAD_REQUEST

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        validation_context = context or {}
        if field:
            validation_context["field"] = field
        if value is not None:
            validation_context["value"] = str(value)

        super().__init__(
            message=message,
            service=service,
            operation=operation,
            context=validation_context,
        )
        self.field = field


class NotFoundError(ServiceException):
    """Raised when an id-based lookup finds no record."""

    kind = ErrorKind.NOT_FOUND


class DatabaseError(ServiceException):
    """Exception raised for database-related errors in services."""

    kind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"Database error: {message}",
            service=service,
            operation=operation,
            context=context,
            original_error=original_error,
        )
