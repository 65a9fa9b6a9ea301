"""
Custom Exceptions for the Hostel Allocation Application

This module defines the exception classes raised by repositories and
services. Each exception carries the HTTP status it maps to at the
request boundary.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # Business logic errors
    INSUFFICIENT_CAPACITY = "INSUFFICIENT_CAPACITY"
    ALREADY_ALLOCATED = "ALREADY_ALLOCATED"

    # Entity specific errors
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    ALLOCATION_NOT_FOUND = "ALLOCATION_NOT_FOUND"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Validation
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when a required field is missing or malformed"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, 400)


# ========================================
# Resource Not Found
# ========================================

class ResourceNotFoundError(BaseAppException):
    """Exception raised when a referenced id does not exist"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id is not None:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, error_code, details, 404)


class StudentNotFoundError(ResourceNotFoundError):
    """Exception raised when a student is not found"""

    def __init__(self, student_id: Optional[Any] = None):
        super().__init__("Student", student_id, error_code=ErrorCode.STUDENT_NOT_FOUND)


class RoomNotFoundError(ResourceNotFoundError):
    """Exception raised when a room is not found"""

    def __init__(self, room_id: Optional[Any] = None):
        super().__init__("Room", room_id, error_code=ErrorCode.ROOM_NOT_FOUND)


class AllocationNotFoundError(ResourceNotFoundError):
    """Exception raised when an allocation is not found"""

    def __init__(self, allocation_id: Optional[Any] = None):
        super().__init__("Allocation", allocation_id, error_code=ErrorCode.ALLOCATION_NOT_FOUND)


# ========================================
# Conflicts
# ========================================

class ConflictError(BaseAppException):
    """Exception raised when a write would violate a uniqueness rule"""

    def __init__(
        self,
        message: str = "Conflicting entry",
        error_code: ErrorCode = ErrorCode.DUPLICATE_ENTRY,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details, 400)


class DuplicateEntryError(ConflictError):
    """Exception raised when trying to create a duplicate entry"""

    def __init__(
        self,
        message: str = "Duplicate entry",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        table: Optional[str] = None
    ):
        details = {
            "field": field,
            "value": value,
            "table": table
        }
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, details)


class StudentAlreadyAllocatedError(ConflictError):
    """Exception raised when a student already holds an allocation"""

    def __init__(self, student_id: Any, room_id: Optional[Any] = None):
        details = {"student_id": student_id}
        if room_id is not None:
            details["room_id"] = room_id
        super().__init__(
            f"Student {student_id} already has a room allocated",
            ErrorCode.ALREADY_ALLOCATED,
            details,
        )


# ========================================
# Business Logic
# ========================================

class CapacityExceededError(BaseAppException):
    """Exception raised when a room is full at allocation time"""

    def __init__(
        self,
        room_id: Optional[Any] = None,
        capacity: Optional[int] = None,
        occupancy: Optional[int] = None,
        message: str = "Room full",
    ):
        details = {
            "room_id": room_id,
            "capacity": capacity,
            "occupancy": occupancy
        }
        super().__init__(message, ErrorCode.INSUFFICIENT_CAPACITY, details, 400)


# ========================================
# Database
# ========================================

class DatabaseError(BaseAppException):
    """Exception raised when database operations fail"""

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        status_code: int = 500
    ):
        details = {
            "operation": operation,
            "table": table
        }
        super().__init__(message, error_code, details, status_code)


class StoreUnavailableError(DatabaseError):
    """Exception raised when the persistence layer cannot be reached"""

    def __init__(self, message: str = "Database connection failed", operation: Optional[str] = None):
        super().__init__(
            message,
            operation=operation,
            error_code=ErrorCode.CONNECTION_ERROR,
            status_code=503
        )


# ========================================
# Utility Functions
# ========================================

def handle_database_exception(exc: SQLAlchemyError, operation: Optional[str] = None,
                              table: Optional[str] = None) -> BaseAppException:
    """Convert database exceptions to application exceptions"""
    if isinstance(exc, IntegrityError):
        return DuplicateEntryError(f"Duplicate entry in {table or 'table'}", table=table)
    if isinstance(exc, OperationalError):
        return StoreUnavailableError(f"Database unavailable during {operation or 'operation'}", operation)
    return DatabaseError(f"Database error: {exc.__class__.__name__}", operation=operation, table=table)


def field_errors_from(errors: Iterable[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Group pydantic error entries by dotted field location."""
    field_errors: Dict[str, List[str]] = {}
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        field_errors.setdefault(location or "body", []).append(error.get("msg", "Invalid value"))
    return field_errors


def create_validation_error(field_errors: Dict[str, List[str]]) -> ValidationError:
    """Create a validation error with field-specific errors"""
    total_errors = sum(len(errors) for errors in field_errors.values())
    fields = ", ".join(sorted(field_errors))
    message = f"Validation failed with {total_errors} error(s): {fields}"
    return ValidationError(message, field_errors)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'ValidationError',
    'ResourceNotFoundError',
    'StudentNotFoundError',
    'RoomNotFoundError',
    'AllocationNotFoundError',
    'ConflictError',
    'DuplicateEntryError',
    'StudentAlreadyAllocatedError',
    'CapacityExceededError',
    'DatabaseError',
    'StoreUnavailableError',
    'handle_database_exception',
    'field_errors_from',
    'create_validation_error',
]
