"""
Domain exceptions

Typed faults raised by filter evaluation and repositories. The use case
boundary turns them into failure responses; nothing below it catches them.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error categories for classification"""

    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    SYSTEM = "system"


class RentomaticError(Exception):
    """Base exception for Rentomatic faults"""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        category: ErrorCategory = ErrorCategory.SYSTEM,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.context = context or {}


class FilterValueError(RentomaticError, ValueError):
    """A filter value could not be coerced to its attribute's type"""

    def __init__(self, key: str, value: Any):
        super().__init__(
            f"Value {value!r} for key {key} is not valid",
            "FILTER_VALUE_ERROR",
            ErrorCategory.VALIDATION,
            {"key": key, "value": value},
        )
        self.key = key
        self.value = value


class ResourceNotFoundError(RentomaticError):
    """Requested resource does not exist"""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} {resource_id} not found",
            "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND,
            {"resource_type": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RepositoryUnavailableError(RentomaticError):
    """The storage behind a repository could not be reached"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(
            f"Repository {operation or 'operation'} failed: {message}",
            "REPOSITORY_UNAVAILABLE",
            ErrorCategory.DATABASE,
            {"operation": operation},
        )
        self.operation = operation


class FilterKeyError(RentomaticError, ValueError):
    """A filter key is not part of the grammar's allow-list"""

    def __init__(self, key: Any):
        super().__init__(
            f"Key {key} cannot be used",
            "FILTER_KEY_ERROR",
            ErrorCategory.VALIDATION,
            {"key": key},
        )
        self.key = key
