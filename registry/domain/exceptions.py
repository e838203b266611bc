"""Domain exceptions for the registry service.

Business outcomes (rejected input, conflicts, absent records) are returned
from the application services as ordinary values. These exceptions are
raised by the presentation layer when it turns those values into HTTP
responses, and by infrastructure when a collaborator is unusable. Exception
handlers map them to HTTP responses.
"""

from typing import Any


class RegistryException(Exception):
    """Base exception for all registry errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RegistryException):
    """Raised when a record fails field-level validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[str] | None = None,
    ) -> None:
        """Initialize with message, optional field name and violation list.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
            errors: Optional list of individual rule violations.
        """
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if errors:
            details["errors"] = list(errors)
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(RegistryException):
    """Raised when a requested record is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'book', 'player').
            resource_id: The key that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(RegistryException):
    """Raised when a uniqueness constraint would be or was violated."""

    def __init__(
        self, resource_type: str, field: str, value: str | int | None
    ) -> None:
        """Initialize with the resource type and the duplicated attribute.

        Args:
            resource_type: Type of resource (e.g. 'book', 'player').
            field: Unique attribute that collided (e.g. 'isbn', 'squad_number').
            value: The duplicated value.
        """
        super().__init__(
            f"{resource_type} with {field} {value!r} already exists",
            "CONFLICT",
            {"resource_type": resource_type, "field": field, "value": value},
        )


class CacheUnavailableException(RegistryException):
    """Raised when the cache backend cannot serve a request (after one reconnect)."""

    def __init__(self, operation: str, key: str | None = None) -> None:
        """Initialize with the failed operation and optional key.

        Args:
            operation: Cache operation that failed (e.g. 'get', 'delete').
            key: Cache key or pattern involved, when known.
        """
        details: dict[str, Any] = {"operation": operation}
        if key is not None:
            details["key"] = key
        super().__init__(
            f"Cache unavailable during {operation}",
            "CACHE_UNAVAILABLE",
            details,
        )
