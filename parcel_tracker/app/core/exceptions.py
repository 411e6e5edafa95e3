"""
Error taxonomy for the Parcel Tracker.

Storage failures are the engine's own exceptions, re-exported under the
names callers are expected to handle. Service-level failures use the
AppException hierarchy with standardized error codes.
"""

from typing import Any, Dict

from sqlalchemy.exc import NoResultFound, SQLAlchemyError


# Engine failures (connectivity, constraint violation, malformed statement, I/O).
StorageError = SQLAlchemyError

# Single-row read matched nothing. Subclass of StorageError.
NotFound = NoResultFound


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""

    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when a parcel number does not match any stored row."""

    def __init__(self, number: int):
        super().__init__(resource="Parcel", resource_id=number)
        self.number = number
