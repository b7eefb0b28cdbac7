import enum
from typing import Any, Mapping, Optional


class ErrorKind(str, enum.Enum):
    """What went wrong, independent of which route noticed it."""

    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    VALIDATION = "validation"
    CONNECTIVITY = "connectivity"


class AppError(Exception):
    """Base class for errors the HTTP layer knows how to render.

    Attributes:
        message: human-readable message, returned verbatim to the client
        kind: ErrorKind used by the exception handler to pick a status code
        details: optional mapping with extra context, logged but not returned
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        kind: Optional[ErrorKind] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind
        self.details = details

    def to_dict(self) -> dict:
        return {"message": self.message}

    def __str__(self) -> str:
        return self.message


class NotFoundError(AppError):
    """Raised when no document matches the requested id."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "Food not found", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details=details)


class ServiceValidationError(AppError):
    """Raised when the request itself is unusable, before the store is called."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, details=details)


class StoreError(AppError):
    """Raised by the repository layer when a driver call fails.

    kind is VALIDATION when the store rejected the data or id, CONNECTIVITY
    when the store could not be reached or failed for another reason.
    """


class StoreConnectionError(Exception):
    """Raised when the store cannot be reached at startup. Not rendered over HTTP."""
