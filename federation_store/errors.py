from typing import Any


class StoreError(Exception):
    """Base class for every error raised by the store adapter."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidArgument(StoreError, ValueError):
    """Caller passed an empty namespace/key, a bad expiry or an unstorable value."""


class DeserializationError(StoreError):
    """A stored payload could not be decoded back into a value."""


class StoreUnavailable(StoreError):
    """The backing store could not be reached or rejected the operation."""
