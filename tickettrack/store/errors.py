"""
Store error taxonomy.

Every backend translates its own failures (OSError, JSON errors,
httpx errors) into one of these.
"""


class StoreError(Exception):
    """Base class for all persistence failures."""


class StoreConnectionError(StoreError):
    """Backend unreachable, or a read returned a malformed or non-success response."""


class StoreWriteError(StoreError):
    """An insert, delete or clear could not be durably persisted."""


class UnsupportedOperationError(StoreError):
    """The active backend has no implementation for the requested operation."""

    def __init__(self, operation: str, backend: str):
        self.operation = operation
        self.backend = backend
        super().__init__(f"'{operation}' is not supported by the {backend} backend")
