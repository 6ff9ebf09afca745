"""
Exceptions raised by the AudRead store.

All store errors inherit from StoreError, which is a RuntimeError so that
callers written against the fail-fast repositories keep working.
A missing record is never an exception: lookups return None or empty results.
"""

from typing import Any, Dict, Optional


class StoreError(RuntimeError):
    """
    Base exception for storage failures.

    Attributes:
        message: Human-readable error message.
        details: Additional context (operation, table, key...).
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StoreUnavailable(StoreError):
    """
    The database could not be opened or its schema could not be applied.

    Fatal for the lifetime of the StoreHandle that raised it: the handle
    does not retry and every later call raises again.
    """


class TransactionFailed(StoreError):
    """A single operation's transaction aborted and was rolled back."""

    def __init__(self, operation: str, cause: Exception):
        super().__init__(
            f"Transaction failed during {operation}: {cause}",
            details={"operation": operation},
        )
        self.operation = operation
        self.cause = cause
