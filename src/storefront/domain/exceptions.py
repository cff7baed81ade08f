"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can catch them uniformly and display
user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated.

    ``errors`` maps field names to messages when the failure came from
    payload validation; it is empty for plain rule violations.
    """

    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors = dict(errors or {})


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidVariantError(ValidationError):
    """The variant label matches neither the primary color nor any option."""

    def __init__(self, variant: str, product_name: str) -> None:
        super().__init__(
            f"Variant '{variant}' does not exist for product '{product_name}'",
            {"variant": "Variant does not exist"},
        )
        self.variant = variant


class InsufficientStockError(ValidationError):
    """The resolved stock pool holds less than the requested amount."""

    def __init__(self, variant: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for variant '{variant}' "
            f"(need {requested}, have {available} available)"
        )
        self.variant = variant
        self.requested = requested
        self.available = available


class TransactionAbortedError(DomainException):
    """The unit of work could not commit; nothing was persisted."""
