"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


# --- Cart / checkout ---------------------------------------------------------


class InvalidQuantity(ValidationError):
    """Requested quantity is not positive or exceeds the stock on hand."""


class EmptyCart(ValidationError):
    """Checkout was attempted with nothing in the cart."""


class InsufficientTender(ValidationError):
    """The cash offered does not cover the subtotal."""


class InsufficientStock(ValidationError):
    """Committing the sale would drive an item's stock below zero."""


class ItemMissing(EntityNotFoundError):
    """An item in the cart no longer exists in the catalog."""


# --- Persistence -------------------------------------------------------------


class MalformedRecord(DomainException):
    """A persisted record could not be decoded.

    Raised per line by the decoders; repositories collect these into a
    ``LoadReport`` instead of aborting the whole load.
    """

    def __init__(self, line_number: int, raw: str, reason: str) -> None:
        super().__init__(f"line {line_number}: {reason} ({raw!r})")
        self.line_number = line_number
        self.raw = raw
        self.reason = reason


class StorageIOFailure(DomainException):
    """Reading or writing a data file failed."""
