"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ItemSpec:
    """Input: what the cashier rang up (item ID or name + quantity)."""

    query: str
    quantity: int


@dataclass(frozen=True)
class ItemDTO:
    """Output: one catalog row."""

    id: str
    name: str
    category: str
    quantity: int
    price: str  # formatted, e.g. "55.00"


@dataclass(frozen=True)
class CartLineDTO:
    item_id: str
    name: str
    category: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the order summary shown before cash is taken."""

    lines: list[CartLineDTO]
    subtotal: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a committed sale, ready for a receipt renderer."""

    lines: list[CartLineDTO]
    subtotal: str
    tendered: str
    change: str
    currency: str
    timestamp: str  # "YYYY-MM-DD HH:MM:SS"
    period: str


@dataclass(frozen=True)
class LedgerLineDTO:
    name: str
    quantity: int
    revenue: str


@dataclass(frozen=True)
class SalesReportDTO:
    period: str
    lines: list[LedgerLineDTO]
    total_quantity: int
    total_revenue: str
    currency: str
