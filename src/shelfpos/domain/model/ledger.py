"""LedgerEntry: cumulative monthly sales for one item name."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from shelfpos.domain.exceptions import ValidationError
from shelfpos.domain.model.cart import AggregatedLine
from shelfpos.domain.model.value_objects import Money

_PERIOD_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_period_key(period_key: str) -> str:
    if not _PERIOD_RE.match(period_key or ""):
        raise ValidationError(
            f"Invalid reporting period {period_key!r}, expected YYYY-MM"
        )
    return period_key


@dataclass(frozen=True)
class LedgerEntry:
    name: str
    quantity: int
    revenue: Money

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Ledger entry needs an item name")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError("Ledger quantity must be an integer")
        if self.quantity < 0:
            raise ValidationError("Ledger quantity cannot be negative")

    def plus(self, quantity: int, revenue: Money) -> LedgerEntry:
        return LedgerEntry(self.name, self.quantity + quantity, self.revenue + revenue)


def merge_lines(
    entries: dict[str, LedgerEntry],
    lines: Iterable[AggregatedLine],
) -> dict[str, LedgerEntry]:
    """Fold sold lines into the cumulative entries, keyed by item name.

    Returns a new mapping; *entries* is left as it was.
    """
    merged = dict(entries)
    for line in lines:
        existing = merged.get(line.name)
        if existing is None:
            merged[line.name] = LedgerEntry(line.name, line.quantity, line.line_total)
        else:
            merged[line.name] = existing.plus(line.quantity, line.line_total)
    return merged
