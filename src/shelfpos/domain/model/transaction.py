"""Transaction: the settled result of one checkout."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from shelfpos.domain.model.cart import AggregatedLine
from shelfpos.domain.model.value_objects import Money


def period_key_for(moment: datetime) -> str:
    """Reporting period label (calendar month), e.g. ``2024-03``."""
    return moment.strftime("%Y-%m")


@dataclass(frozen=True)
class Transaction:
    """Committed sale handed to the receipt renderers.

    Only the transaction engine builds these, and only after stock has
    been deducted and the sales ledger merged.
    """

    lines: tuple[AggregatedLine, ...]
    subtotal: Money
    tendered: Money
    change: Money
    timestamp: datetime

    @property
    def period_key(self) -> str:
        return period_key_for(self.timestamp)

    @property
    def units(self) -> int:
        return sum(line.quantity for line in self.lines)
