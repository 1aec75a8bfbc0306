"""Domain service: Sales Ledger.

Keeps the cumulative per-item sales of each calendar month.  Merging is
computed in memory and the whole period table is then rewritten.  Lines
that could not be read are written back unchanged after the entries, so
a merge never drops recorded sales.

Merging is *not* idempotent: replaying the same transaction counts it
twice.  The transaction engine is the only caller and merges each
committed checkout exactly once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from shelfpos.domain.model.cart import AggregatedLine
from shelfpos.domain.model.ledger import LedgerEntry, merge_lines, validate_period_key
from shelfpos.domain.repository.ledger_repository import LedgerRepository
from shelfpos.domain.repository.load_report import LoadReport

logger = logging.getLogger(__name__)


class SalesLedger:

    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    def entries(self, period_key: str) -> dict[str, LedgerEntry]:
        return _by_name(self._load(period_key).records)

    def merge(
        self,
        period_key: str,
        lines: Iterable[AggregatedLine],
    ) -> dict[str, LedgerEntry]:
        """Add *lines* to the period's totals and persist the result."""
        report = self._load(period_key)
        merged = merge_lines(_by_name(report.records), lines)
        self._ledger_repo.save(
            period_key,
            merged.values(),
            unreadable=[record.raw for record in report.rejected],
        )
        logger.debug("Ledger %s now holds %d item(s)", period_key, len(merged))
        return merged

    def _load(self, period_key: str) -> LoadReport[LedgerEntry]:
        report = self._ledger_repo.load(validate_period_key(period_key))
        if report.rejected:
            logger.info("Ledger %s loaded with %d record(s) skipped", period_key, len(report.rejected))
        return report


def _by_name(records: Iterable[LedgerEntry]) -> dict[str, LedgerEntry]:
    entries: dict[str, LedgerEntry] = {}
    for entry in records:
        # A name written twice by hand still adds up.
        previous = entries.get(entry.name)
        entries[entry.name] = (
            entry if previous is None else previous.plus(entry.quantity, entry.revenue)
        )
    return entries
