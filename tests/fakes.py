"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the file repositories
but keep everything in memory. No file I/O, no side effects.  Saved
state is kept as copies so tests can compare it before and after a
call, and writes can be made to fail on demand.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from shelfpos.domain.exceptions import MalformedRecord, StorageIOFailure
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.ledger import LedgerEntry
from shelfpos.domain.repository.catalog_repository import CatalogRepository
from shelfpos.domain.repository.ledger_repository import LedgerRepository
from shelfpos.domain.repository.load_report import LoadReport


class FakeCatalogRepository(CatalogRepository):

    def __init__(self, items: list[Item] | None = None) -> None:
        self.stored: list[Item] = [replace(i) for i in items or []]
        self.save_count = 0
        self.fail_on_save = False

    def load(self) -> LoadReport[Item]:
        return LoadReport(records=[replace(i) for i in self.stored])

    def save(self, items: Iterable[Item]) -> None:
        if self.fail_on_save:
            raise StorageIOFailure("disk full")
        self.stored = [replace(i) for i in items]
        self.save_count += 1

    def quantities(self) -> dict[str, int]:
        return {i.id: i.quantity for i in self.stored}


class FakeLedgerRepository(LedgerRepository):

    def __init__(self) -> None:
        self.stored: dict[str, list[LedgerEntry]] = {}
        self.unreadable: dict[str, list[str]] = {}
        self.fail_on_save = False
        self.load_error: Exception | None = None

    def load(self, period_key: str) -> LoadReport[LedgerEntry]:
        if self.load_error is not None:
            raise self.load_error
        records = list(self.stored.get(period_key, []))
        rejected = [
            MalformedRecord(len(records) + n, raw, "unreadable")
            for n, raw in enumerate(self.unreadable.get(period_key, []), start=1)
        ]
        return LoadReport(records=records, rejected=rejected)

    def save(
        self,
        period_key: str,
        entries: Iterable[LedgerEntry],
        unreadable: Iterable[str] = (),
    ) -> None:
        if self.fail_on_save:
            raise StorageIOFailure("disk full")
        self.stored[period_key] = list(entries)
        self.unreadable[period_key] = list(unreadable)

    def periods(self) -> list[str]:
        return sorted(self.stored)

    def entry(self, period_key: str, name: str) -> LedgerEntry | None:
        for entry in self.stored.get(period_key, []):
            if entry.name == name:
                return entry
        return None
