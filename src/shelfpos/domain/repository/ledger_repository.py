"""Abstract repository for monthly sales ledgers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from shelfpos.domain.model.ledger import LedgerEntry
from shelfpos.domain.repository.load_report import LoadReport


class LedgerRepository(ABC):

    @abstractmethod
    def load(self, period_key: str) -> LoadReport[LedgerEntry]:
        """Read a period's entries; an unknown period yields an empty report."""

    @abstractmethod
    def save(
        self,
        period_key: str,
        entries: Iterable[LedgerEntry],
        unreadable: Iterable[str] = (),
    ) -> None:
        """Overwrite the period's table with *entries*.

        *unreadable* holds raw lines that failed to decode on load; they
        are kept verbatim after the entries.
        """

    @abstractmethod
    def periods(self) -> list[str]:
        """Every period that has a stored ledger, oldest first."""
