"""Abstract repository for the item catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (CSV, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from shelfpos.domain.model.item import Item
from shelfpos.domain.repository.load_report import LoadReport


class CatalogRepository(ABC):

    @abstractmethod
    def load(self) -> LoadReport[Item]:
        """Read every item; malformed records are reported, not raised."""

    @abstractmethod
    def save(self, items: Iterable[Item]) -> None:
        """Replace the stored catalog with *items*.

        Raises StorageIOFailure if the write fails.
        """
