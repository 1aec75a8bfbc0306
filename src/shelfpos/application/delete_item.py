"""Application service: Delete Item use case (manager).

Past sales stay in the monthly ledger; only the catalog entry goes.
"""

from __future__ import annotations

from shelfpos.application.catalog_loader import load_catalog
from shelfpos.domain.model.item import Item
from shelfpos.domain.repository.catalog_repository import CatalogRepository


class DeleteItemHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, item_id: str) -> Item:
        catalog = load_catalog(self._catalog_repo)
        removed = catalog.remove(item_id)
        self._catalog_repo.save(catalog.items())
        return removed
