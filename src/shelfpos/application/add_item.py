"""Application service: Add Item use case (manager)."""

from __future__ import annotations

from shelfpos.application.catalog_loader import load_catalog
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.value_objects import Money
from shelfpos.domain.repository.catalog_repository import CatalogRepository


class AddItemHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        item_id: str,
        name: str,
        category: str,
        quantity: int,
        price: str,
    ) -> Item:
        """Add a new item; the ID must not already be in the catalog."""
        catalog = load_catalog(self._catalog_repo)
        item = Item.create(item_id, name, category, quantity, Money.of(price))
        catalog.add(item)
        self._catalog_repo.save(catalog.items())
        return item
