"""Application service: Update Item use case (manager)."""

from __future__ import annotations

from shelfpos.application.catalog_loader import load_catalog
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.value_objects import Money
from shelfpos.domain.repository.catalog_repository import CatalogRepository


class UpdateItemHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(
        self,
        item_id: str,
        name: str | None = None,
        category: str | None = None,
        quantity: int | None = None,
        price: str | None = None,
    ) -> Item:
        """Change any subset of an item's fields.

        Fields left as ``None`` keep their current value.  Nothing is
        written unless every change is valid.
        """
        catalog = load_catalog(self._catalog_repo)
        new_price = Money.of(price) if price is not None else None
        item = catalog.update(
            item_id,
            name=name,
            category=category,
            quantity=quantity,
            price=new_price,
        )
        self._catalog_repo.save(catalog.items())
        return item
