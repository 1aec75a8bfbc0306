"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from shelfpos.application.catalog_loader import load_catalog
from shelfpos.application.dto import ItemDTO
from shelfpos.domain.exceptions import EntityNotFoundError
from shelfpos.domain.model.item import Item
from shelfpos.domain.repository.catalog_repository import CatalogRepository


class ShowInventoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self, category: str | None = None) -> list[ItemDTO]:
        """List every item, or only those in *category* (any case)."""
        catalog = load_catalog(self._catalog_repo)
        if category is None:
            return [_to_dto(item) for item in catalog]
        items = catalog.in_category(category)
        if not items:
            raise EntityNotFoundError(f"Category '{category}' not found")
        return [_to_dto(item) for item in items]

    def search(self, text: str) -> list[ItemDTO]:
        catalog = load_catalog(self._catalog_repo)
        return [_to_dto(item) for item in catalog.search(text)]

    def categories(self) -> list[str]:
        return load_catalog(self._catalog_repo).categories()


def _to_dto(item: Item) -> ItemDTO:
    return ItemDTO(
        id=item.id,
        name=item.name,
        category=item.category,
        quantity=item.quantity,
        price=item.price.display,
    )
