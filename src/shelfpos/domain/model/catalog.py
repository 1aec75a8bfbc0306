"""Catalog: the in-memory list of items for one run.

The catalog owns its Item records.  Loading and saving go through a
``CatalogRepository``; the catalog itself never touches the disk.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from shelfpos.domain.exceptions import EntityNotFoundError, ValidationError
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.value_objects import Money


class Catalog:

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self._items: list[Item] = []
        for item in items:
            self.add(item)

    # --- Queries --------------------------------------------------------------

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def items(self) -> list[Item]:
        return list(self._items)

    def get(self, item_id: str) -> Item | None:
        """Exact lookup by identifier."""
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def find(self, query: str) -> Item | None:
        """Resolve what a cashier typed: an ID or a full name, any case."""
        needle = query.strip().lower()
        for item in self._items:
            if item.id.lower() == needle or item.name.lower() == needle:
                return item
        return None

    def search(self, text: str) -> list[Item]:
        """Items whose ID matches exactly or whose name contains *text*."""
        needle = text.strip().lower()
        return [
            item
            for item in self._items
            if item.id.lower() == needle or needle in item.name.lower()
        ]

    def categories(self) -> list[str]:
        seen: list[str] = []
        for item in self._items:
            if item.category not in seen:
                seen.append(item.category)
        return seen

    def in_category(self, category: str) -> list[Item]:
        wanted = category.strip().lower()
        return [item for item in self._items if item.category.lower() == wanted]

    # --- Mutations ------------------------------------------------------------

    def add(self, item: Item) -> None:
        if self.get(item.id) is not None:
            raise ValidationError(f"Item ID '{item.id}' already exists")
        self._items.append(item)

    def update(
        self,
        item_id: str,
        *,
        name: str | None = None,
        category: str | None = None,
        quantity: int | None = None,
        price: Money | None = None,
    ) -> Item:
        """Apply the given field changes; ``None`` keeps the current value."""
        item = self._require(item_id)
        if name is not None:
            item.rename(name)
        if category is not None:
            item.recategorize(category)
        if quantity is not None:
            item.restock(quantity)
        if price is not None:
            item.update_price(price)
        return item

    def remove(self, item_id: str) -> Item:
        item = self._require(item_id)
        self._items.remove(item)
        return item

    # --- Internal helpers -----------------------------------------------------

    def _require(self, item_id: str) -> Item:
        item = self.get(item_id)
        if item is None:
            raise EntityNotFoundError(f"Item with ID '{item_id}' not found")
        return item
