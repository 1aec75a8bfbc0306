"""Item aggregate: one sellable catalog entry with its stock on hand."""

from __future__ import annotations

from dataclasses import dataclass

from shelfpos.domain.exceptions import InsufficientStock, ValidationError
from shelfpos.domain.model.value_objects import Money


@dataclass
class Item:
    """A catalog item.

    Use ``Item.create()`` for anything coming from user input or a data
    file: it enforces the field rules.  The plain ``__init__`` is kept
    simple so tests and the catalog can build items directly.

    Invariant: ``quantity`` is never negative.
    """

    id: str
    name: str
    category: str
    quantity: int
    price: Money

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        item_id: str,
        name: str,
        category: str,
        quantity: int,
        price: Money,
    ) -> Item:
        item_id = _clean_text(item_id, "ID")
        name = _clean_text(name, "name")
        category = _clean_text(category, "category")
        _check_stock_level(quantity)
        return Item(id=item_id, name=name, category=category, quantity=quantity, price=price)

    # --- Mutations ------------------------------------------------------------

    def deduct(self, quantity: int) -> None:
        """Remove sold units from stock."""
        if quantity <= 0:
            raise ValidationError("Deduct quantity must be positive")
        if quantity > self.quantity:
            raise InsufficientStock(
                f"Insufficient stock for {self.name} "
                f"(need {quantity}, have {self.quantity})"
            )
        self.quantity -= quantity

    def restock(self, quantity: int) -> None:
        _check_stock_level(quantity)
        self.quantity = quantity

    def rename(self, name: str) -> None:
        self.name = _clean_text(name, "name")

    def recategorize(self, category: str) -> None:
        self.category = _clean_text(category, "category")

    def update_price(self, new_price: Money) -> None:
        """Change the unit price.

        Carts that already hold this item keep the price they captured.
        """
        self.price = new_price


def _clean_text(value: str | None, label: str) -> str:
    # Names end up as single lines in the ledger and receipts.
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"Item {label} is required")
    if "\n" in value or "\r" in value:
        raise ValidationError(f"Item {label} must not contain line breaks")
    return value


def _check_stock_level(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Quantity must be a non-negative integer")
