"""Cart: what the cashier has rung up in the current session.

Lines capture the item's price at add time.  Adding stock to the cart
only *checks* the catalog quantity; nothing is reserved or deducted
until the transaction engine commits a checkout.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from shelfpos.domain.exceptions import InvalidQuantity
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    item_id: str
    name: str
    category: str
    unit_price: Money  # snapshot at add time
    quantity: Quantity


@dataclass(frozen=True)
class AggregatedLine:
    """One row per distinct item, as shown on the order summary."""

    item_id: str
    name: str
    category: str
    unit_price: Money
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


class Cart:

    def __init__(self, lines: list[CartLine] | None = None) -> None:
        self._lines: list[CartLine] = list(lines or [])

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def quantity_of(self, item_id: str) -> int:
        return sum(line.quantity.value for line in self._lines if line.item_id == item_id)

    def add(self, item: Item, quantity: int) -> CartLine:
        """Ring up *quantity* units of *item*.

        The running cart total for the item may not exceed what is on
        the shelf right now.
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantity(f"Quantity for {item.name} must be a positive integer")
        in_cart = self.quantity_of(item.id)
        if in_cart + quantity > item.quantity:
            raise InvalidQuantity(
                f"Cannot add {quantity} of {item.name} "
                f"(available: {item.quantity}, already in cart: {in_cart})"
            )

        for line in self._lines:
            if line.item_id == item.id:
                line.quantity = Quantity(line.quantity.value + quantity)
                return line

        line = CartLine(
            item_id=item.id,
            name=item.name,
            category=item.category,
            unit_price=item.price,
            quantity=Quantity(quantity),
        )
        self._lines.append(line)
        return line

    def aggregate(self) -> Iterator[AggregatedLine]:
        """Yield one summed line per item ID, in first-added order.

        The first line seen for an item decides its name and price.
        Calling it again starts over from the current cart contents.
        """
        order: list[str] = []
        firsts: dict[str, CartLine] = {}
        totals: dict[str, int] = {}
        for line in self._lines:
            if line.item_id not in firsts:
                order.append(line.item_id)
                firsts[line.item_id] = line
                totals[line.item_id] = 0
            totals[line.item_id] += line.quantity.value

        for item_id in order:
            first = firsts[item_id]
            yield AggregatedLine(
                item_id=item_id,
                name=first.name,
                category=first.category,
                unit_price=first.unit_price,
                quantity=totals[item_id],
            )

    def subtotal(self) -> Money:
        total = Money.zero()
        for line in self.aggregate():
            total = total + line.line_total
        return total

    def clear(self) -> None:
        self._lines.clear()
