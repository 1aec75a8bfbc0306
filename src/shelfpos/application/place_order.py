"""Application service: Place Order use case.

Orchestrates one staff sale: the catalog is loaded once, items are rung
up into a cart, the order summary is shown, and the transaction engine
settles the cart when enough cash is offered.  The session object holds
the explicit catalog and cart so the CLI can re-prompt for cash without
losing either.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from shelfpos.application.catalog_loader import load_catalog
from shelfpos.application.dto import CartDTO, CartLineDTO, ItemSpec, ReceiptDTO
from shelfpos.domain.exceptions import EntityNotFoundError
from shelfpos.domain.model.cart import AggregatedLine, Cart
from shelfpos.domain.model.catalog import Catalog
from shelfpos.domain.model.transaction import Transaction
from shelfpos.domain.model.value_objects import Money
from shelfpos.domain.repository.catalog_repository import CatalogRepository
from shelfpos.domain.repository.ledger_repository import LedgerRepository
from shelfpos.domain.service.sales_ledger import SalesLedger
from shelfpos.domain.service.transaction_engine import TransactionEngine


class OrderSession:

    def __init__(self, catalog: Catalog, engine: TransactionEngine) -> None:
        self.catalog = catalog
        self.cart = Cart()
        self._engine = engine

    def add(self, spec: ItemSpec) -> CartLineDTO:
        """Ring up an item looked up by ID or name."""
        item = self.catalog.find(spec.query)
        if item is None:
            raise EntityNotFoundError(f"Item not found: '{spec.query}'")
        self.cart.add(item, spec.quantity)
        line = next(line for line in self.cart.aggregate() if line.item_id == item.id)
        return _line_dto(line)

    def add_all(self, specs: list[ItemSpec]) -> None:
        for spec in specs:
            self.add(spec)

    def summary(self) -> CartDTO:
        return CartDTO(
            lines=[_line_dto(line) for line in self.cart.aggregate()],
            subtotal=self.cart.subtotal().display,
        )

    def checkout(self, tendered: str) -> ReceiptDTO:
        """Settle the cart.

        Validation failures leave the cart in place for another attempt.
        """
        transaction = self._engine.checkout(self.cart, self.catalog, Money.of(tendered))
        return _receipt_dto(transaction)

    def cancel(self) -> None:
        self._engine.cancel(self.cart)


class PlaceOrderHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        ledger_repo: LedgerRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._ledger_repo = ledger_repo
        self._clock = clock

    def open_session(self) -> OrderSession:
        engine = TransactionEngine(
            self._catalog_repo,
            SalesLedger(self._ledger_repo),
            clock=self._clock,
        )
        return OrderSession(load_catalog(self._catalog_repo), engine)

    def handle(self, item_specs: list[ItemSpec], tendered: str) -> ReceiptDTO:
        """Ring up *item_specs* and settle them in one go."""
        session = self.open_session()
        session.add_all(item_specs)
        return session.checkout(tendered)


# --- Mapping ------------------------------------------------------------------


def _line_dto(line: AggregatedLine) -> CartLineDTO:
    return CartLineDTO(
        item_id=line.item_id,
        name=line.name,
        category=line.category,
        quantity=line.quantity,
        unit_price=line.unit_price.display,
        line_total=line.line_total.display,
    )


def _receipt_dto(transaction: Transaction) -> ReceiptDTO:
    return ReceiptDTO(
        lines=[_line_dto(line) for line in transaction.lines],
        subtotal=transaction.subtotal.display,
        tendered=transaction.tendered.display,
        change=transaction.change.display,
        currency=transaction.subtotal.currency,
        timestamp=transaction.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
        period=transaction.period_key,
    )
