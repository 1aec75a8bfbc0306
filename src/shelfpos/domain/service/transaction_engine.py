"""Domain service: Transaction Engine.

Settles a cart against the catalog.  Like a reservation, checkout is
two-phase so a failure never leaves stock half-deducted:

  Phase 1 (validate): cart not empty, tender covers the subtotal, every
    item still exists and has enough stock.  Nothing is touched.
  Phase 2 (commit): deduct stock, persist the catalog, merge the sales
    ledger, clear the cart.

If anything fails during phase 2 the in-memory stock is put back (and
the catalog file rewritten if it had already been saved) before the
error is raised, so callers see either a full commit or none at all.
Should that catalog rewrite fail as well, the raised StorageIOFailure
says so.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from shelfpos.domain.exceptions import (
    EmptyCart,
    InsufficientStock,
    InsufficientTender,
    ItemMissing,
    StorageIOFailure,
)
from shelfpos.domain.model.cart import AggregatedLine, Cart
from shelfpos.domain.model.catalog import Catalog
from shelfpos.domain.model.item import Item
from shelfpos.domain.model.transaction import Transaction, period_key_for
from shelfpos.domain.model.value_objects import Money
from shelfpos.domain.repository.catalog_repository import CatalogRepository
from shelfpos.domain.service.sales_ledger import SalesLedger

logger = logging.getLogger(__name__)


class TransactionEngine:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        sales_ledger: SalesLedger,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._sales_ledger = sales_ledger
        self._clock = clock

    def checkout(self, cart: Cart, catalog: Catalog, tendered: Money) -> Transaction:
        if cart.is_empty():
            raise EmptyCart("Your cart is empty. Cannot proceed to checkout.")

        lines = tuple(cart.aggregate())
        subtotal = _sum_lines(lines)
        if tendered < subtotal:
            raise InsufficientTender(
                f"Insufficient cash: total is {subtotal}, received {tendered}"
            )

        # Phase 1: resolve and validate every line before mutating anything
        plan: list[tuple[Item, int]] = []
        for line in lines:
            item = catalog.get(line.item_id)
            if item is None:
                raise ItemMissing(
                    f"'{line.name}' (ID {line.item_id}) is no longer in the catalog"
                )
            if line.quantity > item.quantity:
                raise InsufficientStock(
                    f"Insufficient stock for {line.name} "
                    f"(need {line.quantity}, have {item.quantity})"
                )
            plan.append((item, line.quantity))

        # Phase 2: commit
        timestamp = self._clock()
        self._commit(catalog, plan, period_key_for(timestamp), lines)
        cart.clear()

        transaction = Transaction(
            lines=lines,
            subtotal=subtotal,
            tendered=tendered,
            change=tendered - subtotal,
            timestamp=timestamp,
        )
        logger.info(
            "Checkout committed: %d line(s), %d unit(s), subtotal %s, change %s",
            len(lines), transaction.units, subtotal, transaction.change,
        )
        return transaction

    def cancel(self, cart: Cart) -> None:
        """Abandon a checkout that has not been committed.

        Nothing was deducted yet, so there is nothing to restore; the
        cart stays as it is so the cashier can continue or clear it.
        """
        logger.info("Checkout cancelled with %d cart line(s) pending", len(cart.lines))

    # --- Internal helpers -----------------------------------------------------

    def _commit(
        self,
        catalog: Catalog,
        plan: list[tuple[Item, int]],
        period_key: str,
        lines: tuple[AggregatedLine, ...],
    ) -> None:
        before = [(item, item.quantity) for item, _ in plan]
        for item, qty in plan:
            item.deduct(qty)

        try:
            self._catalog_repo.save(catalog.items())
        except Exception:
            _restore(before)
            logger.error("Catalog write failed; stock left unchanged")
            raise

        try:
            self._sales_ledger.merge(period_key, lines)
        except Exception as exc:
            _restore(before)
            try:
                self._catalog_repo.save(catalog.items())
            except StorageIOFailure as rollback_exc:
                logger.exception("Could not rewrite the catalog after a failed ledger merge")
                raise StorageIOFailure(
                    f"{exc}; the catalog could not be restored either ({rollback_exc}), "
                    "so its stock no longer matches the sales ledger"
                ) from exc
            logger.error("Ledger merge for %s failed; checkout rolled back", period_key)
            raise


def _sum_lines(lines: tuple[AggregatedLine, ...]) -> Money:
    total = Money.zero()
    for line in lines:
        total = total + line.line_total
    return total


def _restore(before: list[tuple[Item, int]]) -> None:
    for item, quantity in before:
        item.quantity = quantity
