"""Application service: Show Sales Report use case (query)."""

from __future__ import annotations

from shelfpos.application.dto import LedgerLineDTO, SalesReportDTO
from shelfpos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from shelfpos.domain.repository.ledger_repository import LedgerRepository
from shelfpos.domain.service.sales_ledger import SalesLedger


class ShowSalesReportHandler:

    def __init__(self, ledger_repo: LedgerRepository) -> None:
        self._ledger_repo = ledger_repo

    def handle(self, period_key: str) -> SalesReportDTO:
        entries = SalesLedger(self._ledger_repo).entries(period_key)
        revenue = Money.zero()
        quantity = 0
        lines: list[LedgerLineDTO] = []
        for entry in entries.values():
            quantity += entry.quantity
            revenue = revenue + entry.revenue
            lines.append(LedgerLineDTO(entry.name, entry.quantity, entry.revenue.display))
        return SalesReportDTO(
            period=period_key,
            lines=lines,
            total_quantity=quantity,
            total_revenue=revenue.display,
            currency=DEFAULT_CURRENCY,
        )

    def periods(self) -> list[str]:
        return self._ledger_repo.periods()
