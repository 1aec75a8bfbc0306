"""Integration tests for the ShowSalesReport use case."""

import pytest

from shelfpos.application.show_sales_report import ShowSalesReportHandler
from shelfpos.domain.exceptions import ValidationError
from shelfpos.domain.model.ledger import LedgerEntry
from shelfpos.domain.model.value_objects import Money
from tests.fakes import FakeLedgerRepository


class TestShowSalesReport:

    def test_totals(self):
        repo = FakeLedgerRepository()
        repo.save("2024-03", [
            LedgerEntry("Rice 1kg", 4, Money.of("220.00")),
            LedgerEntry("Bath Soap", 2, Money.of("51.00")),
        ])
        dto = ShowSalesReportHandler(repo).handle("2024-03")
        assert dto.total_quantity == 6
        assert dto.total_revenue == "271.00"
        assert [l.name for l in dto.lines] == ["Rice 1kg", "Bath Soap"]

    def test_empty_period(self):
        dto = ShowSalesReportHandler(FakeLedgerRepository()).handle("2024-05")
        assert dto.lines == []
        assert dto.total_revenue == "0.00"

    def test_bad_period(self):
        with pytest.raises(ValidationError):
            ShowSalesReportHandler(FakeLedgerRepository()).handle("March")
