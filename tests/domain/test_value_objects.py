"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from shelfpos.domain.exceptions import ValidationError
from shelfpos.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("55.00"))
        assert m.amount == Decimal("55.00")
        assert m.currency == "PHP"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_strips_whitespace(self):
        assert Money.of(" 200 ") == Money.of("200")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("NaN")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_keeps_stored_precision(self):
        assert (Money.of("0.125") * 3).amount == Decimal("0.375")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("55.00") * 3 == Money.of("165.00")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "PHP") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("35")) == "35.00 PHP"
        assert Money.of("9.5").display == "9.50"

    def test_comparison_operators(self):
        assert Money.of("50") < Money.of("100")
        assert Money.of("100") >= Money.of("100")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)
