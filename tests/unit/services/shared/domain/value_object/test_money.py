from decimal import Decimal

import pytest

from services.shared.domain import Currency, Money


class TestMoney:
    def test_of_normalizes_currency(self):
        money = Money.of("1200", "jpy")
        assert money.amount == Decimal("1200")
        assert money.currency == Currency("JPY")

    def test_zero_is_allowed(self):
        assert Money.of(0, "USD").amount == Decimal("0")

    def test_negative_amount_raises_error(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money.of("-0.01", "USD")

    def test_add_same_currency(self):
        total = Money.of("10.50", "EUR").add(Money.of("2.25", "EUR"))
        assert total == Money.of("12.75", "EUR")

    def test_add_different_currency_raises_error(self):
        with pytest.raises(ValueError, match="different currencies"):
            Money.of(1, "EUR").add(Money.of(1, "USD"))


class TestCurrency:
    @pytest.mark.parametrize("code", ["", "YEN!", "US", "EURO"])
    def test_invalid_code_raises_error(self, code):
        with pytest.raises(ValueError, match="Invalid currency code"):
            Currency(code)
