from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.expense.domain.entity import Expense
from services.expense.domain.value_object import ExpenseId
from services.shared.domain import IsoDateTime, Money


@pytest.fixture
def create_expense(trip_id, owner_id):
    """Expense を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        amount: str = "3500",
        currency_code: str = "JPY",
        description: str = "Lunch",
        expense_date: date = date(2026, 1, 2),
        version: int = 1,
    ) -> Expense:
        return Expense(
            id=ExpenseId.generate(),
            trip_id=trip_id,
            created_by=owner_id,
            amount=Money.of(Decimal(amount), currency_code),
            description=description,
            date=expense_date,
            created_at=IsoDateTime.from_string("2026-01-02T12:00:00+00:00"),
            version=version,
        )

    return _factory


@pytest.fixture
def trip_repository():
    return MagicMock()


@pytest.fixture
def audit_trail():
    return MagicMock()
