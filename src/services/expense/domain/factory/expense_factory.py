from datetime import date
from decimal import Decimal
from typing import TypedDict

from services.expense.domain.entity.expense import Expense
from services.expense.domain.value_object import ExpenseId
from services.shared.domain import Currency, IsoDateTime, Money, UserId
from services.shared.domain.exception import BusinessRuleViolationException
from services.trip.domain.entity import Trip


class ExpenseDetails(TypedDict):
    """経費の入力データ構造（TypedDict）"""

    amount: Decimal
    currency_code: str
    description: str
    date: date


class ExpenseFactory:
    """経費ファクトリ"""

    def create(self, trip: Trip, created_by: UserId, expense_details: ExpenseDetails) -> Expense:
        """旅行日程内の日付で新規経費を生成する"""
        ensure_within_trip(trip, expense_details["date"])

        return Expense(
            id=ExpenseId.generate(),
            trip_id=trip.id,
            created_by=created_by,
            amount=Money(
                amount=expense_details["amount"],
                currency=Currency(expense_details["currency_code"]),
            ),
            description=expense_details["description"],
            date=expense_details["date"],
            created_at=IsoDateTime.now(),
        )


def ensure_within_trip(trip: Trip, expense_date: date) -> None:
    if not trip.start_date <= expense_date <= trip.end_date:
        raise BusinessRuleViolationException(
            "Expense date must be within trip date range "
            f"({trip.start_date} - {trip.end_date})"
        )
