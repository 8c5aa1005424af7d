from dataclasses import dataclass

from services.expense.domain.entity import Expense
from services.expense.domain.repository import ExpenseRepository
from services.shared.domain import (
    AccessResult,
    Currency,
    Forbidden,
    Money,
    NotFound,
    Success,
    TripId,
    UserId,
)
from services.trip.domain import TripRepository, authorize


@dataclass(frozen=True)
class ExpenseSummary:
    """経費一覧と通貨ごとの合計（為替換算はしない）"""

    expenses: list[Expense]
    totals: dict[Currency, Money]


class ListExpensesService:
    """経費一覧ユースケース（メンバー、または公開旅行なら誰でも閲覧可）"""

    def __init__(self, trip_repository: TripRepository, repository: ExpenseRepository) -> None:
        self._trip_repository = trip_repository
        self._repository = repository

    def list(self, trip_id: TripId, actor_id: UserId | None) -> AccessResult[ExpenseSummary]:
        result = authorize(self._trip_repository.find_by_id(trip_id), actor_id, None)
        match result:
            case Success(value=trip):
                expenses = self._repository.find_by_trip_id(trip.id)
                return Success(ExpenseSummary(expenses=expenses, totals=_totals(expenses)))
            case NotFound() | Forbidden():
                return result


def _totals(expenses: list[Expense]) -> dict[Currency, Money]:
    totals: dict[Currency, Money] = {}
    for expense in expenses:
        currency = expense.amount.currency
        totals[currency] = totals.get(currency, Money.zero(currency)).add(expense.amount)
    return totals
