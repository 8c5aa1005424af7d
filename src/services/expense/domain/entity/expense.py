from __future__ import annotations

from datetime import date
from typing import Any

from services.expense.domain.value_object import ExpenseId
from services.shared.domain import AggregateRoot, IsoDateTime, Money, TripId, UserId


class Expense(AggregateRoot[ExpenseId]):
    """旅行の経費

    金額は非負（Money が検証）。日付が旅行日程内であることはファクトリ・更新時に旅行と照合する。
    """

    def __init__(
        self,
        id: ExpenseId,
        trip_id: TripId,
        created_by: UserId,
        amount: Money,
        description: str,
        date: date,
        created_at: IsoDateTime,
        version: int = 0,
    ) -> None:
        super().__init__(id, version)

        self._trip_id = trip_id
        self._created_by = created_by
        self._amount = amount
        self._description = description.strip()
        self._date = date
        self._created_at = created_at

    @property
    def trip_id(self) -> TripId:
        return self._trip_id

    @property
    def created_by(self) -> UserId:
        return self._created_by

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def description(self) -> str:
        return self._description

    @property
    def date(self) -> date:
        return self._date

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    def update(
        self,
        amount: Money | None = None,
        description: str | None = None,
        expense_date: date | None = None,
    ) -> None:
        """指定された項目だけを更新する"""
        if amount is not None:
            self._amount = amount
        if description is not None:
            self._description = description.strip()
        if expense_date is not None:
            self._date = expense_date

    def snapshot(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "trip_id": self._trip_id,
            "created_by": self._created_by,
            "amount": self._amount.amount,
            "currency": self._amount.currency,
            "description": self._description,
            "date": self._date,
            "created_at": self._created_at,
        }
