from abc import abstractmethod

from services.expense.domain.entity.expense import Expense
from services.expense.domain.value_object import ExpenseId
from services.shared.domain import Repository, TripId


class ExpenseRepository(Repository[Expense, ExpenseId]):
    """経費リポジトリのインターフェース"""

    @abstractmethod
    def save(self, expense: Expense) -> Expense:
        """経費を保存する（バージョン不一致は OptimisticLockException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, expense_id: ExpenseId) -> Expense | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_trip_id(self, trip_id: TripId) -> list[Expense]:
        """旅行の経費を日付順に返す"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, expense: Expense) -> None:
        raise NotImplementedError
