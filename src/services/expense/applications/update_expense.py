from datetime import date
from decimal import Decimal

from services.audit.applications import AuditTrail
from services.expense.applications.expense_audit import record_expense_event
from services.expense.domain.entity import Expense
from services.expense.domain.factory import ensure_within_trip
from services.expense.domain.repository import ExpenseRepository
from services.expense.domain.value_object import ExpenseId
from services.shared.domain import (
    AccessResult,
    Currency,
    Forbidden,
    Money,
    NotFound,
    Success,
    UserId,
)
from services.shared.domain.exception import ResourceNotFoundException
from services.shared.utils import to_snapshot
from services.trip.domain import Trip, TripRepository, TripRole, authorize


class UpdateExpenseService:
    """経費更新・削除ユースケース（EDITOR 以上）"""

    def __init__(
        self,
        trip_repository: TripRepository,
        repository: ExpenseRepository,
        audit_trail: AuditTrail,
    ) -> None:
        self._trip_repository = trip_repository
        self._repository = repository
        self._audit_trail = audit_trail

    def update(
        self,
        expense_id: ExpenseId,
        actor_id: UserId,
        amount: Decimal | None = None,
        currency_code: str | None = None,
        description: str | None = None,
        expense_date: date | None = None,
    ) -> AccessResult[Expense]:
        expense = self._require_expense(expense_id)
        result = self._authorize(expense, actor_id)
        match result:
            case Success(value=trip):
                if expense_date is not None:
                    ensure_within_trip(trip, expense_date)
                before = to_snapshot(expense)
                new_amount = None
                if amount is not None or currency_code is not None:
                    new_amount = Money(
                        amount=expense.amount.amount if amount is None else amount,
                        currency=(
                            Currency(currency_code)
                            if currency_code is not None
                            else expense.amount.currency
                        ),
                    )
                expense.update(new_amount, description, expense_date)
                saved = self._repository.save(expense)
                record_expense_event(
                    self._audit_trail,
                    "EXPENSE_UPDATED",
                    saved,
                    actor_id,
                    before_state=before,
                    after_state=saved,
                )
                return Success(saved)
            case NotFound() | Forbidden():
                return result

    def delete(self, expense_id: ExpenseId, actor_id: UserId) -> AccessResult[Expense]:
        expense = self._require_expense(expense_id)
        result = self._authorize(expense, actor_id)
        match result:
            case Success():
                self._repository.delete(expense)
                record_expense_event(
                    self._audit_trail, "EXPENSE_DELETED", expense, actor_id, before_state=expense
                )
                return Success(expense)
            case NotFound() | Forbidden():
                return result

    def _require_expense(self, expense_id: ExpenseId) -> Expense:
        expense = self._repository.find_by_id(expense_id)
        if expense is None:
            raise ResourceNotFoundException(f"Expense not found: {expense_id}")
        return expense

    def _authorize(self, expense: Expense, actor_id: UserId) -> AccessResult[Trip]:
        return authorize(
            self._trip_repository.find_by_id(expense.trip_id), actor_id, TripRole.EDITOR
        )
