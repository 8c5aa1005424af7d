from aws_lambda_powertools import Logger

from services.audit.applications import AuditTrail
from services.expense.applications.expense_audit import record_expense_event
from services.expense.domain.entity import Expense
from services.expense.domain.factory import ExpenseDetails, ExpenseFactory
from services.expense.domain.repository import ExpenseRepository
from services.shared.domain import AccessResult, Forbidden, NotFound, Success, TripId, UserId
from services.trip.domain import TripRepository, TripRole, authorize

logger = Logger(child=True)


class CreateExpenseService:
    """経費登録ユースケース（EDITOR 以上）"""

    def __init__(
        self,
        trip_repository: TripRepository,
        repository: ExpenseRepository,
        factory: ExpenseFactory,
        audit_trail: AuditTrail,
    ) -> None:
        self._trip_repository = trip_repository
        self._repository = repository
        self._factory = factory
        self._audit_trail = audit_trail

    def create(
        self, trip_id: TripId, actor_id: UserId, expense_details: ExpenseDetails
    ) -> AccessResult[Expense]:
        result = authorize(self._trip_repository.find_by_id(trip_id), actor_id, TripRole.EDITOR)
        match result:
            case Success(value=trip):
                expense = self._repository.save(
                    self._factory.create(trip, actor_id, expense_details)
                )
                record_expense_event(
                    self._audit_trail, "EXPENSE_CREATED", expense, actor_id, after_state=expense
                )
                logger.info(
                    "Expense created",
                    extra={"trip_id": str(trip_id), "expense_id": str(expense.id)},
                )
                return Success(expense)
            case NotFound() | Forbidden():
                return result
