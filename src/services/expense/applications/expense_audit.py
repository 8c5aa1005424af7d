from services.audit.applications import AuditTrail
from services.expense.domain.entity import Expense
from services.shared.domain import UserId


def record_expense_event(
    audit_trail: AuditTrail,
    action: str,
    expense: Expense,
    actor_id: UserId,
    before_state: object = None,
    after_state: object = None,
) -> None:
    audit_trail.record(
        action=action,
        entity_type="EXPENSE",
        entity_id=str(expense.id),
        actor_id=actor_id,
        before_state=before_state,
        after_state=after_state,
        metadata={"tripId": expense.trip_id, "currency": expense.amount.currency},
    )
