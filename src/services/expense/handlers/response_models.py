from pydantic import BaseModel

from services.expense.applications import ExpenseSummary
from services.expense.domain.entity import Expense


class ExpenseData(BaseModel):
    """経費データのレスポンスモデル"""

    expense_id: str
    trip_id: str
    created_by: str
    amount: str
    currency: str
    description: str
    date: str
    created_at: str


class ExpenseTotalData(BaseModel):
    currency: str
    amount: str


class ExpenseListData(BaseModel):
    expenses: list[ExpenseData]
    totals: list[ExpenseTotalData]


class SuccessResponse(BaseModel):
    status: str = "success"
    data: ExpenseData


class ListResponse(BaseModel):
    status: str = "success"
    data: ExpenseListData


def to_response(expense: Expense) -> dict:
    return SuccessResponse(data=_expense_data(expense)).model_dump()


def to_list_response(summary: ExpenseSummary) -> dict:
    return ListResponse(
        data=ExpenseListData(
            expenses=[_expense_data(expense) for expense in summary.expenses],
            totals=[
                ExpenseTotalData(currency=str(currency), amount=str(total.amount))
                for currency, total in sorted(summary.totals.items(), key=lambda kv: str(kv[0]))
            ],
        )
    ).model_dump()


def _expense_data(expense: Expense) -> ExpenseData:
    return ExpenseData(
        expense_id=str(expense.id),
        trip_id=str(expense.trip_id),
        created_by=str(expense.created_by),
        amount=str(expense.amount.amount),
        currency=str(expense.amount.currency),
        description=expense.description,
        date=expense.date.isoformat(),
        created_at=str(expense.created_at),
    )
