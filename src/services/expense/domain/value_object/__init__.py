from .expense_id import ExpenseId as ExpenseId
