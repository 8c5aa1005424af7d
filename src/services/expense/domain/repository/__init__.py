from .expense_repository import ExpenseRepository as ExpenseRepository
