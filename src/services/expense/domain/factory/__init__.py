from .expense_factory import ExpenseDetails as ExpenseDetails
from .expense_factory import ExpenseFactory as ExpenseFactory
from .expense_factory import ensure_within_trip as ensure_within_trip
