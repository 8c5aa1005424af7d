from .create_expense import CreateExpenseService as CreateExpenseService
from .list_expenses import ExpenseSummary as ExpenseSummary
from .list_expenses import ListExpensesService as ListExpensesService
from .update_expense import UpdateExpenseService as UpdateExpenseService
