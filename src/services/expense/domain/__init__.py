from .entity import Expense as Expense
from .factory import ExpenseFactory as ExpenseFactory
from .repository import ExpenseRepository as ExpenseRepository
from .value_object import ExpenseId as ExpenseId
