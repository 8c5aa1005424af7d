from .expense import Expense as Expense
