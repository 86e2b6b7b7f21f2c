from .user import User
from .category import Category
from .transaction import Transaction
from .budget import Budget
from .financial_profile import FinancialProfile

__all__ = ["User", "Category", "Transaction", "Budget", "FinancialProfile"]
