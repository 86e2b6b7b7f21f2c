from .category import CategoryCreate, CategoryUpdate
from .transaction import TransactionCreate, TransactionUpdate, TransactionQuery
from .budget import BudgetCreate, BudgetUpdate
from .financial_profile import FinancialProfileCreate, FinancialProfileUpdate
from .insights import SpendingQuery, MonthQuery
from .auth import LoginRequest, RegisterRequest

__all__ = [
    "CategoryCreate",
    "CategoryUpdate",
    "TransactionCreate",
    "TransactionUpdate",
    "TransactionQuery",
    "BudgetCreate",
    "BudgetUpdate",
    "FinancialProfileCreate",
    "FinancialProfileUpdate",
    "SpendingQuery",
    "MonthQuery",
    "LoginRequest",
    "RegisterRequest",
]
