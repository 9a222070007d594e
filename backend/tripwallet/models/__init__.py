"""Models package - Import all models for SQLAlchemy registration."""
from tripwallet.models.user import User
from tripwallet.models.finances import FixedParameters
from tripwallet.models.ledger import (
    AccountType, ExpenseCategory, IncomeCategory, PlaceCategory,
    Expense, Income, Place
)

__all__ = [
    "User",
    "FixedParameters",
    "AccountType",
    "ExpenseCategory",
    "IncomeCategory",
    "PlaceCategory",
    "Expense",
    "Income",
    "Place",
]
