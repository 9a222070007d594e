"""
Ledger entry models: expenses, incomes and places of interest.
"""
from sqlalchemy import Column, String, Date, Time, Enum as SQLEnum, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from tripwallet.db.base import BaseModel
import enum


class AccountType(str, enum.Enum):
    """Account an expense or income is booked against."""
    TRIP = "trip"
    SAVINGS = "savings"


class ExpenseCategory(str, enum.Enum):
    """Expense category enumeration."""
    FOOD = "Food"
    ALCOHOL = "Alcohol"
    METRO = "Metro"
    AUTO = "Auto"
    CAB = "Cab"
    ATTRACTIONS = "Attractions"
    SHOPPING = "Shopping"
    MISC = "Misc"


class IncomeCategory(str, enum.Enum):
    """Income category enumeration."""
    FREELANCE_PROJECT = "Freelance project"
    INTERNSHIP_STIPEND = "Internship stipend"
    FRIEND_REIMBURSEMENT = "Friend reimbursement"
    CUSTOM_SOURCE = "Custom source"


class PlaceCategory(str, enum.Enum):
    """Place of interest category enumeration."""
    STREET_FOOD = "Street Food"
    CASUAL_DINING = "Casual Dining"
    PREMIUM = "Premium"
    HOTSPOT = "Hotspot"


def _enum_column(enum_cls):
    # Store the human-readable value, not the member name
    return SQLEnum(enum_cls, values_callable=lambda e: [m.value for m in e], native_enum=False, length=50)


class Expense(BaseModel):
    """A single spending event on the trip or savings account."""
    __tablename__ = "expenses"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    entry_id = Column(String(64), nullable=False)  # Caller-supplied identifier
    title = Column(String(200), nullable=False)
    amount = Column(Integer, nullable=False)
    category = Column(_enum_column(ExpenseCategory), nullable=False)
    account = Column(_enum_column(AccountType), nullable=False, index=True)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="expenses")
    
    __table_args__ = (
        UniqueConstraint('user_id', 'entry_id', name='uq_user_expense_entry'),
    )


class Income(BaseModel):
    """A single income event on the trip or savings account."""
    __tablename__ = "incomes"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    entry_id = Column(String(64), nullable=False)
    title = Column(String(200), nullable=False)
    amount = Column(Integer, nullable=False)
    category = Column(_enum_column(IncomeCategory), nullable=False)
    account = Column(_enum_column(AccountType), nullable=False, index=True)
    date = Column(Date, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="incomes")
    
    __table_args__ = (
        UniqueConstraint('user_id', 'entry_id', name='uq_user_income_entry'),
    )


class Place(BaseModel):
    """A point of interest. Carries no monetary value."""
    __tablename__ = "places"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    entry_id = Column(String(64), nullable=False)
    title = Column(String(200), nullable=False)
    category = Column(_enum_column(PlaceCategory), nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="places")
    
    __table_args__ = (
        UniqueConstraint('user_id', 'entry_id', name='uq_user_place_entry'),
    )
