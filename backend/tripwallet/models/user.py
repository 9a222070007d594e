"""
User model for authentication. Each user is one ledger owner.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from tripwallet.db.base import BaseModel


class User(BaseModel):
    """User model with immutable username."""
    __tablename__ = "users"
    
    username = Column(String(50), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    
    # Relationships
    fixed_parameters = relationship("FixedParameters", back_populates="user", uselist=False, cascade="all, delete-orphan")
    expenses = relationship("Expense", back_populates="user", cascade="all, delete-orphan")
    incomes = relationship("Income", back_populates="user", cascade="all, delete-orphan")
    places = relationship("Place", back_populates="user", cascade="all, delete-orphan")
