"""
Pydantic schemas for ledger entries.
"""
from pydantic import AliasChoices, BaseModel, Field
from typing import Optional
from datetime import date as dt_date, datetime, time as dt_time
from tripwallet.models.ledger import AccountType, ExpenseCategory, IncomeCategory, PlaceCategory


class ExpenseBase(BaseModel):
    """Base expense schema."""
    title: str = Field(min_length=1, max_length=200)
    amount: int
    category: ExpenseCategory = ExpenseCategory.FOOD
    account: AccountType = AccountType.TRIP


class ExpenseCreate(ExpenseBase):
    """Schema for expense creation. Missing id, date and time are filled in on append."""
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    date: Optional[dt_date] = None
    time: Optional[dt_time] = None


class ExpenseResponse(ExpenseBase):
    """Schema for expense response."""
    id: str = Field(validation_alias=AliasChoices("entry_id", "id"))
    date: dt_date
    time: dt_time
    created_at: datetime
    
    class Config:
        from_attributes = True


class IncomeBase(BaseModel):
    """Base income schema."""
    title: str = Field(min_length=1, max_length=200)
    amount: int
    category: IncomeCategory = IncomeCategory.FRIEND_REIMBURSEMENT
    account: AccountType = AccountType.TRIP


class IncomeCreate(IncomeBase):
    """Schema for income creation."""
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)
    date: Optional[dt_date] = None


class IncomeResponse(IncomeBase):
    """Schema for income response."""
    id: str = Field(validation_alias=AliasChoices("entry_id", "id"))
    date: dt_date
    created_at: datetime
    
    class Config:
        from_attributes = True


class PlaceBase(BaseModel):
    """Base place schema."""
    title: str = Field(min_length=1, max_length=200)
    category: PlaceCategory


class PlaceCreate(PlaceBase):
    """Schema for place creation."""
    id: Optional[str] = Field(default=None, min_length=1, max_length=64)


class PlaceResponse(PlaceBase):
    """Schema for place response."""
    id: str = Field(validation_alias=AliasChoices("entry_id", "id"))
    created_at: datetime
    
    class Config:
        from_attributes = True
