"""
Expense ledger routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from tripwallet.db.session import get_db
from tripwallet.models.user import User
from tripwallet.models.ledger import AccountType
from tripwallet.schemas.ledger import ExpenseCreate, ExpenseResponse
from tripwallet.api.dependencies import get_current_user
from tripwallet.services.ledger_service import append_expense, list_expenses

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=List[ExpenseResponse])
async def get_expenses(
    account: Optional[AccountType] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List expenses, newest first, optionally for one account."""
    return list_expenses(current_user.id, db, account)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(
    expense_data: ExpenseCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Append an expense."""
    return append_expense(current_user.id, expense_data, db)
