"""
Income ledger routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from tripwallet.db.session import get_db
from tripwallet.models.user import User
from tripwallet.models.ledger import AccountType
from tripwallet.schemas.ledger import IncomeCreate, IncomeResponse
from tripwallet.api.dependencies import get_current_user
from tripwallet.services.ledger_service import append_income, list_incomes

router = APIRouter(prefix="/incomes", tags=["incomes"])


@router.get("", response_model=List[IncomeResponse])
async def get_incomes(
    account: Optional[AccountType] = None,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List incomes, newest first, optionally for one account."""
    return list_incomes(current_user.id, db, account)


@router.post("", response_model=IncomeResponse, status_code=status.HTTP_201_CREATED)
async def create_income(
    income_data: IncomeCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Append an income."""
    return append_income(current_user.id, income_data, db)
