"""
Dashboard snapshot route.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tripwallet.db.session import get_db
from tripwallet.models.user import User
from tripwallet.schemas.finances import FixedParametersResponse
from tripwallet.schemas.ledger import ExpenseResponse, IncomeResponse, PlaceResponse
from tripwallet.schemas.summary import DataSnapshot
from tripwallet.api.dependencies import get_current_user
from tripwallet.api.routes.summary import to_summary
from tripwallet.services.balance_service import load_owner_ledger, summarize

router = APIRouter(prefix="/data", tags=["data"])


@router.get("", response_model=DataSnapshot)
async def get_data(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get parameters, all ledger entries and derived balances in one call."""
    ledger = load_owner_ledger(current_user.id, db)
    
    return DataSnapshot(
        finances=FixedParametersResponse.model_validate(ledger.parameters),
        expenses=[ExpenseResponse.model_validate(e) for e in ledger.expenses],
        incomes=[IncomeResponse.model_validate(i) for i in ledger.incomes],
        places=[PlaceResponse.model_validate(p) for p in ledger.places],
        summary=to_summary(summarize(ledger))
    )
