"""
Derived balance routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tripwallet.db.session import get_db
from tripwallet.models.user import User
from tripwallet.schemas.summary import BalanceSummary
from tripwallet.api.dependencies import get_current_user
from tripwallet.services.balance_service import Balances, load_owner_ledger, summarize

router = APIRouter(prefix="/summary", tags=["summary"])


def to_summary(balances: Balances) -> BalanceSummary:
    """Attach formatted display strings to the raw figures."""
    return BalanceSummary(**balances.as_dict(), display=balances.display())


@router.get("", response_model=BalanceSummary)
async def get_summary(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Recompute trip and savings balances from the current ledger."""
    ledger = load_owner_ledger(current_user.id, db)
    return to_summary(summarize(ledger))
