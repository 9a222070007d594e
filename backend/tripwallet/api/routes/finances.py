"""
Fixed trip/savings parameter routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from tripwallet.db.session import get_db
from tripwallet.models.user import User
from tripwallet.schemas.finances import FixedParametersResponse, FixedParametersUpdate
from tripwallet.api.dependencies import get_current_user
from tripwallet.services.parameter_service import get_fixed_parameters, set_fixed_parameters

router = APIRouter(prefix="/finances", tags=["finances"])


@router.get("", response_model=FixedParametersResponse)
async def get_finances(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get fixed parameters, all zero if never set."""
    return get_fixed_parameters(current_user.id, db)


@router.post("", response_model=FixedParametersResponse)
async def update_finances(
    values: FixedParametersUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace all fixed parameters."""
    return set_fixed_parameters(current_user.id, values, db)
