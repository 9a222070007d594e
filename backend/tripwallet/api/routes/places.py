"""
Places of interest routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from tripwallet.db.session import get_db
from tripwallet.models.user import User
from tripwallet.schemas.ledger import PlaceCreate, PlaceResponse
from tripwallet.api.dependencies import get_current_user
from tripwallet.services.ledger_service import append_place, list_places

router = APIRouter(prefix="/places", tags=["places"])


@router.get("", response_model=List[PlaceResponse])
async def get_places(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List saved places, newest first."""
    return list_places(current_user.id, db)


@router.post("", response_model=PlaceResponse, status_code=status.HTTP_201_CREATED)
async def create_place(
    place_data: PlaceCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Save a place of interest."""
    return append_place(current_user.id, place_data, db)
