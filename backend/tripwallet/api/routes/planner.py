"""
Daily planner routes.
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from tripwallet.db.session import get_db
from tripwallet.models.user import User
from tripwallet.schemas.summary import AllocationItem, PlannerResponse, TransportItem
from tripwallet.api.dependencies import get_current_user
from tripwallet.services.balance_service import load_owner_ledger, summarize
from tripwallet.services.planner_service import (
    allocate_daily_spend, estimate_transport,
    DEFAULT_FOOD_PCT, DEFAULT_ALCOHOL_PCT, DEFAULT_TRANSPORT_PCT
)

router = APIRouter(prefix="/planner", tags=["planner"])


@router.get("", response_model=PlannerResponse)
async def get_plan(
    food_pct: int = Query(DEFAULT_FOOD_PCT),
    alcohol_pct: int = Query(DEFAULT_ALCOHOL_PCT),
    transport_pct: int = Query(DEFAULT_TRANSPORT_PCT),
    metro_rides: int = Query(4),
    auto_rides: int = Query(2),
    cab_rides: int = Query(1),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Split today's safe spend into buckets and estimate transport cost."""
    balances = summarize(load_owner_ledger(current_user.id, db))
    allocation = allocate_daily_spend(balances.safe_daily_spend, food_pct, alcohol_pct, transport_pct)
    transport = estimate_transport(metro_rides, auto_rides, cab_rides)
    
    return PlannerResponse(
        safe_daily_spend=allocation.safe_daily_spend,
        allocations=[
            AllocationItem(label=label, percentage=pct, amount=amount)
            for label, pct, amount in allocation.allocations
        ],
        buffer_percentage=allocation.buffer_percentage,
        buffer_amount=allocation.buffer_amount,
        transport=[
            TransportItem(mode=mode, rides=rides, fare=fare, cost=cost)
            for mode, rides, fare, cost in transport.rides
        ],
        transport_total=transport.total
    )
