"""
Pydantic schemas for derived balances, the data snapshot and the planner.
"""
from pydantic import BaseModel
from typing import Dict, List
from tripwallet.schemas.finances import FixedParametersResponse
from tripwallet.schemas.ledger import ExpenseResponse, IncomeResponse, PlaceResponse


class BalanceSummary(BaseModel):
    """Derived figures for one owner, recomputed on every read."""
    trip_dynamic_spent: int
    savings_dynamic_spent: int
    trip_dynamic_income: int
    savings_dynamic_income: int
    trip_effective_spent: int
    trip_total_incoming: int
    trip_remaining_balance: int
    safe_daily_spend: float  # Unrounded; see display for presentation
    total_savings_balance: int
    display: Dict[str, str] = {}  # Formatted currency strings
    
    class Config:
        from_attributes = True


class DataSnapshot(BaseModel):
    """Everything the dashboard needs in a single response."""
    finances: FixedParametersResponse
    expenses: List[ExpenseResponse] = []
    incomes: List[IncomeResponse] = []
    places: List[PlaceResponse] = []
    summary: BalanceSummary


class AllocationItem(BaseModel):
    """Share of the safe daily spend for one bucket."""
    label: str
    percentage: int
    amount: float


class TransportItem(BaseModel):
    """Estimated daily cost for one ride type."""
    mode: str
    rides: int
    fare: int
    cost: int


class PlannerResponse(BaseModel):
    """Smart daily allocation plus transport estimate."""
    safe_daily_spend: float
    allocations: List[AllocationItem]
    buffer_percentage: int
    buffer_amount: float
    transport: List[TransportItem]
    transport_total: int
