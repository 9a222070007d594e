"""
Planner service: splits the safe daily spend into buckets and estimates
daily transport cost.
"""
from dataclasses import dataclass
from typing import List, Tuple
from tripwallet.core.exceptions import PlannerInputError

# Approximate per-ride fares in rupees
RIDE_FARES = {
    "Metro": 40,
    "Auto": 150,
    "Cab": 400,
}

DEFAULT_FOOD_PCT = 40
DEFAULT_ALCOHOL_PCT = 20
DEFAULT_TRANSPORT_PCT = 20


@dataclass(frozen=True)
class DailyAllocation:
    safe_daily_spend: float
    allocations: List[Tuple[str, int, float]]  # (label, percentage, amount)
    buffer_percentage: int
    buffer_amount: float


@dataclass(frozen=True)
class TransportEstimate:
    rides: List[Tuple[str, int, int, int]]  # (mode, rides, fare, cost)
    total: int


def allocate_daily_spend(
    safe_daily_spend: float,
    food_pct: int = DEFAULT_FOOD_PCT,
    alcohol_pct: int = DEFAULT_ALCOHOL_PCT,
    transport_pct: int = DEFAULT_TRANSPORT_PCT
) -> DailyAllocation:
    """Split the safe daily spend by percentage; what is left over is buffer."""
    buckets = [
        ("Food & Dining", food_pct),
        ("Alcohol & Nightlife", alcohol_pct),
        ("Transport", transport_pct),
    ]
    for label, pct in buckets:
        if pct < 0 or pct > 100:
            raise PlannerInputError(f"{label} percentage must be between 0 and 100")
    
    buffer_pct = 100 - sum(pct for _, pct in buckets)
    if buffer_pct < 0:
        raise PlannerInputError("Allocation percentages add up to more than 100")
    
    return DailyAllocation(
        safe_daily_spend=safe_daily_spend,
        allocations=[(label, pct, safe_daily_spend * pct / 100) for label, pct in buckets],
        buffer_percentage=buffer_pct,
        buffer_amount=safe_daily_spend * buffer_pct / 100
    )


def estimate_transport(metro_rides: int = 4, auto_rides: int = 2, cab_rides: int = 1) -> TransportEstimate:
    """Daily transport cost at the fixed per-ride fares."""
    counts = {"Metro": metro_rides, "Auto": auto_rides, "Cab": cab_rides}
    rides = []
    for mode, count in counts.items():
        if count < 0:
            raise PlannerInputError(f"{mode} ride count cannot be negative")
        fare = RIDE_FARES[mode]
        rides.append((mode, count, fare, count * fare))
    return TransportEstimate(rides=rides, total=sum(cost for *_, cost in rides))
