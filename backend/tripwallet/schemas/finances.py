"""
Pydantic schemas for fixed trip/savings parameters.
"""
from pydantic import BaseModel


class FixedParametersBase(BaseModel):
    """All eight fixed parameters. Any integer is accepted."""
    total_budget: int = 0
    platinum_ticket: int = 0
    pending_platinum: int = 0
    flight_total: int = 0
    my_flight_share: int = 0
    stay: int = 0
    expected_incoming: int = 0
    base_savings: int = 0


class FixedParametersUpdate(FixedParametersBase):
    """Schema for a full replace of the fixed parameters."""
    pass


class FixedParametersResponse(FixedParametersBase):
    """Schema for fixed parameters response."""
    
    class Config:
        from_attributes = True
