"""
Fixed trip and savings parameters, one row per user.
"""
from sqlalchemy import Column, ForeignKey, Integer
from sqlalchemy.orm import relationship
from tripwallet.db.base import BaseModel

TRIP_FIELDS = (
    "total_budget",
    "platinum_ticket",
    "pending_platinum",
    "flight_total",
    "my_flight_share",
    "stay",
    "expected_incoming",
)
SAVINGS_FIELDS = ("base_savings",)
PARAMETER_FIELDS = TRIP_FIELDS + SAVINGS_FIELDS


class FixedParameters(BaseModel):
    """Editable scalar inputs for the trip and savings accounts."""
    __tablename__ = "fixed_parameters"
    
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)
    
    # Trip account
    total_budget = Column(Integer, nullable=False, default=0)
    platinum_ticket = Column(Integer, nullable=False, default=0)
    pending_platinum = Column(Integer, nullable=False, default=0)  # Unpaid part of the platinum ticket
    flight_total = Column(Integer, nullable=False, default=0)
    my_flight_share = Column(Integer, nullable=False, default=0)
    stay = Column(Integer, nullable=False, default=0)
    expected_incoming = Column(Integer, nullable=False, default=0)
    
    # Savings account
    base_savings = Column(Integer, nullable=False, default=0)
    
    # Relationships
    user = relationship("User", back_populates="fixed_parameters")
    
    @classmethod
    def zeroed(cls, user_id: int) -> "FixedParameters":
        """Unsaved all-zero instance for owners with no stored row."""
        return cls(user_id=user_id, **{field: 0 for field in PARAMETER_FIELDS})
