"""
Fixed-parameter store: one row of trip/savings inputs per owner.
"""
import logging
from sqlalchemy.orm import Session
from tripwallet.models.finances import FixedParameters, PARAMETER_FIELDS
from tripwallet.services.owner_service import require_owner

logger = logging.getLogger(__name__)


def create_default_parameters(owner_id: int, db: Session) -> FixedParameters:
    """Insert the zeroed parameter row for a newly registered owner."""
    params = FixedParameters.zeroed(owner_id)
    db.add(params)
    db.flush()
    return params


def get_fixed_parameters(owner_id: int, db: Session) -> FixedParameters:
    """
    Get the owner's fixed parameters.
    Returns an unsaved all-zero instance when the owner has never stored any.
    """
    require_owner(owner_id, db)
    params = db.query(FixedParameters).filter(
        FixedParameters.user_id == owner_id
    ).first()
    if params is None:
        return FixedParameters.zeroed(owner_id)
    return params


def set_fixed_parameters(owner_id: int, values, db: Session) -> FixedParameters:
    """
    Replace all eight parameters at once.
    `values` is any object exposing the parameter attributes; no range checks.
    """
    require_owner(owner_id, db)
    params = db.query(FixedParameters).filter(
        FixedParameters.user_id == owner_id
    ).first()
    if params is None:
        params = FixedParameters(user_id=owner_id)
        db.add(params)
    
    for field in PARAMETER_FIELDS:
        setattr(params, field, int(getattr(values, field)))
    
    db.commit()
    db.refresh(params)
    logger.info(f"Updated fixed parameters for owner {owner_id}")
    return params
