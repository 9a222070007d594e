"""
Owner lookup shared by the ledger and parameter services.
"""
from sqlalchemy.orm import Session
from tripwallet.core.exceptions import NotFoundError
from tripwallet.models.user import User


def require_owner(owner_id: int, db: Session) -> User:
    """Return the owning user or raise NotFoundError."""
    owner = db.query(User).filter(User.id == owner_id).first()
    if not owner:
        raise NotFoundError(f"Owner {owner_id} not found")
    return owner
