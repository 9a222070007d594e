"""
Ledger service: append-only expenses, incomes and places per owner.
"""
import logging
import time as _time
import uuid
from datetime import date, datetime
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from tripwallet.core.exceptions import DuplicateIdError
from tripwallet.models.ledger import AccountType, Expense, Income, Place
from tripwallet.services.owner_service import require_owner

logger = logging.getLogger(__name__)

ENTRY_MODELS = (Expense, Income, Place)


def generate_entry_id() -> str:
    """Timestamp-prefixed identifier (milliseconds since epoch plus a random suffix)."""
    return f"{int(_time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


def entry_id_exists(owner_id: int, entry_id: str, db: Session) -> bool:
    """Check whether an id is used by any entry kind for this owner."""
    for model in ENTRY_MODELS:
        found = db.query(model.id).filter(
            model.user_id == owner_id,
            model.entry_id == entry_id
        ).first()
        if found:
            return True
    return False


def _append(owner_id: int, entry, db: Session):
    """Persist a new entry, rejecting ids already used by this owner."""
    require_owner(owner_id, db)
    if entry_id_exists(owner_id, entry.entry_id, db):
        logger.warning(f"Rejected duplicate entry id '{entry.entry_id}' for owner {owner_id}")
        raise DuplicateIdError(entry.entry_id)
    
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent append of the same id
        db.rollback()
        logger.warning(f"Rejected duplicate entry id '{entry.entry_id}' for owner {owner_id}")
        raise DuplicateIdError(entry.entry_id)
    db.refresh(entry)
    logger.info(f"Appended {type(entry).__name__.lower()} '{entry.entry_id}' for owner {owner_id}")
    return entry


def append_expense(owner_id: int, data, db: Session) -> Expense:
    """Append an expense. Missing id, date and time default to now."""
    now = datetime.now()
    expense = Expense(
        user_id=owner_id,
        entry_id=data.id or generate_entry_id(),
        title=data.title,
        amount=data.amount,
        category=data.category,
        account=data.account,
        date=data.date or now.date(),
        time=data.time or now.time().replace(second=0, microsecond=0)
    )
    return _append(owner_id, expense, db)


def append_income(owner_id: int, data, db: Session) -> Income:
    """Append an income. Missing id and date default to now."""
    income = Income(
        user_id=owner_id,
        entry_id=data.id or generate_entry_id(),
        title=data.title,
        amount=data.amount,
        category=data.category,
        account=data.account,
        date=data.date or date.today()
    )
    return _append(owner_id, income, db)


def append_place(owner_id: int, data, db: Session) -> Place:
    """Append a place of interest."""
    place = Place(
        user_id=owner_id,
        entry_id=data.id or generate_entry_id(),
        title=data.title,
        category=data.category
    )
    return _append(owner_id, place, db)


def _list(model, owner_id: int, db: Session, account: Optional[AccountType] = None) -> list:
    require_owner(owner_id, db)
    query = db.query(model).filter(model.user_id == owner_id)
    if account is not None:
        query = query.filter(model.account == account)
    # Newest append first
    return query.order_by(model.id.desc()).all()


def list_expenses(owner_id: int, db: Session, account: Optional[AccountType] = None) -> List[Expense]:
    """All expenses for the owner, most recently appended first."""
    return _list(Expense, owner_id, db, account)


def list_incomes(owner_id: int, db: Session, account: Optional[AccountType] = None) -> List[Income]:
    """All incomes for the owner, most recently appended first."""
    return _list(Income, owner_id, db, account)


def list_places(owner_id: int, db: Session) -> List[Place]:
    """All places for the owner, most recently appended first."""
    return _list(Place, owner_id, db)
