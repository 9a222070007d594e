"""
Balance calculator: derives trip and savings figures from the fixed
parameters and the full ledger of one owner.

Nothing is cached. Every call re-derives all figures from its inputs, and
the inputs may be ORM rows, pydantic models or any object with matching
attribute names.
"""
import logging
from dataclasses import dataclass, asdict
from typing import Iterable, Sequence
from sqlalchemy.orm import Session
from tripwallet.core.utils import format_currency
from tripwallet.models.ledger import AccountType
from tripwallet.services.ledger_service import list_expenses, list_incomes, list_places
from tripwallet.services.parameter_service import get_fixed_parameters

logger = logging.getLogger(__name__)

# Days left in the fixed trip window (28th to 30th)
REMAINING_TRIP_DAYS = 3


@dataclass(frozen=True)
class OwnerLedger:
    """Snapshot of everything one owner has stored."""
    parameters: object
    expenses: Sequence
    incomes: Sequence
    places: Sequence = ()


@dataclass(frozen=True)
class Balances:
    """Derived figures. Only safe_daily_spend can be fractional."""
    trip_dynamic_spent: int
    savings_dynamic_spent: int
    trip_dynamic_income: int
    savings_dynamic_income: int
    trip_effective_spent: int
    trip_total_incoming: int
    trip_remaining_balance: int
    safe_daily_spend: float
    total_savings_balance: int
    
    def as_dict(self) -> dict:
        return asdict(self)
    
    def display(self) -> dict:
        """Formatted currency strings for every figure."""
        return {name: format_currency(value) for name, value in asdict(self).items()}


def _account_total(entries: Iterable, account: AccountType) -> int:
    return sum(entry.amount for entry in entries if entry.account == account)


def compute_balances(params, expenses: Iterable, incomes: Iterable) -> Balances:
    """
    Compute all derived figures.
    
    The pending platinum amount is netted out of the effective spend and then
    subtracted again from the remaining balance as a committed but unpaid
    liability.
    """
    expenses = list(expenses)
    incomes = list(incomes)
    
    trip_dynamic_spent = _account_total(expenses, AccountType.TRIP)
    savings_dynamic_spent = _account_total(expenses, AccountType.SAVINGS)
    trip_dynamic_income = _account_total(incomes, AccountType.TRIP)
    savings_dynamic_income = _account_total(incomes, AccountType.SAVINGS)
    
    trip_effective_spent = (
        params.platinum_ticket
        - params.pending_platinum
        + params.my_flight_share
        + params.stay
        + trip_dynamic_spent
    )
    trip_total_incoming = params.expected_incoming + trip_dynamic_income
    trip_remaining_balance = (
        params.total_budget
        - trip_effective_spent
        - params.pending_platinum
        + trip_total_incoming
    )
    safe_daily_spend = max(0.0, trip_remaining_balance / REMAINING_TRIP_DAYS)
    
    total_savings_balance = params.base_savings + savings_dynamic_income - savings_dynamic_spent
    
    return Balances(
        trip_dynamic_spent=trip_dynamic_spent,
        savings_dynamic_spent=savings_dynamic_spent,
        trip_dynamic_income=trip_dynamic_income,
        savings_dynamic_income=savings_dynamic_income,
        trip_effective_spent=trip_effective_spent,
        trip_total_incoming=trip_total_incoming,
        trip_remaining_balance=trip_remaining_balance,
        safe_daily_spend=safe_daily_spend,
        total_savings_balance=total_savings_balance
    )


def summarize(ledger: OwnerLedger) -> Balances:
    """Compute balances for a loaded owner snapshot."""
    return compute_balances(ledger.parameters, ledger.expenses, ledger.incomes)


def load_owner_ledger(owner_id: int, db: Session) -> OwnerLedger:
    """Read the owner's parameters and full ledger as of now."""
    ledger = OwnerLedger(
        parameters=get_fixed_parameters(owner_id, db),
        expenses=list_expenses(owner_id, db),
        incomes=list_incomes(owner_id, db),
        places=list_places(owner_id, db)
    )
    logger.debug(
        f"Loaded ledger for owner {owner_id}: {len(ledger.expenses)} expenses, "
        f"{len(ledger.incomes)} incomes, {len(ledger.places)} places"
    )
    return ledger
