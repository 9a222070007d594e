"""
Tests for the append-only ledger.
"""
from datetime import date, time
import pytest
from tripwallet.core.exceptions import DuplicateIdError, NotFoundError
from tripwallet.models.ledger import AccountType, ExpenseCategory, IncomeCategory, PlaceCategory
from tripwallet.schemas.ledger import ExpenseCreate, IncomeCreate, PlaceCreate
from tripwallet.services import ledger_service
from tripwallet.services.ledger_service import (
    append_expense, append_income, append_place,
    list_expenses, list_incomes, list_places, generate_entry_id
)


def new_expense(entry_id, amount=100, account=AccountType.TRIP, **kwargs):
    return ExpenseCreate(id=entry_id, title=f"expense {entry_id}", amount=amount,
                         category=ExpenseCategory.FOOD, account=account, **kwargs)


def new_income(entry_id, amount=100, account=AccountType.TRIP):
    return IncomeCreate(id=entry_id, title=f"income {entry_id}", amount=amount,
                        category=IncomeCategory.FREELANCE_PROJECT, account=account)


def new_place(entry_id):
    return PlaceCreate(id=entry_id, title="Chandni Chowk", category=PlaceCategory.STREET_FOOD)


def test_append_and_list_expense(db, owner):
    append_expense(owner.id, new_expense("e1", 250, date=date(2024, 12, 28), time=time(13, 5)), db)
    
    expenses = list_expenses(owner.id, db)
    assert len(expenses) == 1
    assert expenses[0].entry_id == "e1"
    assert expenses[0].amount == 250
    assert expenses[0].category == ExpenseCategory.FOOD
    assert expenses[0].account == AccountType.TRIP
    assert expenses[0].date == date(2024, 12, 28)
    assert expenses[0].time == time(13, 5)


def test_lists_newest_first(db, owner):
    # Ids deliberately not in lexical order; ordering follows appends
    for entry_id in ["b", "c", "a"]:
        append_expense(owner.id, new_expense(entry_id), db)
        append_income(owner.id, new_income(f"i-{entry_id}"), db)
        append_place(owner.id, new_place(f"p-{entry_id}"), db)
    
    assert [e.entry_id for e in list_expenses(owner.id, db)] == ["a", "c", "b"]
    assert [i.entry_id for i in list_incomes(owner.id, db)] == ["i-a", "i-c", "i-b"]
    assert [p.entry_id for p in list_places(owner.id, db)] == ["p-a", "p-c", "p-b"]


def test_duplicate_id_same_kind_rejected(db, owner):
    append_expense(owner.id, new_expense("dup"), db)
    with pytest.raises(DuplicateIdError):
        append_expense(owner.id, new_expense("dup", 999), db)
    
    assert [e.amount for e in list_expenses(owner.id, db)] == [100]


def test_duplicate_id_across_kinds_rejected(db, owner):
    append_expense(owner.id, new_expense("shared"), db)
    with pytest.raises(DuplicateIdError):
        append_income(owner.id, new_income("shared"), db)
    with pytest.raises(DuplicateIdError):
        append_place(owner.id, new_place("shared"), db)
    
    assert list_incomes(owner.id, db) == []
    assert list_places(owner.id, db) == []


def test_same_id_allowed_for_different_owners(db, owner, other_owner):
    append_expense(owner.id, new_expense("1700000000000"), db)
    append_expense(other_owner.id, new_expense("1700000000000"), db)
    
    assert len(list_expenses(owner.id, db)) == 1
    assert len(list_expenses(other_owner.id, db)) == 1


def test_owners_see_only_their_entries(db, owner, other_owner):
    append_expense(owner.id, new_expense("mine"), db)
    append_income(other_owner.id, new_income("theirs"), db)
    
    assert list_incomes(owner.id, db) == []
    assert list_expenses(other_owner.id, db) == []


def test_filter_by_account(db, owner):
    append_expense(owner.id, new_expense("t", account=AccountType.TRIP), db)
    append_expense(owner.id, new_expense("s", account=AccountType.SAVINGS), db)
    
    savings = list_expenses(owner.id, db, AccountType.SAVINGS)
    assert [e.entry_id for e in savings] == ["s"]


def test_missing_fields_get_defaults(db, owner):
    data = ExpenseCreate(title="Chai", amount=20)
    expense = append_expense(owner.id, data, db)
    
    assert expense.entry_id.split("-")[0].isdigit()
    assert expense.date == date.today()
    assert expense.time is not None
    assert expense.category == ExpenseCategory.FOOD
    assert expense.account == AccountType.TRIP


def test_income_date_defaults_to_today(db, owner):
    income = append_income(owner.id, IncomeCreate(title="Refund", amount=300), db)
    assert income.date == date.today()


def test_unknown_owner(db):
    with pytest.raises(NotFoundError):
        append_expense(424242, new_expense("x"), db)
    with pytest.raises(NotFoundError):
        list_places(424242, db)


def test_generate_entry_id_is_timestamp_prefixed():
    prefix, suffix = generate_entry_id().split("-")
    assert prefix.isdigit()
    assert len(prefix) >= 13
    assert len(suffix) == 8


def test_generated_ids_unique_within_same_millisecond(db, owner, monkeypatch):
    monkeypatch.setattr(ledger_service._time, "time", lambda: 1735372800.123)
    
    first = append_expense(owner.id, ExpenseCreate(title="Chai", amount=20), db)
    second = append_expense(owner.id, ExpenseCreate(title="Samosa", amount=30), db)
    
    assert first.entry_id != second.entry_id
    assert first.entry_id.split("-")[0] == second.entry_id.split("-")[0]
    assert len(list_expenses(owner.id, db)) == 2
