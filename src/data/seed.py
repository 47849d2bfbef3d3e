"""Initial in-memory ledger used when a session starts."""

from __future__ import annotations

from src.models.ledger import Account, BudgetRow, LedgerState, Transaction
from src.utils.date_utils import today_iso

SPARKLINE_SAMPLE = [12, 14, 13, 16, 18, 17, 19, 21, 22, 20, 24, 26, 28, 27, 29, 31, 33, 32, 36, 38]


def default_accounts() -> tuple[Account, ...]:
    return (
        Account(id='acc1', name='Robinhood', type='Brokerage', balance=10000.0),
        Account(id='acc2', name='Chase', type='Checking', balance=5000.0),
    )


def default_transactions(as_of: str | None = None) -> tuple[Transaction, ...]:
    """Opening-balance entries matching the default account balances."""
    day = as_of or today_iso()
    return (
        Transaction(id='t1', date=day, description='Initial Balance', category='Setup', amount=10000.0, account_id='acc1'),
        Transaction(id='t2', date=day, description='Initial Balance', category='Setup', amount=5000.0, account_id='acc2'),
    )


def default_budgets() -> tuple[BudgetRow, ...]:
    rows = [
        ('Groceries', 500.0, 320.0),
        ('Dining', 200.0, 180.0),
        ('Investments', 1000.0, 1000.0),
    ]
    return tuple(
        BudgetRow(id=str(i + 1), category=category, limit=limit, spent=spent)
        for i, (category, limit, spent) in enumerate(rows)
    )


def default_ledger_state(as_of: str | None = None) -> LedgerState:
    return LedgerState(
        accounts=default_accounts(),
        transactions=default_transactions(as_of),
        budgets=default_budgets(),
    )
