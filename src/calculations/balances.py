"""Balance and cash-flow aggregations over the ledger."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from src.models.ledger import Account, Transaction
from src.utils.date_utils import today, trailing_window

DEFAULT_INVESTED_TYPES: tuple[str, ...] = ('Brokerage',)
CASH_FLOW_WINDOW_DAYS = 30


def total_balance(accounts: Iterable[Account]) -> float:
    return float(sum(a.balance for a in accounts))


def invested_balance(accounts: Iterable[Account], invested_types: Iterable[str] = DEFAULT_INVESTED_TYPES) -> float:
    """Sum balances of accounts whose type counts as invested (growth-projected)."""
    kinds = set(invested_types)
    return float(sum(a.balance for a in accounts if a.type in kinds))


def cash_balance(accounts: Iterable[Account], invested_types: Iterable[str] = DEFAULT_INVESTED_TYPES) -> float:
    """Non-invested balance, floored at zero."""
    accounts = list(accounts)
    return max(0.0, total_balance(accounts) - invested_balance(accounts, invested_types))


def transactions_frame(transactions: Iterable[Transaction], accounts: Iterable[Account] = ()) -> pd.DataFrame:
    """Tabular view of transactions, newest-first order preserved."""
    names = {a.id: a.name for a in accounts}
    types = {a.id: a.type for a in accounts}
    rows = [
        {
            'id': t.id,
            'date': t.date,
            'description': t.description,
            'category': t.category,
            'amount': float(t.amount),
            'account_id': t.account_id,
            'account': names.get(t.account_id, t.account_id),
            'account_type': types.get(t.account_id, ''),
        }
        for t in transactions
    ]
    cols = ['id', 'date', 'description', 'category', 'amount', 'account_id', 'account', 'account_type']
    return pd.DataFrame(rows, columns=cols)


def _window(df: pd.DataFrame, as_of: pd.Timestamp | None, days: int) -> pd.DataFrame:
    if df.empty:
        return df
    start, end = trailing_window(as_of if as_of is not None else today(), days)
    dates = pd.to_datetime(df['date'], errors='coerce')
    return df[(dates >= start) & (dates <= end)].copy()


def monthly_spend(
    transactions: Iterable[Transaction],
    *,
    as_of: pd.Timestamp | None = None,
    days: int = CASH_FLOW_WINDOW_DAYS,
) -> float:
    """Total expenses (as a positive number) in the trailing window."""
    df = _window(transactions_frame(transactions), as_of, days)
    if df.empty:
        return 0.0
    return float(-df.loc[df['amount'] < 0, 'amount'].sum())


def cash_flow_summary(
    transactions: Iterable[Transaction],
    accounts: Iterable[Account],
    *,
    invested_types: Iterable[str] = DEFAULT_INVESTED_TYPES,
    as_of: pd.Timestamp | None = None,
    days: int = CASH_FLOW_WINDOW_DAYS,
) -> dict[str, float]:
    """Income, expenses, invested inflows and savings inflows over the trailing window."""
    df = _window(transactions_frame(transactions, accounts), as_of, days)
    if df.empty:
        return {'income': 0.0, 'expenses': 0.0, 'invested': 0.0, 'savings': 0.0}
    kinds = set(invested_types)
    inflow = df['amount'] > 0
    return {
        'income': float(df.loc[inflow, 'amount'].sum()),
        'expenses': float(-df.loc[df['amount'] < 0, 'amount'].sum()),
        'invested': float(df.loc[inflow & df['account_type'].isin(kinds), 'amount'].sum()),
        'savings': float(df.loc[inflow & (df['account_type'] == 'Savings'), 'amount'].sum()),
    }


def accounts_frame(accounts: Iterable[Account]) -> pd.DataFrame:
    rows = [{'id': a.id, 'name': a.name, 'type': a.type, 'balance': float(a.balance)} for a in accounts]
    return pd.DataFrame(rows, columns=['id', 'name', 'type', 'balance'])


def filter_transactions(df: pd.DataFrame, query: str | None) -> pd.DataFrame:
    """Case-insensitive match of `query` against description, category and account."""
    text = str(query or '').strip().lower()
    if df.empty or not text:
        return df
    haystack = (
        df['description'].astype(str).str.lower()
        + ' ' + df['category'].astype(str).str.lower()
        + ' ' + df.get('account', pd.Series('', index=df.index)).astype(str).str.lower()
    )
    return df[haystack.str.contains(text, regex=False)].copy()
