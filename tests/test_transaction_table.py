from __future__ import annotations

from src.calculations.balances import transactions_frame
from src.dashboard.components.transaction_table import selected_transaction_ids, transactions_display_frame
from src.data.seed import default_ledger_state


def _display(limit=None):
    state = default_ledger_state(as_of='2026-10-01')
    return transactions_display_frame(transactions_frame(state.transactions, state.accounts), limit=limit)


def test_transactions_display_frame_columns_and_index() -> None:
    df = _display()
    assert df.columns.tolist() == ['Date', 'Description', 'Category', 'Account', 'Amount']
    assert df.index.tolist() == ['t1', 't2']
    assert len(_display(limit=1)) == 1


def test_transactions_display_frame_empty() -> None:
    df = transactions_display_frame(transactions_frame(()))
    assert df.empty
    assert 'Amount' in df.columns


def test_selected_transaction_ids_maps_rows() -> None:
    df = _display()
    assert selected_transaction_ids(df, {'selection': {'rows': [1]}}) == ['t2']
    assert selected_transaction_ids(df, {'selection': {'rows': [0, 5]}}) == ['t1']
    assert selected_transaction_ids(df, None) == []
