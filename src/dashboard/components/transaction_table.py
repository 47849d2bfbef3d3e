"""Transaction table components."""

from __future__ import annotations

from typing import Any

import pandas as pd
import streamlit as st

from src.dashboard.components.formatting import style_currency_table

DISPLAY_COLUMNS = {
    'date': 'Date',
    'description': 'Description',
    'category': 'Category',
    'account': 'Account',
    'amount': 'Amount',
}


def transactions_display_frame(df: pd.DataFrame, *, limit: int | None = None) -> pd.DataFrame:
    """Select and rename columns for display; keeps `id` as the index."""
    if df.empty:
        return pd.DataFrame(columns=list(DISPLAY_COLUMNS.values()))
    out = df.head(limit) if limit is not None else df
    out = out.set_index('id')[list(DISPLAY_COLUMNS)].rename(columns=DISPLAY_COLUMNS)
    out.index.name = None
    return out


def selected_transaction_ids(display_df: pd.DataFrame, selection_state: Any) -> list[str]:
    """Map data-frame row selections back to transaction ids."""
    if not isinstance(selection_state, dict):
        return []
    rows = (selection_state.get('selection') or {}).get('rows') or []
    ids = display_df.index.astype(str).tolist()
    return [ids[int(r)] for r in rows if 0 <= int(r) < len(ids)]


def render_transactions_table(
    df: pd.DataFrame,
    *,
    key: str,
    title: str,
    currency: str = 'USD',
    limit: int | None = None,
) -> dict[str, Any]:
    """Render a transaction table and return requested actions."""
    actions: dict[str, Any] = {'delete_ids': []}
    st.markdown(f'**{title}**')
    display = transactions_display_frame(df, limit=limit)
    if display.empty:
        st.caption('No transactions')
        return actions

    st.dataframe(
        style_currency_table(display, currency=currency, signed_cols={'Amount'}),
        width='stretch',
        hide_index=True,
        on_select='rerun',
        selection_mode='multi-row',
        key=key,
    )
    selected = selected_transaction_ids(display, st.session_state.get(key))
    if st.button(
        f'🗑️ Delete selected ({len(selected)})',
        key=f'{key}_delete',
        disabled=not selected,
        help='Delete transaction',
    ):
        actions['delete_ids'] = selected
    return actions
