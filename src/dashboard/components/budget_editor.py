"""Editable monthly budget table."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from src.calculations.budgets import budget_totals, budgets_frame
from src.dashboard.components.formatting import money
from src.dashboard.session import KEY_BUDGET_EDITOR_VERSION, get_ledger, set_ledger
from src.dashboard.state import apply_budget_edits
from src.models.ledger import BudgetRow

KEY_BUDGET_ERRORS = '_budget_editor_errors'


def _editor_key() -> str:
    return f'budget_editor_{int(st.session_state.get(KEY_BUDGET_EDITOR_VERSION, 0))}'


def _commit_budget_edits(editor_key: str, budgets_df: pd.DataFrame) -> None:
    new_state, errors = apply_budget_edits(get_ledger(), budgets_df, st.session_state.get(editor_key))
    set_ledger(new_state)
    # Fresh key so the applied delta is not replayed against the new rows.
    st.session_state[KEY_BUDGET_EDITOR_VERSION] = int(st.session_state.get(KEY_BUDGET_EDITOR_VERSION, 0)) + 1
    st.session_state[KEY_BUDGET_ERRORS] = errors


def render_budget_editor(budgets: tuple[BudgetRow, ...], *, currency: str = 'USD') -> None:
    """Budget table with inline edits, row add and row delete."""
    totals = budget_totals(budgets)
    st.subheader('Monthly Budgets')
    st.caption(f'Total {money(totals["spent"], currency)} of {money(totals["limit"], currency)} used')

    df = budgets_frame(budgets)
    key = _editor_key()
    st.data_editor(
        df,
        key=key,
        num_rows='dynamic',
        hide_index=True,
        width='stretch',
        column_order=['Category', 'Spent', 'Limit', '% Used', 'Over Limit'],
        column_config={
            'Category': st.column_config.TextColumn(required=True),
            'Spent': st.column_config.NumberColumn(format='%.2f'),
            'Limit': st.column_config.NumberColumn(format='%.2f', min_value=0.0),
            '% Used': st.column_config.ProgressColumn(min_value=0, max_value=100, format='%d%%'),
            'Over Limit': st.column_config.CheckboxColumn(),
        },
        disabled=['% Used', 'Over Limit'],
        on_change=_commit_budget_edits,
        args=(key, df),
    )
    for msg in st.session_state.pop(KEY_BUDGET_ERRORS, None) or []:
        st.error(msg)
