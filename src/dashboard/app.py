"""Streamlit app entrypoint for the personal finance tracker."""

from __future__ import annotations

from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import streamlit as st

from src.calculations.balances import (
    cash_balance,
    cash_flow_summary,
    filter_transactions,
    invested_balance,
    monthly_spend,
    total_balance,
    transactions_frame,
)
from src.dashboard.components.accounts_panel import render_account_cards
from src.dashboard.components.budget_editor import render_budget_editor
from src.dashboard.components.controls import render_sidebar, render_topbar
from src.dashboard.components.dialogs import add_transaction_dialog, confirm_delete_dialog, portfolio_dialog
from src.dashboard.components.formatting import money
from src.dashboard.components.summary_cards import render_cash_flow, render_summary_cards
from src.dashboard.components.transaction_table import render_transactions_table
from src.dashboard.plots.sparkline import build_sparkline_figure
from src.dashboard.session import ensure_session, get_ledger
from src.dashboard.settings import DashboardSettings, load_settings
from src.data.seed import SPARKLINE_SAMPLE
from src.data.validator import validate_accounts
from src.models.ledger import LedgerState
from src.utils.logging import get_logger

RECENT_TRANSACTIONS = 10


def _request_delete(ids: list[str]) -> None:
    if ids:
        confirm_delete_dialog(list(ids))


def _render_dashboard(state: LedgerState, ui: dict, settings: DashboardSettings, search: str) -> None:
    currency = settings.currency
    invested_types = ui['invested_types']
    invested = invested_balance(state.accounts, invested_types)

    render_summary_cards(
        total_balance(state.accounts),
        invested,
        cash_balance(state.accounts, invested_types),
        monthly_spend(state.transactions),
        currency=currency,
    )

    c_chart, c_flow = st.columns([2, 1])
    with c_chart:
        with st.container(border=True):
            st.markdown('**Portfolio Value**')
            st.caption(f'Invested funds: {money(invested, currency)}')
            st.plotly_chart(
                build_sparkline_figure(SPARKLINE_SAMPLE),
                width='stretch',
                config={'displayModeBar': False, 'staticPlot': True},
                key='dashboard_sparkline',
            )
            if st.button('View details', key='dashboard_view_details'):
                portfolio_dialog(
                    settings,
                    years=ui['projection_years'],
                    contribution=ui['contribution'],
                    invested_types=invested_types,
                )
    with c_flow:
        with st.container(border=True):
            render_cash_flow(
                cash_flow_summary(state.transactions, state.accounts, invested_types=invested_types),
                currency=currency,
            )

    tx_df = filter_transactions(transactions_frame(state.transactions, state.accounts), search)
    actions = render_transactions_table(
        tx_df,
        key='dashboard_recent_transactions',
        title='Recent Transactions',
        currency=currency,
        limit=RECENT_TRANSACTIONS,
    )
    _request_delete(actions['delete_ids'])


def _render_transactions(state: LedgerState, settings: DashboardSettings, search: str) -> None:
    tx_df = filter_transactions(transactions_frame(state.transactions, state.accounts), search)
    actions = render_transactions_table(
        tx_df,
        key='all_transactions',
        title=f'All Transactions ({len(tx_df)})',
        currency=settings.currency,
    )
    _request_delete(actions['delete_ids'])


def main() -> None:
    st.set_page_config(page_title='Finance Tracker', page_icon='🟢', layout='wide')
    settings = load_settings()
    get_logger(__name__, level=settings.log_level).debug('Loaded settings %s', settings)
    ensure_session()

    ui = render_sidebar(settings)
    top = render_topbar()
    state = get_ledger()

    for warning in validate_accounts(state.accounts):
        st.warning(warning)

    section = ui['section']
    st.title(section)

    if section == 'Dashboard':
        _render_dashboard(state, ui, settings, top['search'])
    elif section == 'Accounts':
        render_account_cards(state.accounts, currency=settings.currency)
    elif section == 'Transactions':
        _render_transactions(state, settings, top['search'])
    else:
        render_budget_editor(state.budgets, currency=settings.currency)

    if top['add_transaction']:
        add_transaction_dialog()


if __name__ == '__main__':
    main()
