"""Modal dialogs: add transaction, confirm delete and portfolio projection."""

from __future__ import annotations

import streamlit as st

from src.calculations.balances import invested_balance
from src.calculations.projection import build_projection_series
from src.dashboard.components.formatting import money
from src.dashboard.components.legend import effective_period, render_legend, render_stat_cards
from src.dashboard.plots.projection_chart import ProjectionChart, render_projection_chart
from src.dashboard.reporting.export_pack import (
    build_export_context,
    build_export_workbook_bytes,
    default_export_filename,
)
from src.dashboard.session import get_ledger, set_ledger
from src.dashboard.settings import DashboardSettings
from src.dashboard.state import apply_transaction, reverse_transaction
from src.models.ledger import TransactionDraft
from src.models.series import hover_from_index
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

KEY_PORTFOLIO_HOVER = '_portfolio_hover_index'


@st.dialog('Add Transaction')
def add_transaction_dialog() -> None:
    state = get_ledger()
    if not state.accounts:
        st.warning('Add an account before recording transactions.')
        return
    account_names = {a.id: f'{a.name} ({a.type})' for a in state.accounts}
    with st.form('add_transaction_form', border=False):
        description = st.text_input('Description', placeholder='e.g. Salary, Rent, Coffee')
        category = st.text_input('Category', placeholder='General')
        amount = st.text_input('Amount', placeholder='Negative for spending, e.g. -42.50')
        account_id = st.selectbox('Account', options=list(account_names), format_func=account_names.get)
        submitted = st.form_submit_button('Add', type='primary')
    if not submitted:
        return
    try:
        new_state = apply_transaction(
            state,
            TransactionDraft(description=description, category=category, amount=amount, account_id=account_id),
        )
    except ValueError as exc:
        st.error(str(exc))
        return
    set_ledger(new_state)
    st.rerun()


@st.dialog('Delete Transaction')
def confirm_delete_dialog(transaction_ids: list[str]) -> None:
    state = get_ledger()
    targets = [t for t in state.transactions if t.id in set(transaction_ids)]
    if not targets:
        st.caption('Nothing to delete.')
        return
    st.write(f'Delete {len(targets)} transaction(s)? Account balances will be restored.')
    for tx in targets:
        st.markdown(f'- {tx.date} · {tx.description} · **{money(tx.amount)}**')
    c1, c2 = st.columns(2)
    if c1.button('Delete', type='primary', width='stretch'):
        for tx in targets:
            state = reverse_transaction(state, tx.id)
        set_ledger(state)
        st.rerun()
    if c2.button('Cancel', width='stretch'):
        st.rerun()


def _store_hover_index(index: int | None) -> None:
    st.session_state[KEY_PORTFOLIO_HOVER] = index


@st.dialog('Portfolio Value Projection', width='large')
def portfolio_dialog(
    settings: DashboardSettings,
    *,
    years: int,
    contribution: float,
    invested_types: tuple[str, ...],
) -> None:
    state = get_ledger()
    start = invested_balance(state.accounts, invested_types)
    st.markdown(f'**{years}-Year Projection (Invested Funds Only)**')

    series = build_projection_series(start, years=years, contribution=contribution)
    chart = ProjectionChart(
        series,
        width=settings.chart_width,
        height=settings.chart_height,
        padding=settings.chart_padding,
        on_hover_index_change=_store_hover_index,
    )
    # An idle chart never calls the observer, so clear the stored index first.
    st.session_state[KEY_PORTFOLIO_HOVER] = None
    render_projection_chart(chart, key='portfolio_projection', currency=settings.currency)

    hover = hover_from_index(st.session_state.get(KEY_PORTFOLIO_HOVER))
    render_legend(chart.series, hover, currency=settings.currency)
    render_stat_cards(chart.series, hover, currency=settings.currency)
    st.caption(
        f'Starting invested balance: {money(start, settings.currency)} · '
        f'Year: {effective_period(chart.series, hover)}'
    )

    c1, c2 = st.columns(2)
    with c1:
        try:
            context = build_export_context(
                state,
                chart.series,
                invested_types=invested_types,
                contribution=contribution,
                currency=settings.currency,
            )
            st.download_button(
                label='Download Export Pack (.xlsx)',
                data=build_export_workbook_bytes(
                    context,
                    workbook_title='Finance Tracker Export Pack',
                    currency=settings.currency,
                ),
                file_name=default_export_filename(),
                mime='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
                key='portfolio_download_export',
                width='stretch',
            )
        except ValueError as exc:
            LOGGER.exception('Export pack failed')
            st.error(f'Failed to generate export: {exc}')
    if c2.button('Close', width='stretch'):
        st.rerun()
