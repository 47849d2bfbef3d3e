"""Summary card renderers for key KPIs."""

from __future__ import annotations

import streamlit as st

from src.dashboard.components.formatting import money


def render_summary_cards(
    total: float,
    invested: float,
    cash: float,
    spend_30d: float,
    *,
    currency: str = 'USD',
) -> None:
    """Render the top KPI row."""
    c1, c2, c3, c4 = st.columns(4)
    c1.metric('Total Balance', money(total, currency))
    c2.metric('Invested', money(invested, currency))
    c3.metric('Cash', money(cash, currency))
    c4.metric('Monthly Spend (30d)', money(spend_30d, currency))


def render_cash_flow(summary: dict[str, float], *, currency: str = 'USD') -> None:
    """2x2 grid of 30-day cash-flow figures."""
    st.markdown('**Cash Flow (30d)**')
    r1c1, r1c2 = st.columns(2)
    r2c1, r2c2 = st.columns(2)
    r1c1.metric('Income', money(summary.get('income', 0.0), currency))
    r1c2.metric('Expenses', money(summary.get('expenses', 0.0), currency))
    r2c1.metric('Invested', money(summary.get('invested', 0.0), currency))
    r2c2.metric('Savings', money(summary.get('savings', 0.0), currency))
