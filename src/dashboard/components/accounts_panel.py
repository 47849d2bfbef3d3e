"""Account cards for the Accounts section."""

from __future__ import annotations

import streamlit as st

from src.dashboard.components.formatting import money
from src.models.ledger import Account

CARDS_PER_ROW = 3


def render_account_cards(accounts: tuple[Account, ...] | list[Account], *, currency: str = 'USD') -> None:
    if not accounts:
        st.caption('No accounts')
        return
    accounts = list(accounts)
    for start in range(0, len(accounts), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, acc in zip(cols, accounts[start:start + CARDS_PER_ROW]):
            with col.container(border=True):
                st.markdown(f'#### {acc.name}')
                st.caption(acc.type)
                st.metric('Balance', money(acc.balance, currency), label_visibility='collapsed')
