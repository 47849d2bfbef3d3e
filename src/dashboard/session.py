"""Session-state keys and accessors; the ledger has a single writer here."""

from __future__ import annotations

import streamlit as st

from src.data.seed import default_ledger_state
from src.models.ledger import LedgerState

KEY_LEDGER = '_ledger_state'
KEY_NAV = 'main_section'
KEY_SEARCH = 'topbar_search'
KEY_BUDGET_EDITOR_VERSION = '_budget_editor_version'


def ensure_session() -> None:
    """Initialize expected session keys with defaults."""
    ss = st.session_state
    if not isinstance(ss.get(KEY_LEDGER), LedgerState):
        ss[KEY_LEDGER] = default_ledger_state()
    ss.setdefault(KEY_BUDGET_EDITOR_VERSION, 0)


def get_ledger() -> LedgerState:
    ensure_session()
    return st.session_state[KEY_LEDGER]


def set_ledger(state: LedgerState) -> None:
    st.session_state[KEY_LEDGER] = state
