"""Shared UI controls and state normalization helpers."""

from __future__ import annotations

from typing import Any

import streamlit as st

from src.dashboard.session import KEY_NAV, KEY_SEARCH
from src.dashboard.settings import APP_VERSION, DashboardSettings
from src.models.ledger import ACCOUNT_TYPES

NAV_OPTIONS = ['Dashboard', 'Accounts', 'Transactions', 'Budgets']
NAV_ICONS = {'Dashboard': '🏠', 'Accounts': '💼', 'Transactions': '📄', 'Budgets': '📊'}
DEFAULT_SECTION = 'Dashboard'


def coerce_option(current: Any, options: list[Any], default: Any) -> Any:
    """Return a stable option value that is guaranteed to be in options."""
    if not options:
        return default
    if current in options:
        return current
    if default in options:
        return default
    return options[0]


def coerce_account_types(current: Any, default: tuple[str, ...]) -> list[str]:
    """Keep only known account types; fall back to `default` when nothing valid remains."""
    if not isinstance(current, (list, tuple)):
        return list(default)
    kinds = [k for k in ACCOUNT_TYPES if k in set(current)]
    return kinds or list(default)


def _stable_radio(
    *,
    label: str,
    options: list[str],
    key: str,
    default: str,
    horizontal: bool = True,
    format_func=None,
) -> str:
    current = coerce_option(st.session_state.get(key, default), options, default)
    st.session_state[key] = current
    if format_func is None:
        return st.radio(label, options=options, horizontal=horizontal, key=key)
    return st.radio(label, options=options, horizontal=horizontal, key=key, format_func=format_func)


def render_sidebar(settings: DashboardSettings) -> dict[str, Any]:
    """Render navigation and projection settings; return normalized UI state."""
    with st.sidebar:
        st.markdown('### 🟢 Finance Tracker')
        section = _stable_radio(
            label='Navigation',
            options=NAV_OPTIONS,
            key=KEY_NAV,
            default=DEFAULT_SECTION,
            horizontal=False,
            format_func=lambda s: f'{NAV_ICONS.get(s, "")} {s}',
        )

        with st.expander('⚙️ Settings', expanded=False):
            years = int(
                st.number_input(
                    'Projection horizon (years)',
                    min_value=0,
                    max_value=60,
                    value=int(st.session_state.get('settings_projection_years', settings.projection_years)),
                    step=1,
                    key='settings_projection_years',
                )
            )
            contribution = float(
                st.number_input(
                    'Yearly contribution',
                    value=float(st.session_state.get('settings_contribution', settings.annual_contribution)),
                    step=500.0,
                    format='%.2f',
                    key='settings_contribution',
                )
            )
            type_key = 'settings_invested_types'
            st.session_state[type_key] = coerce_account_types(
                st.session_state.get(type_key, list(settings.invested_account_types)),
                settings.invested_account_types,
            )
            invested_types = st.multiselect(
                'Invested account types',
                options=list(ACCOUNT_TYPES),
                key=type_key,
                help='Balances of these account types feed the growth projection.',
            )

        st.caption(f'v{APP_VERSION} • local')

    return {
        'section': section,
        'projection_years': years,
        'contribution': contribution,
        'invested_types': tuple(coerce_account_types(invested_types, settings.invested_account_types)),
    }


def render_topbar() -> dict[str, Any]:
    """Search box and primary actions above the main content."""
    c1, c2 = st.columns([4, 1])
    with c1:
        search = st.text_input(
            'Search',
            placeholder='🔎 Search transactions, categories, accounts…',
            key=KEY_SEARCH,
            label_visibility='collapsed',
        )
    with c2:
        add_clicked = st.button('+ Add Transaction', key='topbar_add_transaction', width='stretch')
    return {'search': search, 'add_transaction': add_clicked}
