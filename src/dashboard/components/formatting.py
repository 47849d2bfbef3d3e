"""Shared dashboard formatting helpers."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

CURRENCY_SYMBOLS = {'USD': '$', 'EUR': '€', 'GBP': '£', 'JPY': '¥'}


def money(amount: float, currency: str = 'USD') -> str:
    """Format an amount as currency text, e.g. `$1,234.56` or `-$1,234.56`."""
    symbol = CURRENCY_SYMBOLS.get(str(currency).upper(), f'{currency} ')
    value = float(amount)
    text = f'{symbol}{abs(value):,.2f}'
    if value < 0 and round(abs(value), 2) != 0:
        return f'-{text}'
    return text


def signed_money(amount: float, currency: str = 'USD') -> str:
    """Transaction-style amount with an explicit sign: `+$50.00`, `-$12.30`."""
    sign = '-' if float(amount) < 0 else '+'
    return f'{sign}{money(abs(float(amount)), currency)}'


def amount_color(amount: float) -> str:
    return 'color: #ef4444' if float(amount) < 0 else 'color: #22c55e'


def style_currency_table(
    df: pd.DataFrame,
    *,
    currency: str = 'USD',
    signed_cols: set[str] | None = None,
    percent_cols: set[str] | None = None,
) -> pd.io.formats.style.Styler | pd.DataFrame:
    """Apply consistent money formatting across dashboard tables."""
    if df.empty:
        return df
    signed_cols = signed_cols or set()
    percent_cols = percent_cols or set()
    formats: dict[str, object] = {}
    for col in df.columns:
        if not pd.api.types.is_numeric_dtype(df[col]) or pd.api.types.is_bool_dtype(df[col]):
            continue
        if col in percent_cols or '%' in str(col):
            formats[col] = '{:,.0f}%'
        elif col in signed_cols:
            formats[col] = lambda v, c=currency: signed_money(v, c)
        else:
            formats[col] = lambda v, c=currency: money(v, c)
    if not formats:
        return df
    styler = df.style.format(formats, na_rep='-')
    colored = [c for c in signed_cols if c in df.columns]
    if colored:
        styler = styler.map(amount_color, subset=colored)
    return styler


def apply_plot_layout_hygiene(fig: go.Figure, *, margin: int = 0) -> go.Figure:
    """Transparent background and tight margins for embedded dashboard charts."""
    fig.update_layout(
        margin=dict(t=margin, r=margin, b=margin, l=margin),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        showlegend=False,
    )
    return fig


def hex_to_rgba(color: str, alpha: float) -> str:
    """Convert `#rrggbb` to an `rgba()` string; other tokens pass through."""
    text = str(color).strip()
    if text.startswith('#') and len(text) == 7:
        r, g, b = (int(text[i:i + 2], 16) for i in (1, 3, 5))
        return f'rgba({r}, {g}, {b}, {alpha})'
    return text
