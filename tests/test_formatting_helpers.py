import pandas as pd
import plotly.graph_objects as go

from src.dashboard.components.formatting import (
    apply_plot_layout_hygiene,
    hex_to_rgba,
    money,
    signed_money,
    style_currency_table,
)


def test_money_formats_grouping_and_sign() -> None:
    assert money(1234.56) == '$1,234.56'
    assert money(-1234.5) == '-$1,234.50'
    assert money(0) == '$0.00'
    assert money(-0.001) == '$0.00'
    assert money(10, 'EUR') == '€10.00'
    assert money(10, 'CHF') == 'CHF 10.00'


def test_signed_money() -> None:
    assert signed_money(50) == '+$50.00'
    assert signed_money(-12.3) == '-$12.30'


def test_style_currency_table_formats_money_signed_and_percent() -> None:
    df = pd.DataFrame(
        {
            'Description': ['Paycheck', 'Coffee'],
            'Amount': [3000.0, -4.5],
            'Balance': [12345.678, 0.0],
            '% Used': [64, 90],
        }
    )
    html = style_currency_table(df, signed_cols={'Amount'}).to_html()
    assert '+$3,000.00' in html
    assert '-$4.50' in html
    assert '$12,345.68' in html
    assert '64%' in html
    assert '#ef4444' in html


def test_style_currency_table_empty_passthrough() -> None:
    df = pd.DataFrame(columns=['Amount'])
    assert style_currency_table(df) is df


def test_apply_plot_layout_hygiene() -> None:
    fig = apply_plot_layout_hygiene(go.Figure(), margin=4)
    assert fig.layout.showlegend is False
    assert fig.layout.margin.t == 4
    assert fig.layout.paper_bgcolor == 'rgba(0,0,0,0)'


def test_hex_to_rgba() -> None:
    assert hex_to_rgba('#7c7cff', 0.16) == 'rgba(124, 124, 255, 0.16)'
    assert hex_to_rgba('red', 0.5) == 'red'
