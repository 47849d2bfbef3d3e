"""Excel export pack for the ledger and the projection scenarios."""

from __future__ import annotations

from datetime import datetime
from io import BytesIO
from typing import Any

import numpy as np
import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from src.calculations.balances import accounts_frame, invested_balance, total_balance, transactions_frame
from src.calculations.budgets import budgets_frame
from src.calculations.projection import projection_frame
from src.dashboard.components.formatting import CURRENCY_SYMBOLS
from src.dashboard.settings import APP_VERSION
from src.models.ledger import LedgerState
from src.models.series import Series
from src.utils.date_utils import to_timestamp, today

SHEETS = ('Summary_Metadata', 'Accounts', 'Transactions', 'Budgets', 'Projection')
_MONEY_HEADERS = ('amount', 'balance', 'limit', 'spent')


def currency_number_format(currency: str = 'USD') -> str:
    """Excel number format showing `currency` the way `money` does."""
    code = str(currency).upper()
    symbol = CURRENCY_SYMBOLS.get(code, f'{code} ')
    return f'"{symbol}"#,##0.00;-"{symbol}"#,##0.00'


def default_export_filename(as_of: pd.Timestamp | str | None = None) -> str:
    """Return a deterministic export filename."""
    day = to_timestamp(as_of).date().isoformat() if as_of is not None else today().date().isoformat()
    return f'finance_tracker_{day}.xlsx'


def build_export_context(
    state: LedgerState,
    series: list[Series],
    *,
    invested_types: tuple[str, ...],
    contribution: float = 0.0,
    currency: str = 'USD',
) -> dict[str, Any]:
    """Collect the frames written to each export sheet."""
    accounts = accounts_frame(state.accounts).drop(columns=['id']).rename(
        columns={'name': 'Account', 'type': 'Type', 'balance': 'Balance'}
    )
    transactions = transactions_frame(state.transactions, state.accounts)[
        ['date', 'description', 'category', 'account', 'amount']
    ].rename(
        columns={
            'date': 'Date',
            'description': 'Description',
            'category': 'Category',
            'account': 'Account',
            'amount': 'Amount',
        }
    )
    budgets = budgets_frame(state.budgets).drop(columns=['id'])
    projection = projection_frame(series)

    metadata = pd.DataFrame(
        [
            {'Field': 'Generated At', 'Value': datetime.now().isoformat(timespec='seconds')},
            {'Field': 'Currency', 'Value': str(currency)},
            {'Field': 'Total Balance', 'Value': total_balance(state.accounts)},
            {'Field': 'Invested Balance', 'Value': invested_balance(state.accounts, invested_types)},
            {'Field': 'Invested Account Types', 'Value': ', '.join(invested_types)},
            {'Field': 'Yearly Contribution', 'Value': float(contribution)},
            {'Field': 'Scenarios', 'Value': ', '.join(s.name for s in series)},
            {'Field': 'Transaction Count', 'Value': int(len(state.transactions))},
            {'Field': 'App Version', 'Value': APP_VERSION},
        ]
    )
    return {
        'summary_metadata': metadata,
        'accounts': accounts,
        'transactions': transactions,
        'budgets': budgets,
        'projection': projection,
    }


def _format_worksheet(
    ws,
    *,
    header_row: int = 1,
    freeze_panes: str = 'A2',
    money_all: bool = False,
    money_format: str = currency_number_format(),
) -> None:
    ws.freeze_panes = freeze_panes
    max_row = ws.max_row
    max_col = ws.max_column
    if max_row <= 0 or max_col <= 0:
        return

    headers: dict[int, str] = {}
    for col_idx in range(1, max_col + 1):
        cell = ws.cell(row=header_row, column=col_idx)
        cell.font = Font(bold=True)
        headers[col_idx] = str(cell.value or '').strip().lower()

    for row_idx in range(header_row + 1, max_row + 1):
        for col_idx in range(1, max_col + 1):
            cell = ws.cell(row=row_idx, column=col_idx)
            if isinstance(cell.value, (pd.Timestamp, datetime)):
                cell.number_format = 'YYYY-MM-DD'
                continue
            if isinstance(cell.value, bool):
                continue
            if isinstance(cell.value, (int, float, np.integer, np.floating)):
                header = headers.get(col_idx, '')
                if '%' in header:
                    cell.number_format = '0"%"'
                elif header == 'year' or 'count' in header:
                    cell.number_format = '0'
                elif money_all or any(h in header for h in _MONEY_HEADERS):
                    cell.number_format = money_format
                elif isinstance(cell.value, (int, np.integer)):
                    cell.number_format = '0'
                else:
                    cell.number_format = '#,##0.00'

    for col_idx in range(1, max_col + 1):
        max_len = 0
        for row_idx in range(1, min(max_row, 200) + 1):
            val = ws.cell(row=row_idx, column=col_idx).value
            max_len = max(max_len, len('' if val is None else str(val)))
        ws.column_dimensions[get_column_letter(col_idx)].width = min(max(10, max_len + 2), 60)


def build_export_workbook_bytes(context: dict[str, Any], *, workbook_title: str, currency: str = 'USD') -> bytes:
    """Serialize export context into an Excel workbook."""
    output = BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        for sheet in SHEETS:
            pd.DataFrame(context.get(sheet.lower(), pd.DataFrame())).to_excel(writer, sheet_name=sheet, index=False)

        wb = writer.book
        wb.properties.title = str(workbook_title)

        money_format = currency_number_format(currency)
        for sheet in SHEETS:
            _format_worksheet(
                writer.sheets[sheet],
                money_all=(sheet == 'Projection'),
                money_format=money_format,
            )

    return output.getvalue()
