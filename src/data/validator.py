"""Input validation for ledger commands and chart series."""

from __future__ import annotations

import math
from dataclasses import replace

import pandas as pd

from src.models.ledger import ACCOUNT_TYPES, Account, TransactionDraft
from src.models.series import Series

DEFAULT_CATEGORY = 'General'


def parse_amount(value: object) -> float | None:
    """Parse user input into a finite float, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    num = pd.to_numeric(value, errors='coerce')
    if pd.isna(num):
        return None
    num = float(num)
    if not math.isfinite(num):
        return None
    return num


def validate_transaction_draft(
    draft: TransactionDraft,
    accounts: tuple[Account, ...] | list[Account],
) -> tuple[str, str, float]:
    """Return cleaned (description, category, amount) or raise ValueError."""
    description = str(draft.description or '').strip()
    if not description:
        raise ValueError('Description is required.')
    amount = parse_amount(draft.amount)
    if amount is None:
        raise ValueError(f'Amount `{draft.amount}` is not a number.')
    account_ids = {a.id for a in accounts}
    if draft.account_id not in account_ids:
        raise ValueError(f'Unknown account `{draft.account_id}`.')
    category = str(draft.category or '').strip() or DEFAULT_CATEGORY
    return description, category, amount


def validate_budget_row(category: object, limit: object, spent: object) -> tuple[str, float, float]:
    """Return cleaned (category, limit, spent) or raise ValueError.

    Blank limit/spent default to 0.
    """
    name = '' if category is None or (isinstance(category, float) and math.isnan(category)) else str(category).strip()
    if not name:
        raise ValueError('Budget category is required.')
    values: list[float] = []
    for label, raw in (('Limit', limit), ('Spent', spent)):
        if raw is None or (isinstance(raw, str) and not raw.strip()) or (isinstance(raw, float) and math.isnan(raw)):
            values.append(0.0)
            continue
        num = parse_amount(raw)
        if num is None:
            raise ValueError(f'{label} `{raw}` is not a number.')
        values.append(num)
    return name, values[0], values[1]


def validate_accounts(accounts: tuple[Account, ...] | list[Account]) -> list[str]:
    """Validate account records and return non-fatal warnings."""
    ids = [a.id for a in accounts]
    if len(ids) != len(set(ids)):
        raise ValueError('Duplicate account id values found.')
    warnings: list[str] = []
    unknown = [a.name for a in accounts if a.type not in ACCOUNT_TYPES]
    if unknown:
        warnings.append(f'{len(unknown)} accounts have an unrecognized type: {unknown}')
    return warnings


def validate_series(series: list[Series], *, truncate: bool = False) -> tuple[list[Series], list[str]]:
    """Check a chart series set shares one period axis.

    Returns the (possibly truncated) series and non-fatal warnings. Raises
    ValueError for an empty set, an empty series, or mismatched lengths when
    `truncate` is False.
    """
    if not series:
        raise ValueError('At least one series is required.')
    empty = [s.name for s in series if len(s.points) == 0]
    if empty:
        raise ValueError(f'Series without points: {empty}')

    warnings: list[str] = []
    lengths = {len(s.points) for s in series}
    if len(lengths) > 1:
        if not truncate:
            raise ValueError(f'Series point counts differ: {sorted(lengths)}')
        shortest = min(lengths)
        warnings.append(f'Series point counts differ {sorted(lengths)}; truncated to {shortest}.')
        series = [replace(s, points=s.points[:shortest]) for s in series]

    reference = series[0].periods
    for s in series[1:]:
        if s.periods != reference:
            raise ValueError(f'Series `{s.name}` does not share the period axis of `{series[0].name}`.')
    return list(series), warnings
