"""Command functions over the immutable in-memory ledger."""

from __future__ import annotations

import uuid
from dataclasses import replace
from typing import Any

import pandas as pd

from src.data.validator import parse_amount, validate_budget_row, validate_transaction_draft
from src.models.ledger import Account, BudgetRow, LedgerState, Transaction, TransactionDraft
from src.utils.date_utils import today_iso
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

BUDGET_FIELDS = {'category', 'limit', 'spent'}
_EDITOR_COLUMN_FIELDS = {'Category': 'category', 'Limit': 'limit', 'Spent': 'spent'}


def _new_id() -> str:
    return str(uuid.uuid4())


def _adjust_balance(state: LedgerState, account_id: str, delta: float) -> tuple[Account, ...]:
    return tuple(
        replace(a, balance=a.balance + delta) if a.id == account_id else a
        for a in state.accounts
    )


def apply_transaction(
    state: LedgerState,
    draft: TransactionDraft,
    *,
    date: str | None = None,
    transaction_id: str | None = None,
) -> LedgerState:
    """Record a new transaction first in the list and move its account balance."""
    description, category, amount = validate_transaction_draft(draft, state.accounts)
    tx = Transaction(
        id=transaction_id or _new_id(),
        date=date or today_iso(),
        description=description,
        category=category,
        amount=amount,
        account_id=draft.account_id,
    )
    LOGGER.info('Applied transaction %s (%s %.2f) to %s', tx.id, tx.category, tx.amount, tx.account_id)
    return replace(
        state,
        transactions=(tx,) + state.transactions,
        accounts=_adjust_balance(state, tx.account_id, amount),
    )


def reverse_transaction(state: LedgerState, transaction_id: str) -> LedgerState:
    """Delete a transaction and undo its effect on the account balance."""
    tx = next((t for t in state.transactions if t.id == transaction_id), None)
    if tx is None:
        return state
    LOGGER.info('Reversed transaction %s (%.2f) on %s', tx.id, tx.amount, tx.account_id)
    return replace(
        state,
        transactions=tuple(t for t in state.transactions if t.id != transaction_id),
        accounts=_adjust_balance(state, tx.account_id, -tx.amount),
    )


def add_budget_row(
    state: LedgerState,
    category: object,
    limit: object = None,
    spent: object = None,
    *,
    budget_id: str | None = None,
) -> LedgerState:
    """Append a budget row. Blank category raises ValueError."""
    name, lim, sp = validate_budget_row(category, limit, spent)
    row = BudgetRow(id=budget_id or _new_id(), category=name, limit=lim, spent=sp)
    LOGGER.info('Added budget row %s (%s)', row.id, row.category)
    return replace(state, budgets=state.budgets + (row,))


def update_budget_field(state: LedgerState, budget_id: str, field: str, value: object) -> LedgerState:
    """Set one field of a budget row. Non-numeric limit/spent input is ignored."""
    if field not in BUDGET_FIELDS:
        raise ValueError(f'Unknown budget field `{field}`.')

    def _update(row: BudgetRow) -> BudgetRow:
        if row.id != budget_id:
            return row
        if field == 'category':
            return replace(row, category='' if value is None else str(value))
        num = parse_amount(value)
        if num is None:
            return row
        return replace(row, **{field: num})

    return replace(state, budgets=tuple(_update(b) for b in state.budgets))


def remove_budget_row(state: LedgerState, budget_id: str) -> LedgerState:
    LOGGER.info('Removed budget row %s', budget_id)
    return replace(state, budgets=tuple(b for b in state.budgets if b.id != budget_id))


def apply_budget_edits(state: LedgerState, budgets_df: pd.DataFrame, edits: dict[str, Any]) -> tuple[LedgerState, list[str]]:
    """Translate a data-editor delta into budget commands.

    `budgets_df` is the frame the editor was rendered from (its row positions
    are what the delta refers to). Returns the new state and messages for
    rows that could not be added.
    """
    errors: list[str] = []
    if not isinstance(edits, dict):
        return state, errors
    ids = budgets_df['id'].astype(str).tolist() if 'id' in budgets_df.columns else []
    out = state

    for pos, changes in (edits.get('edited_rows') or {}).items():
        idx = int(pos)
        if idx < 0 or idx >= len(ids) or not isinstance(changes, dict):
            continue
        for column, value in changes.items():
            field = _EDITOR_COLUMN_FIELDS.get(str(column))
            if field is not None:
                out = update_budget_field(out, ids[idx], field, value)

    deleted = {int(pos) for pos in (edits.get('deleted_rows') or [])}
    for idx in sorted(deleted):
        if 0 <= idx < len(ids):
            out = remove_budget_row(out, ids[idx])

    for row in edits.get('added_rows') or []:
        if not isinstance(row, dict):
            continue
        try:
            out = add_budget_row(out, row.get('Category'), row.get('Limit'), row.get('Spent'))
        except ValueError as exc:
            LOGGER.warning('Skipped budget row %s: %s', row, exc)
            errors.append(str(exc))
    return out, errors
