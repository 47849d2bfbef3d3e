"""Account, transaction and budget domain models."""

from __future__ import annotations

from dataclasses import dataclass

ACCOUNT_TYPES = ('Brokerage', 'Checking', 'Savings', 'Credit')


@dataclass(frozen=True)
class Account:
    """A named account (e.g. Robinhood, Chase) with its running balance."""

    id: str
    name: str
    type: str
    balance: float


@dataclass(frozen=True)
class Transaction:
    """Single ledger entry. Negative amount = expense, positive = income."""

    id: str
    date: str
    description: str
    category: str
    amount: float
    account_id: str


@dataclass(frozen=True)
class TransactionDraft:
    """Raw form input for a new transaction, before validation."""

    description: str
    category: str
    amount: str | float
    account_id: str


@dataclass(frozen=True)
class BudgetRow:
    """Monthly spending limit for one category."""

    id: str
    category: str
    limit: float
    spent: float


@dataclass(frozen=True)
class LedgerState:
    """Immutable snapshot of all application data."""

    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    budgets: tuple[BudgetRow, ...] = ()

    def account(self, account_id: str) -> Account | None:
        for acc in self.accounts:
            if acc.id == account_id:
                return acc
        return None
