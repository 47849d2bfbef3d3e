"""Budget usage calculations."""

from __future__ import annotations

import math
from collections.abc import Iterable

import pandas as pd

from src.models.ledger import BudgetRow


def percent_used(spent: float, limit: float) -> int:
    """Whole-number share of the limit already spent; 0 when there is no limit."""
    if limit <= 0:
        return 0
    return int(math.floor(spent / limit * 100.0 + 0.5))


def budget_totals(budgets: Iterable[BudgetRow]) -> dict[str, float]:
    rows = list(budgets)
    return {
        'limit': float(sum(b.limit for b in rows)),
        'spent': float(sum(b.spent for b in rows)),
    }


def budgets_frame(budgets: Iterable[BudgetRow]) -> pd.DataFrame:
    """Editable budget table with derived `% Used` and `Over Limit` columns."""
    rows = [
        {
            'id': b.id,
            'Category': b.category,
            'Spent': float(b.spent),
            'Limit': float(b.limit),
            '% Used': percent_used(b.spent, b.limit),
            'Over Limit': bool(b.spent > b.limit),
        }
        for b in budgets
    ]
    return pd.DataFrame(rows, columns=['id', 'Category', 'Spent', 'Limit', '% Used', 'Over Limit'])
