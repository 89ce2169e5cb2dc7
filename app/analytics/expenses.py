"""
Expense Aggregation

Buckets a year's expenses by month and category, in cents.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, List

import numpy as np

from app.analytics.money import Cents
from app.analytics.records import ExpenseRecord
from app.analytics.scope import Scope


@dataclass(frozen=True)
class ExpenseTotals:
    """Expense totals for one calendar year, in cents."""

    monthly_expenses: List[Cents]
    category_totals: Dict[str, Cents]
    total_deductible_cents: Cents
    total_recoverable_cents: Cents

    @property
    def total_expenses_cents(self) -> Cents:
        return Cents(sum(self.monthly_expenses))


def aggregate_expenses(
    expenses: Iterable[ExpenseRecord],
    scope: Scope,
    year: int,
) -> ExpenseTotals:
    """
    Aggregate the expenses dated within [Jan 1, Dec 31] of the year.

    Deductible amounts are summed unconditionally; recoverable amounts only
    when the expense is flagged recoverable.
    """
    start = date(year, 1, 1)
    end = date(year, 12, 31)

    monthly = np.zeros(12, dtype=np.int64)
    categories: Dict[str, int] = {}
    deductible = 0
    recoverable = 0

    for expense in expenses:
        if expense.property_id not in scope.property_ids:
            continue
        if not start <= expense.date_occurred <= end:
            continue

        monthly[expense.date_occurred.month - 1] += expense.amount_total_cents
        categories[expense.category] = (
            categories.get(expense.category, 0) + expense.amount_total_cents
        )
        deductible += expense.amount_deductible_cents or 0
        if expense.is_recoverable:
            recoverable += expense.amount_recoverable_cents or 0

    return ExpenseTotals(
        monthly_expenses=[Cents(int(v)) for v in monthly],
        category_totals={k: Cents(v) for k, v in categories.items()},
        total_deductible_cents=Cents(deductible),
        total_recoverable_cents=Cents(recoverable),
    )
