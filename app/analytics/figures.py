"""
Per-year figures: income, expenses and yields computed in one pass.
"""

from dataclasses import dataclass

from app.analytics.expenses import ExpenseTotals, aggregate_expenses
from app.analytics.income import LeaseIncome, aggregate_lease_income
from app.analytics.money import Cents
from app.analytics.records import AnalyticsSnapshot
from app.analytics.scope import Scope
from app.analytics.yields import DEFAULT_AFTER_TAX_FACTOR, Yields, calculate_yields


@dataclass(frozen=True)
class YearFigures:
    year: int
    income: LeaseIncome
    expenses: ExpenseTotals
    yields: Yields

    @property
    def total_income_cents(self) -> Cents:
        return self.income.total_income_cents

    @property
    def total_expenses_cents(self) -> Cents:
        return self.expenses.total_expenses_cents

    @property
    def net_benefit_cents(self) -> Cents:
        return self.yields.net_benefit_cents


def compute_year_figures(
    snapshot: AnalyticsSnapshot,
    scope: Scope,
    year: int,
    after_tax_factor: float = DEFAULT_AFTER_TAX_FACTOR,
) -> YearFigures:
    """Aggregate income and expenses for the year and derive its yields."""
    income = aggregate_lease_income(snapshot.lease_periods, scope, year)
    expenses = aggregate_expenses(snapshot.expenses, scope, year)
    yields = calculate_yields(
        annual_base_rent_cents=income.annual_base_rent_cents,
        monthly_income=income.monthly_income,
        monthly_expenses=expenses.monthly_expenses,
        property_value=scope.property_value,
        after_tax_factor=after_tax_factor,
    )
    return YearFigures(year=year, income=income, expenses=expenses, yields=yields)
