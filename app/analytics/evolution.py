"""
Year-over-Year Evolution

Compares the target year's figures against the immediately preceding year.
The comparison never reaches further back than one year.
"""

from dataclasses import dataclass
from typing import Optional

from app.analytics.figures import YearFigures, compute_year_figures
from app.analytics.records import AnalyticsSnapshot
from app.analytics.scope import Scope
from app.analytics.yields import DEFAULT_AFTER_TAX_FACTOR


@dataclass(frozen=True)
class Evolution:
    """Percentage changes vs. the prior year, plus the prior baselines.

    A None evolution means the prior value was zero and no meaningful
    percentage exists.
    """

    net_benefit_evolution: Optional[float] = None
    total_expenses_evolution: Optional[float] = None
    total_income_evolution: Optional[float] = None
    yield_gross_evolution: Optional[float] = None
    yield_net_evolution: Optional[float] = None
    yield_net_net_evolution: Optional[float] = None

    net_benefit_prev_cents: Optional[int] = None
    total_expenses_prev_cents: Optional[int] = None
    total_income_prev_cents: Optional[int] = None


def percent_change(
    current: float, previous: float, absolute_base: bool = True
) -> Optional[float]:
    """
    Percentage change from previous to current.

    Args:
        current: This year's value
        previous: Prior year's value
        absolute_base: Divide by abs(previous) so a move from a negative
            baseline towards positive reads as growth

    Returns:
        Percentage, or None when previous is zero
    """
    if previous == 0:
        return None
    base = abs(previous) if absolute_base else previous
    return (current - previous) / base * 100


def compute_prior_year(
    snapshot: AnalyticsSnapshot,
    scope: Scope,
    year: int,
    after_tax_factor: float = DEFAULT_AFTER_TAX_FACTOR,
) -> YearFigures:
    """Recompute income, expenses and yields for year - 1 from the same snapshot."""
    return compute_year_figures(snapshot, scope, year - 1, after_tax_factor)


def compare_years(current: YearFigures, previous: YearFigures) -> Evolution:
    """Build the evolution block from two years of figures."""
    return Evolution(
        net_benefit_evolution=percent_change(
            current.net_benefit_cents, previous.net_benefit_cents
        ),
        total_expenses_evolution=percent_change(
            current.total_expenses_cents, previous.total_expenses_cents
        ),
        # Income is non-negative, so its own sign is the base
        total_income_evolution=percent_change(
            current.total_income_cents,
            previous.total_income_cents,
            absolute_base=False,
        ),
        yield_gross_evolution=percent_change(
            current.yields.yield_gross, previous.yields.yield_gross
        ),
        yield_net_evolution=percent_change(
            current.yields.yield_net, previous.yields.yield_net
        ),
        yield_net_net_evolution=percent_change(
            current.yields.yield_net_net, previous.yields.yield_net_net
        ),
        net_benefit_prev_cents=previous.net_benefit_cents,
        total_expenses_prev_cents=previous.total_expenses_cents,
        total_income_prev_cents=previous.total_income_cents,
    )
