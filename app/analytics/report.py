"""
Annual Report Assembly

Runs the analytics pipeline for one (scope, year) pair and shapes the
result. Amounts stay in integer cents until they are converted here.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional

from app.analytics.categories import category_color, category_label
from app.analytics.evolution import Evolution, compare_years, compute_prior_year
from app.analytics.figures import YearFigures, compute_year_figures
from app.analytics.money import to_major
from app.analytics.records import AnalyticsSnapshot
from app.analytics.scope import Scope, resolve_scope
from app.analytics.vacancy import VacancyEstimate, estimate_vacancy_loss
from app.analytics.yields import DEFAULT_AFTER_TAX_FACTOR

logger = logging.getLogger(__name__)

DECIMALS = 2


@dataclass(frozen=True)
class CashflowMonth:
    month: int  # 1..12
    income: float
    expenses: float


@dataclass(frozen=True)
class ExpenseShare:
    category: str
    label: str
    amount: float
    color: Optional[str] = None


@dataclass(frozen=True)
class AnalyticsReport:
    """Yearly financial report for one property or a whole portfolio."""

    year: int
    total_income: float
    total_expenses: float
    net_benefit: float
    cashflow: List[CashflowMonth]
    expense_distribution: List[ExpenseShare]
    yield_gross: float
    yield_net: float
    yield_net_net: float
    property_value: float
    total_deductible: float
    total_recoverable: float
    vacancy_loss: float

    net_benefit_evolution: Optional[float] = None
    total_expenses_evolution: Optional[float] = None
    total_income_evolution: Optional[float] = None
    yield_gross_evolution: Optional[float] = None
    yield_net_evolution: Optional[float] = None
    yield_net_net_evolution: Optional[float] = None

    net_benefit_prev: Optional[float] = None
    total_expenses_prev: Optional[float] = None
    total_income_prev: Optional[float] = None

    property_ids: List[str] = field(default_factory=list)


def _round(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return round(value, DECIMALS)


def _major(cents: Optional[int]) -> Optional[float]:
    if cents is None:
        return None
    return to_major(cents)


def build_cashflow(figures: YearFigures) -> List[CashflowMonth]:
    """Pair monthly income and expenses, in major units."""
    return [
        CashflowMonth(month=i + 1, income=to_major(inc), expenses=to_major(exp))
        for i, (inc, exp) in enumerate(
            zip(figures.income.monthly_income, figures.expenses.monthly_expenses)
        )
    ]


def build_expense_distribution(category_totals: Dict[str, int]) -> List[ExpenseShare]:
    """Category breakdown sorted by descending amount, then category."""
    ordered = sorted(category_totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        ExpenseShare(
            category=category,
            label=category_label(category),
            amount=to_major(cents),
            color=category_color(category),
        )
        for category, cents in ordered
    ]


def assemble_report(
    scope: Scope,
    current: YearFigures,
    vacancy: VacancyEstimate,
    evolution: Evolution,
) -> AnalyticsReport:
    """Convert cents to major units and round yields; no business logic."""
    yields = current.yields
    return AnalyticsReport(
        year=current.year,
        total_income=to_major(current.total_income_cents),
        total_expenses=to_major(current.total_expenses_cents),
        net_benefit=to_major(current.net_benefit_cents),
        cashflow=build_cashflow(current),
        expense_distribution=build_expense_distribution(
            current.expenses.category_totals
        ),
        yield_gross=_round(yields.yield_gross),
        yield_net=_round(yields.yield_net),
        yield_net_net=_round(yields.yield_net_net),
        property_value=float(scope.property_value),
        total_deductible=to_major(current.expenses.total_deductible_cents),
        total_recoverable=to_major(current.expenses.total_recoverable_cents),
        vacancy_loss=to_major(vacancy.vacancy_loss_cents),
        net_benefit_evolution=_round(evolution.net_benefit_evolution),
        total_expenses_evolution=_round(evolution.total_expenses_evolution),
        total_income_evolution=_round(evolution.total_income_evolution),
        yield_gross_evolution=_round(evolution.yield_gross_evolution),
        yield_net_evolution=_round(evolution.yield_net_evolution),
        yield_net_net_evolution=_round(evolution.yield_net_net_evolution),
        net_benefit_prev=_major(evolution.net_benefit_prev_cents),
        total_expenses_prev=_major(evolution.total_expenses_prev_cents),
        total_income_prev=_major(evolution.total_income_prev_cents),
        property_ids=sorted(scope.property_ids),
    )


def compute_annual_report(
    snapshot: AnalyticsSnapshot,
    year: int,
    today: date,
    after_tax_factor: float = DEFAULT_AFTER_TAX_FACTOR,
) -> AnalyticsReport:
    """
    Compute the yearly financial report.

    Args:
        snapshot: Records fetched for the scope (expenses covering year - 1
            and year)
        year: Target calendar year
        today: The current date, deciding whether the year is past, current
            or future for vacancy loss
        after_tax_factor: Share of a positive net yield kept after tax

    Returns:
        AnalyticsReport. Evolution and prior-year fields are None when the
        prior year cannot be computed or its baseline is zero.
    """
    scope = resolve_scope(snapshot.properties)
    logger.debug(
        f"Computing {year} report for {len(scope.property_ids)} properties "
        f"(value {scope.property_value})"
    )

    current = compute_year_figures(snapshot, scope, year, after_tax_factor)
    vacancy = estimate_vacancy_loss(
        snapshot.listings, current.income.monthly_income, scope, year, today
    )

    try:
        previous = compute_prior_year(snapshot, scope, year, after_tax_factor)
        evolution = compare_years(current, previous)
    except Exception:
        logger.exception(f"Failed to compute {year - 1} figures for evolution")
        evolution = Evolution()

    logger.debug(
        f"{year}: income={current.total_income_cents} "
        f"expenses={current.total_expenses_cents} "
        f"vacancy_loss={vacancy.vacancy_loss_cents} (cents)"
    )

    return assemble_report(scope, current, vacancy, evolution)
