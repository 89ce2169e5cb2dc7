"""
Vacancy Loss Estimation

Compares what the scope could have earned so far in the year (listed asking
prices) with what it actually earned. Only elapsed time is counted, so a
future vacancy is never reported as a loss.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List

from dateutil.relativedelta import relativedelta

from app.analytics.money import Cents, to_cents
from app.analytics.records import ListingRecord
from app.analytics.scope import Scope


@dataclass(frozen=True)
class VacancyEstimate:
    """Potential vs. realized income to date, in cents."""

    fraction_elapsed: float
    potential_rent_ytd_cents: float
    real_income_ytd_cents: float
    vacancy_loss_cents: Cents


def calculate_days_in_month(period_date: date) -> int:
    """Calculate the number of days in the month starting at period_date."""
    month_start = period_date.replace(day=1)
    next_month = month_start + relativedelta(months=1)
    return (next_month - month_start).days


def calculate_days_in_year(year: int) -> int:
    return (date(year + 1, 1, 1) - date(year, 1, 1)).days


def fraction_of_year_elapsed(year: int, today: date) -> float:
    """
    Share of the year elapsed as of today.

    1.0 for past years, 0.0 for future years. For the current year today
    counts as elapsed, so Dec 31 yields exactly 1.0.
    """
    if year < today.year:
        return 1.0
    if year > today.year:
        return 0.0

    elapsed = (today - date(year, 1, 1)).days + 1
    fraction = elapsed / calculate_days_in_year(year)
    return min(max(fraction, 0.0), 1.0)


def calculate_potential_annual_rent(
    listings: Iterable[ListingRecord],
    scope: Scope,
) -> Cents:
    """
    Twelve months of asking rent across the scope's rental units.

    Only the first listing seen for each rental unit is counted.
    """
    seen_units = set()
    total = 0
    for listing in listings:
        if listing.property_id not in scope.property_ids:
            continue
        if listing.rental_unit_id in seen_units:
            continue
        seen_units.add(listing.rental_unit_id)
        total += to_cents(listing.monthly_price) * 12
    return Cents(total)


def calculate_real_income_ytd(
    monthly_income: List[Cents],
    year: int,
    today: date,
) -> float:
    """
    Income realized up to today.

    Full year for past years, nothing for future years. For the current year,
    fully elapsed months plus a day-prorated slice of the current month.
    """
    if year < today.year:
        return float(sum(monthly_income))
    if year > today.year:
        return 0.0

    month_index = today.month - 1
    elapsed_months = sum(monthly_income[:month_index])
    current_slice = (
        monthly_income[month_index] * today.day / calculate_days_in_month(today)
    )
    return elapsed_months + current_slice


def estimate_vacancy_loss(
    listings: Iterable[ListingRecord],
    monthly_income: List[Cents],
    scope: Scope,
    year: int,
    today: date,
) -> VacancyEstimate:
    """
    Estimate forgone rent to date.

    The loss is floored at zero: earning more than the listed potential
    (e.g. after a rent increase) is not reported as a negative loss.
    """
    fraction = fraction_of_year_elapsed(year, today)
    potential_ytd = calculate_potential_annual_rent(listings, scope) * fraction
    real_ytd = calculate_real_income_ytd(monthly_income, year, today)
    loss = max(0, int(round(potential_ytd - real_ytd)))

    return VacancyEstimate(
        fraction_elapsed=fraction,
        potential_rent_ytd_cents=potential_ytd,
        real_income_ytd_cents=real_ytd,
        vacancy_loss_cents=Cents(loss),
    )
