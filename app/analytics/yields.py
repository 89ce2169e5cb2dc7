"""
Yield Calculations

Gross, net and after-tax yield on acquisition value, as percentages.
Values are returned unrounded; rounding happens when the report is assembled.
"""

from dataclasses import dataclass
from typing import List

from app.analytics.money import Cents, MajorUnits, to_major

DEFAULT_AFTER_TAX_FACTOR = 0.7


@dataclass(frozen=True)
class Yields:
    """Yield percentages plus the net benefit they were derived from."""

    net_benefit_cents: Cents
    yield_gross: float
    yield_net: float
    yield_net_net: float


def calculate_yield(amount_cents: int, property_value: MajorUnits) -> float:
    """
    Annual return as a percentage of property value.

    Args:
        amount_cents: Annual amount in cents
        property_value: Acquisition value in major units

    Returns:
        Percentage (e.g. 6.0 for 6%), or 0.0 when property value <= 0
    """
    if property_value <= 0:
        return 0.0
    return to_major(amount_cents) / property_value * 100


def apply_tax_drag(yield_net: float, after_tax_factor: float) -> float:
    """Apply the flat tax drag to positive yields; others pass through."""
    if yield_net > 0:
        return yield_net * after_tax_factor
    return yield_net


def calculate_yields(
    annual_base_rent_cents: Cents,
    monthly_income: List[Cents],
    monthly_expenses: List[Cents],
    property_value: MajorUnits,
    after_tax_factor: float = DEFAULT_AFTER_TAX_FACTOR,
) -> Yields:
    """
    Derive gross, net and after-tax yields.

    Gross yield uses base rent only (service charges excluded); net yield
    uses total income minus total expenses.
    """
    net_benefit = Cents(sum(monthly_income) - sum(monthly_expenses))
    yield_gross = calculate_yield(annual_base_rent_cents, property_value)
    yield_net = calculate_yield(net_benefit, property_value)

    return Yields(
        net_benefit_cents=net_benefit,
        yield_gross=yield_gross,
        yield_net=yield_net,
        yield_net_net=apply_tax_drag(yield_net, after_tax_factor),
    )
