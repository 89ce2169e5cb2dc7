"""
Currency units.

Lease and expense amounts travel as integer cents; property values and
listing prices are entered in whole currency units (euros). The two are
kept as distinct types so a cents figure is never divided by a euro figure
without an explicit conversion.
"""

from typing import NewType, Union

Cents = NewType("Cents", int)
MajorUnits = NewType("MajorUnits", float)

CENTS_PER_UNIT = 100


def to_major(cents: Union[int, float]) -> MajorUnits:
    """Convert a cents amount to major units (display boundary only)."""
    return MajorUnits(cents / CENTS_PER_UNIT)


def to_cents(amount: Union[int, float]) -> Cents:
    """Convert a major-unit amount to whole cents."""
    return Cents(int(round(amount * CENTS_PER_UNIT)))
