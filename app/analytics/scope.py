"""
Scope resolution: which properties a report covers and what they are worth.
"""

from dataclasses import dataclass
from typing import FrozenSet, List

from app.analytics.money import MajorUnits
from app.analytics.records import PropertyRecord


@dataclass(frozen=True)
class Scope:
    """Resolved set of property ids and their summed acquisition value."""

    property_ids: FrozenSet[str]
    property_value: MajorUnits


def resolve_scope(properties: List[PropertyRecord]) -> Scope:
    """
    Build a scope from the properties returned by the data source.

    Properties without a recorded acquisition value contribute 0. An empty
    list yields an empty scope with a value of 0.
    """
    property_value = sum(
        (p.acquisition_value or 0) for p in properties
    )
    return Scope(
        property_ids=frozenset(p.id for p in properties),
        property_value=MajorUnits(property_value),
    )
