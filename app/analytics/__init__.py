"""
Financial Analytics Engine

Turns lease financial periods and expenses into a yearly report for one
property or a whole portfolio. Pure computation: records come in through an
AnalyticsSnapshot and the current date is always passed in.
"""

from app.analytics.records import (
    AnalyticsSnapshot,
    ExpenseRecord,
    LeasePeriodRecord,
    ListingRecord,
    PropertyRecord,
)
from app.analytics.report import AnalyticsReport, compute_annual_report

__all__ = [
    "AnalyticsSnapshot",
    "ExpenseRecord",
    "LeasePeriodRecord",
    "ListingRecord",
    "PropertyRecord",
    "AnalyticsReport",
    "compute_annual_report",
]
