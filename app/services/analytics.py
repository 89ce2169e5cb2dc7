"""
Analytics report service: loads the snapshot and runs the engine.
"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.analytics import AnalyticsReport, compute_annual_report
from app.config import get_settings
from app.services.analytics_source import AnalyticsDataSource

logger = logging.getLogger(__name__)


def build_annual_report(
    db: Session,
    user_id: str,
    year: int,
    property_id: Optional[str] = None,
    today: Optional[date] = None,
) -> AnalyticsReport:
    """
    Build the yearly report for a property or the user's whole portfolio.

    Args:
        db: Database session
        user_id: Portfolio owner
        year: Target calendar year
        property_id: Restrict the report to this property
        today: Current date; defaults to the system date

    Raises:
        AuthorizationError: If property_id is not owned by user_id
    """
    settings = get_settings()
    as_of = today or date.today()

    snapshot = AnalyticsDataSource(db).load_snapshot(user_id, year, property_id)
    report = compute_annual_report(
        snapshot,
        year=year,
        today=as_of,
        after_tax_factor=settings.after_tax_factor,
    )

    logger.info(
        f"Built {year} report for user {user_id} "
        f"({'property ' + property_id if property_id else 'portfolio'}, as of {as_of})"
    )
    return report
