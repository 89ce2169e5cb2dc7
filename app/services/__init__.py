"""
Application services module.
"""

from app.services.analytics import build_annual_report
from app.services.analytics_source import AnalyticsDataSource, AuthorizationError

__all__ = ["build_annual_report", "AnalyticsDataSource", "AuthorizationError"]
