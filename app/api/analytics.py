"""
Financial analytics API endpoints.
"""

from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.services.analytics import build_annual_report
from app.services.analytics_source import AuthorizationError

router = APIRouter()


class CashflowMonthResponse(BaseModel):
    """Income and expenses for one month."""

    month: int
    income: float
    expenses: float


class ExpenseShareResponse(BaseModel):
    """Total spent in one expense category."""

    category: str
    label: str
    amount: float
    color: Optional[str] = None


class AnalyticsReportResponse(BaseModel):
    """Yearly financial report. Amounts in euros, yields in percent."""

    year: int
    total_income: float
    total_expenses: float
    net_benefit: float
    cashflow: List[CashflowMonthResponse]
    expense_distribution: List[ExpenseShareResponse]

    # KPIs
    yield_gross: float
    yield_net: float
    yield_net_net: float
    property_value: float

    # Expense breakdown
    total_deductible: float
    total_recoverable: float

    # Vacancy
    vacancy_loss: float

    # Evolution vs. previous year
    net_benefit_evolution: Optional[float] = None
    total_expenses_evolution: Optional[float] = None
    total_income_evolution: Optional[float] = None
    yield_gross_evolution: Optional[float] = None
    yield_net_evolution: Optional[float] = None
    yield_net_net_evolution: Optional[float] = None
    net_benefit_prev: Optional[float] = None
    total_expenses_prev: Optional[float] = None
    total_income_prev: Optional[float] = None

    property_ids: List[str] = []


@router.get(
    "/users/{user_id}/reports/{year}",
    response_model=AnalyticsReportResponse,
)
async def get_annual_report(
    user_id: str,
    year: int = Path(..., ge=1900, le=2200),
    property_id: Optional[str] = None,
    as_of: Optional[date] = Query(None, description="Current date override"),
    db: Session = Depends(get_db),
):
    """Yearly report for one property, or the user's whole portfolio."""
    try:
        report = build_annual_report(
            db,
            user_id=user_id,
            year=year,
            property_id=property_id,
            today=as_of,
        )
    except AuthorizationError as e:
        raise HTTPException(status_code=403, detail=str(e))

    return AnalyticsReportResponse.model_validate(asdict(report))
