"""
API routes for rental analytics.
"""

from fastapi import APIRouter

from app.api import analytics

router = APIRouter()

# Include sub-routers
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
