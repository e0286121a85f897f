"""
Dashboard and data management endpoints.

``/dashboard`` combines counts and recent activity for the front end.
``/reset`` wipes all data; it exists so demo environments and pipeline
smoke tests can start from a known empty state.
"""

from fastapi import APIRouter, Depends

from ...schemas.common import ApiResponse, MessageResponse
from ...schemas.dashboard import DashboardSummary
from ...services.data_service import DataService
from ..deps import get_data_service


router = APIRouter()


@router.get("/dashboard", response_model=ApiResponse[DashboardSummary])
async def get_dashboard(service: DataService = Depends(get_data_service)) -> ApiResponse[DashboardSummary]:
    """Return totals plus the three most recent users and posts."""
    return ApiResponse[DashboardSummary](data=service.dashboard_summary())


@router.post("/reset", response_model=MessageResponse)
async def reset_data(service: DataService = Depends(get_data_service)) -> MessageResponse:
    """Delete every user and post and restart id counters at 1."""
    service.reset()
    return MessageResponse(message="All data cleared and counters reset to zero")
