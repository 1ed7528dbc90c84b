"""Admin dashboard endpoint."""

from fastapi import APIRouter, Depends

from app.application.schemas import ApiResponse, DashboardStatsResponse
from app.application.services import DashboardService
from app.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=ApiResponse[DashboardStatsResponse])
async def get_dashboard_stats(
    service: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse[DashboardStatsResponse]:
    """Totals, the five newest orders, and the five best-selling products."""
    stats = await service.get_stats()
    return ApiResponse[DashboardStatsResponse](
        data=DashboardStatsResponse.model_validate(stats, from_attributes=True),
        message="Dashboard stats fetched successfully",
    )
