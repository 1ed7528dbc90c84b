"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.infrastructure.dependencies import RecordStore, get_record_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    settings: Settings = Depends(get_settings),
    store: RecordStore = Depends(get_record_store),
) -> dict:
    """Liveness plus which demo features are configured.

    ``providers`` tells whether each generation adapter has credentials;
    unconfigured ones fail at call time and the pipeline falls back.
    """
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": settings.app_version,
        "environment": settings.app_env,
        "fault_injection": settings.simulated_error_rate > 0 or settings.simulated_latency_ms > 0,
        "records": {
            "users": len(store.users),
            "products": len(store.products),
            "orders": len(store.orders),
        },
        "providers": settings.provider_status(),
    }
