"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from app.presentation.api.v1.endpoints.health import router as health_router
from app.presentation.api.v1.endpoints.users import router as users_router
from app.presentation.api.v1.endpoints.products import router as products_router
from app.presentation.api.v1.endpoints.orders import router as orders_router
from app.presentation.api.v1.endpoints.dashboard import router as dashboard_router
from app.presentation.api.v1.endpoints.landing_pages import router as landing_pages_router
from app.presentation.api.v1.endpoints.cod_orders import router as cod_orders_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(users_router)
router.include_router(products_router)
router.include_router(orders_router)
router.include_router(dashboard_router)
router.include_router(landing_pages_router)
router.include_router(cod_orders_router)
