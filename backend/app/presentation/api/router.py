"""Top-level API router: mounts the v1 routers under /api and documents the error body."""

from fastapi import APIRouter

from app.application.schemas import ErrorResponse
from app.presentation.api.v1.router import router as v1_router

_ERROR_RESPONSES = {
    code: {"model": ErrorResponse, "description": description}
    for code, description in (
        (404, "Record or landing page not found"),
        (503, "Temporary failure, safe to retry"),
    )
}

router = APIRouter(prefix="/api", responses=_ERROR_RESPONSES)
router.include_router(v1_router)
