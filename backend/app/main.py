"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.infrastructure.database import Base, engine
from app.infrastructure.dependencies import get_fault_injector, get_record_store, get_sse_manager
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.error_handlers import register_exception_handlers
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _report_providers(settings: Settings) -> None:
    """Warn about generation adapters that will fail for lack of credentials."""
    missing = [name for name, ready in settings.provider_status().items() if not ready]
    if missing:
        logger.warning(
            "Not configured: %s. Generation falls back to search and defaults where it can.",
            ", ".join(missing),
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the published page table, seed the record store, stop SSE clients on exit."""
    settings = get_settings()
    setup_logging(settings)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    store = get_record_store()
    logger.info(
        "Record store ready: %d users, %d products, %d orders",
        len(store.users), len(store.products), len(store.orders),
    )
    get_fault_injector()
    _report_providers(settings)

    yield

    await get_sse_manager().shutdown()
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="Mock store admin API and AI landing page generator with COD ordering.",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
