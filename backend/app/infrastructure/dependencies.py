"""FastAPI dependency injection: wires infrastructure to application layer."""

import logging
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.services import (
    CODOrderService,
    DashboardService,
    FaultInjector,
    ImageProcessingService,
    LandingPageGenerator,
    LandingPagePublisher,
    OrderService,
    ProductService,
    SSEManager,
    UserService,
)
from app.domain.entities import Order, Product, User
from app.infrastructure.database.repositories import SQLAlchemyLandingPageRepository
from app.infrastructure.database.session import get_db_session
from app.infrastructure.groq import GroqClient
from app.infrastructure.imaging import CloudinaryClient, RemoveBgClient
from app.infrastructure.llm import GroqProductLLMClient
from app.infrastructure.memory import InMemoryRecordRepository, SeedLoader
from app.infrastructure.scraping import BrowseAiScraper, SerpApiProductSearch

logger = logging.getLogger(__name__)


@dataclass
class RecordStore:
    """The three in-memory collections behind the record endpoints."""

    users: InMemoryRecordRepository[User]
    products: InMemoryRecordRepository[Product]
    orders: InMemoryRecordRepository[Order]


@lru_cache
def get_record_store() -> RecordStore:
    """Process-wide record store, seeded from the demo catalogue on first use."""
    seed = SeedLoader(get_settings().seed_data_file).load()
    return RecordStore(
        users=InMemoryRecordRepository(seed.users),
        products=InMemoryRecordRepository(seed.products),
        orders=InMemoryRecordRepository(seed.orders),
    )


@lru_cache
def get_fault_injector() -> FaultInjector:
    settings = get_settings()
    injector = FaultInjector(
        error_rate=settings.simulated_error_rate,
        latency_seconds=settings.simulated_latency_seconds,
    )
    if injector.enabled:
        logger.info(
            "Fault injection enabled: latency=%dms error_rate=%.2f",
            settings.simulated_latency_ms,
            settings.simulated_error_rate,
        )
    return injector


@lru_cache
def get_sse_manager() -> SSEManager:
    """Process-wide SSE broadcaster for generation progress."""
    return SSEManager()


def get_user_service(
    store: RecordStore = Depends(get_record_store),
    faults: FaultInjector = Depends(get_fault_injector),
) -> UserService:
    return UserService(store.users, faults)


def get_product_service(
    store: RecordStore = Depends(get_record_store),
    faults: FaultInjector = Depends(get_fault_injector),
) -> ProductService:
    return ProductService(store.products, faults)


def get_order_service(
    store: RecordStore = Depends(get_record_store),
    faults: FaultInjector = Depends(get_fault_injector),
) -> OrderService:
    return OrderService(store.orders, store.products, store.users, faults)


def get_dashboard_service(
    store: RecordStore = Depends(get_record_store),
    faults: FaultInjector = Depends(get_fault_injector),
) -> DashboardService:
    return DashboardService(store.users, store.products, store.orders, faults)


@lru_cache
def get_landing_page_generator() -> LandingPageGenerator:
    """Process-wide LandingPageGenerator wired to the configured SaaS adapters.

    Shared so a new run supersedes the previous one; adapters open their
    HTTP clients per call.

    Missing API keys do not fail here; the affected adapter raises when it
    is called and the pipeline's fallback rules apply.
    """
    settings = get_settings()
    timeout = settings.http_timeout_seconds

    scraper = BrowseAiScraper(
        credentials=settings.browseai_api_key,
        base_url=settings.browseai_base_url,
        max_attempts=settings.browseai_max_attempts,
        poll_interval=settings.browseai_poll_interval_seconds,
        timeout=timeout,
    )
    search = SerpApiProductSearch(
        api_key=settings.serpapi_key,
        base_url=settings.serpapi_base_url,
        timeout=timeout,
    )
    llm_client = GroqProductLLMClient(
        chat_provider=GroqClient(
            api_key=settings.groq_api_key,
            base_url=settings.groq_base_url,
            timeout=timeout,
        ),
        model=settings.groq_model,
    )
    images = ImageProcessingService(
        background_remover=RemoveBgClient(
            api_key=settings.removebg_api_key,
            base_url=settings.removebg_base_url,
            timeout=timeout,
        ),
        image_host=CloudinaryClient(
            cloud_name=settings.cloudinary_cloud_name,
            upload_preset=settings.cloudinary_upload_preset,
            timeout=timeout,
        ),
        max_concurrency=settings.image_concurrency,
    )
    return LandingPageGenerator(
        scraper=scraper,
        search_extractor=search,
        llm_client=llm_client,
        image_processor=images,
    )


async def get_landing_page_publisher(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LandingPagePublisher, None]:
    """Provides a LandingPagePublisher with its repository wired up."""
    repository = SQLAlchemyLandingPageRepository(session)
    yield LandingPagePublisher(repository, get_settings().public_base_url)


def get_cod_order_service() -> CODOrderService:
    return CODOrderService(
        processing_delay_seconds=get_settings().cod_processing_delay_seconds
    )
