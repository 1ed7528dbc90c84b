"""Landing page endpoints: URL validation, generation, progress stream, publishing."""

import logging
import uuid
from functools import partial

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import StreamingResponse

from app.application.schemas import (
    GenerateLandingPageSchema,
    GenerationResponse,
    PublishedLandingPageResponse,
    PublishLandingPageRequest,
    ValidateUrlRequest,
    ValidateUrlResponse,
)
from app.application.services import LandingPageGenerator, LandingPagePublisher, SSEManager
from app.domain.entities import PublishedLandingPage
from app.domain.product_url import validate_product_url
from app.infrastructure.dependencies import (
    get_landing_page_generator,
    get_landing_page_publisher,
    get_sse_manager,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/landing-pages", tags=["Landing Pages"])


def _to_response(page: PublishedLandingPage) -> PublishedLandingPageResponse:
    return PublishedLandingPageResponse(
        id=page.id,
        url=page.url,
        data=page.data,
        published_at=page.published_at,
        **LandingPagePublisher.render_details(page),
    )


@router.post("/validate-url", response_model=ValidateUrlResponse)
async def validate_url(data: ValidateUrlRequest) -> ValidateUrlResponse:
    """Check whether a product URL belongs to a supported store."""
    return ValidateUrlResponse(url=data.url, supported=validate_product_url(data.url))


@router.post("/generate", response_model=GenerationResponse)
async def generate_landing_page(
    data: GenerateLandingPageSchema,
    run_id: str | None = Query(
        None, description="Client-chosen id used to tag progress events on /events"
    ),
    generator: LandingPageGenerator = Depends(get_landing_page_generator),
    sse: SSEManager = Depends(get_sse_manager),
) -> GenerationResponse:
    """Run the generation pipeline; progress is broadcast as 'generation_progress' events."""
    run_id = run_id or uuid.uuid4().hex
    logger.info("Generation run %s started for %s", run_id, data.product_url)

    page = await generator.generate(
        data.to_domain(),
        on_progress=partial(sse.broadcast_progress, run_id),
    )
    return GenerationResponse(run_id=run_id, data=page)


@router.get("/events")
async def generation_events(
    sse: SSEManager = Depends(get_sse_manager),
) -> StreamingResponse:
    """SSE endpoint for real-time generation progress.

    Clients connect via EventSource and receive 'generation_progress'
    events tagged with the run id.
    """
    return StreamingResponse(
        sse.subscribe(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post(
    "/publish",
    response_model=PublishedLandingPageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def publish_landing_page(
    data: PublishLandingPageRequest,
    publisher: LandingPagePublisher = Depends(get_landing_page_publisher),
) -> PublishedLandingPageResponse:
    page = await publisher.publish(data.data)
    return _to_response(page)


@router.get("", response_model=list[PublishedLandingPageResponse])
async def list_landing_pages(
    limit: int = Query(20, ge=1, le=100),
    publisher: LandingPagePublisher = Depends(get_landing_page_publisher),
) -> list[PublishedLandingPageResponse]:
    """Most recently published pages, newest first."""
    pages = await publisher.list_recent(limit=limit)
    return [_to_response(p) for p in pages]


@router.get("/{page_id}", response_model=PublishedLandingPageResponse)
async def get_landing_page(
    page_id: str,
    publisher: LandingPagePublisher = Depends(get_landing_page_publisher),
) -> PublishedLandingPageResponse:
    page = await publisher.get(page_id)
    return _to_response(page)
