"""Application service for publishing generated landing pages."""

import logging
from datetime import datetime
from typing import Any

from app.application.interfaces import LandingPageRepository
from app.application.services.landing_page_utils import (
    calculate_discount,
    countdown_remaining,
    format_price,
    generate_landing_page_id,
    generate_meta_tags,
)
from app.domain.entities import LandingPageData, PublishedLandingPage
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class LandingPagePublisher:
    """Assigns a public id and URL to a landing page and stores it."""

    def __init__(self, repository: LandingPageRepository, public_base_url: str):
        self._repository = repository
        self._base_url = public_base_url.rstrip("/")

    async def publish(self, data: LandingPageData) -> PublishedLandingPage:
        page_id = generate_landing_page_id()
        page = PublishedLandingPage(
            id=page_id,
            url=f"{self._base_url}/landing/{page_id}",
            data=data,
        )
        page = await self._repository.create(page)
        logger.info("Published landing page %s for '%s'", page.id, data.product_info.name)
        return page

    async def get(self, page_id: str) -> PublishedLandingPage:
        page = await self._repository.get_by_id(page_id)
        if page is None:
            raise EntityNotFoundError("LandingPage", page_id)
        return page

    async def list_recent(self, limit: int = 20) -> list[PublishedLandingPage]:
        return await self._repository.get_recent(limit=limit)

    @staticmethod
    def render_details(page: PublishedLandingPage, now: datetime | None = None) -> dict[str, Any]:
        """Values a page renders from its stored data: price, discount, timer, meta tags."""
        product = page.data.product_info
        return {
            "display_price": format_price(product.price),
            "discount_percent": calculate_discount(product.original_price, product.price),
            "countdown_remaining": countdown_remaining(page.data.countdown.end_time, now),
            "meta_tags": generate_meta_tags(page.data),
        }
