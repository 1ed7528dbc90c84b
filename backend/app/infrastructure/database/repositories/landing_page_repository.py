"""Concrete repository implementation for published landing pages backed by SQLAlchemy."""

from datetime import timezone

from pydantic import TypeAdapter
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import LandingPageRepository
from app.domain.entities import LandingPageData, PublishedLandingPage
from app.infrastructure.database.models import PublishedLandingPageModel

_page_data = TypeAdapter(LandingPageData)


class SQLAlchemyLandingPageRepository(LandingPageRepository):
    """Implements the LandingPageRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: PublishedLandingPageModel) -> PublishedLandingPage:
        """Map ORM model → domain entity."""
        published_at = model.published_at
        # SQLite drops tzinfo on the way back.
        if published_at.tzinfo is None:
            published_at = published_at.replace(tzinfo=timezone.utc)
        return PublishedLandingPage(
            id=model.id,
            url=model.url,
            data=_page_data.validate_python(model.data),
            published_at=published_at,
        )

    def _to_model(self, entity: PublishedLandingPage) -> PublishedLandingPageModel:
        """Map domain entity → ORM model (for creation)."""
        return PublishedLandingPageModel(
            id=entity.id,
            url=entity.url,
            product_name=entity.data.product_info.name,
            data=_page_data.dump_python(entity.data, mode="json"),
            published_at=entity.published_at,
        )

    async def get_by_id(self, page_id: str) -> PublishedLandingPage | None:
        result = await self._session.get(PublishedLandingPageModel, page_id)
        return self._to_entity(result) if result else None

    async def get_recent(self, limit: int = 20) -> list[PublishedLandingPage]:
        stmt = (
            select(PublishedLandingPageModel)
            .order_by(PublishedLandingPageModel.published_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, page: PublishedLandingPage) -> PublishedLandingPage:
        model = self._to_model(page)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)
