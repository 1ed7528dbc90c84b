"""Abstract repository interface (port) for published landing pages."""

from abc import ABC, abstractmethod

from app.domain.entities import PublishedLandingPage


class LandingPageRepository(ABC):
    """Port for published landing page persistence."""

    @abstractmethod
    async def get_by_id(self, page_id: str) -> PublishedLandingPage | None:
        """Retrieve a published page by its ID."""
        ...

    @abstractmethod
    async def get_recent(self, limit: int = 20) -> list[PublishedLandingPage]:
        """Retrieve the most recently published pages, newest first."""
        ...

    @abstractmethod
    async def create(self, page: PublishedLandingPage) -> PublishedLandingPage:
        """Persist a newly published page."""
        ...
