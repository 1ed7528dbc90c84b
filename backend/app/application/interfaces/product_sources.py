"""Abstract interfaces (ports) for product data extraction."""

from abc import ABC, abstractmethod

from app.domain.entities import ProductInfo


class ProductScraper(ABC):
    """Primary extractor: scrapes the product page itself."""

    @abstractmethod
    async def scrape_product(self, url: str) -> ProductInfo:
        """Scrape structured product data from ``url``."""
        ...


class ProductSearchExtractor(ABC):
    """Fallback extractor: derives product data from web search results."""

    @abstractmethod
    async def extract_product_info(self, url: str) -> ProductInfo:
        """Build a best-effort ProductInfo for ``url`` from search results."""
        ...
