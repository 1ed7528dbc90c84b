"""SerpAPI product search: implements the ProductSearchExtractor port.

Used as the fallback extractor: builds a best-effort ProductInfo from the
first Google result for the store's domain.
"""

import logging
import re
from typing import Any
from urllib.parse import urlparse

import httpx

from app.application.interfaces import ProductSearchExtractor
from app.domain.entities import ProductInfo
from app.domain.exceptions import ServiceProviderError

logger = logging.getLogger(__name__)

_PRICE = re.compile(r"[\$₹€£]?\d[\d,]*(?:\.\d+)?")


def extract_price(text: str) -> float:
    """First price-looking number in ``text``, or 0."""
    match = _PRICE.search(text or "")
    if not match:
        return 0.0
    try:
        return float(re.sub(r"[^\d.]", "", match.group(0)))
    except ValueError:
        return 0.0


class SerpApiProductSearch(ProductSearchExtractor):
    """Infrastructure adapter: Google search through SerpAPI."""

    provider_name = "serpapi"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://serpapi.com",
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def search(self, query: str) -> dict[str, Any]:
        if not self._api_key:
            raise ServiceProviderError(self.provider_name, 401, "SERPAPI_KEY is not configured")

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.get(
                f"{self._base_url}/search",
                params={"engine": "google", "q": query, "api_key": self._api_key},
            )
            if response.status_code != 200:
                self._raise_provider_error(response)
            return response.json()
        except httpx.HTTPError as e:
            raise ServiceProviderError(self.provider_name, 503, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()

    async def extract_product_info(self, url: str) -> ProductInfo:
        domain = urlparse(url).hostname or url
        results = await self.search(f"site:{domain} product details")

        organic = results.get("organic_results") or []
        first: dict[str, Any] = organic[0] if organic else {}
        if not first:
            logger.warning("SerpAPI returned no organic results for %s", domain)

        snippet = first.get("snippet") or ""
        rating = first.get("rating")
        return ProductInfo(
            name=first.get("title") or "Unknown Product",
            description=snippet or "Product description not available",
            price=extract_price(snippet),
            images=[],
            category="other",
            rating=float(rating) if isinstance(rating, (int, float)) else None,
        )

    def _raise_provider_error(self, response: httpx.Response) -> None:
        try:
            message = response.json().get("error", response.text)
        except ValueError:
            message = response.text
        raise ServiceProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
