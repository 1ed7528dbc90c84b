"""Browse AI scraper: implements the ProductScraper port.

Runs a pre-trained Browse AI robot against the product page and polls the
task until it finishes.
"""

import asyncio
import logging
import re
from typing import Any

import httpx

from app.application.interfaces import ProductScraper
from app.domain.entities import ProductInfo
from app.domain.exceptions import ServiceProviderError, TaskTimeoutError

logger = logging.getLogger(__name__)

_PRICE_NUMBER = re.compile(r"\d[\d,]*(?:\.\d+)?")


class BrowseAiScraper(ProductScraper):
    """Infrastructure adapter: scrapes product pages with a Browse AI robot.

    ``credentials`` has the form ``"<api_key>:<robot_id>"``.
    """

    provider_name = "browse-ai"

    def __init__(
        self,
        credentials: str,
        base_url: str = "https://api.browse.ai/v2",
        max_attempts: int = 30,
        poll_interval: float = 2.0,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        api_key, _, robot_id = credentials.partition(":")
        self._api_key = api_key.strip()
        self._robot_id = robot_id.strip()
        self._base_url = base_url.rstrip("/")
        self._max_attempts = max_attempts
        self._poll_interval = poll_interval
        self._timeout = timeout
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def scrape_product(self, url: str) -> ProductInfo:
        if not self._api_key or not self._robot_id:
            raise ServiceProviderError(
                self.provider_name, 401, "BROWSEAI_API_KEY must be '<api_key>:<robot_id>'"
            )

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            task_id = await self._create_task(client, url)
            logger.info("Browse AI task %s started for %s", task_id, url)
            result = await self._poll_task(client, task_id)
            return self.parse_product_data(result)
        except httpx.HTTPError as e:
            raise ServiceProviderError(self.provider_name, 503, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()

    async def _create_task(self, client: httpx.AsyncClient, url: str) -> str:
        response = await client.post(
            f"{self._base_url}/robots/{self._robot_id}/tasks",
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
            json={"inputParameters": {"originUrl": url}},
        )
        if response.status_code not in (200, 201):
            self._raise_provider_error(response)
        return response.json()["result"]["id"]

    async def _poll_task(self, client: httpx.AsyncClient, task_id: str) -> dict[str, Any]:
        """Poll until the task succeeds, fails, or attempts run out."""
        for attempt in range(1, self._max_attempts + 1):
            response = await client.get(
                f"{self._base_url}/robots/{self._robot_id}/tasks/{task_id}",
                headers={"Authorization": f"Bearer {self._api_key}"},
            )
            if response.status_code != 200:
                self._raise_provider_error(response)

            result = response.json().get("result", {})
            status = result.get("status")
            if status == "successful":
                logger.info("Browse AI task %s finished after %d poll(s)", task_id, attempt)
                return result
            if status == "failed":
                raise ServiceProviderError(self.provider_name, 502, f"Task {task_id} failed")

            await asyncio.sleep(self._poll_interval)

        raise TaskTimeoutError(self.provider_name, self._max_attempts)

    @staticmethod
    def parse_product_data(result: dict[str, Any]) -> ProductInfo:
        """Map a finished task's captured texts and lists to a ProductInfo."""
        texts: dict[str, Any] = result.get("capturedTexts") or {}
        lists: dict[str, Any] = result.get("capturedLists") or {}

        specifications = texts.get("specifications")
        return ProductInfo(
            name=texts.get("productName") or "Unknown Product",
            description=texts.get("description") or "No description available",
            price=_parse_price(texts.get("price")) or 0.0,
            original_price=_parse_price(texts.get("originalPrice")),
            images=_list_values(lists.get("images")),
            category=texts.get("category") or "other",
            brand=texts.get("brand") or None,
            features=_list_values(lists.get("features")),
            specifications=specifications if isinstance(specifications, dict) else {},
            rating=_parse_number(texts.get("rating")),
            reviews=_parse_int(texts.get("reviewCount")),
        )

    def _raise_provider_error(self, response: httpx.Response) -> None:
        try:
            message = response.json().get("messageCode") or response.text
        except ValueError:
            message = response.text
        raise ServiceProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message or response.reason_phrase,
        )


def _parse_price(text: Any) -> float | None:
    if text is None:
        return None
    match = _PRICE_NUMBER.search(str(text))
    return float(match.group(0).replace(",", "")) if match else None


def _parse_number(text: Any) -> float | None:
    match = re.search(r"\d+(?:\.\d+)?", str(text)) if text is not None else None
    return float(match.group(0)) if match else None


def _parse_int(text: Any) -> int | None:
    digits = re.sub(r"\D", "", str(text)) if text is not None else ""
    return int(digits) if digits else None


def _list_values(items: Any) -> list[str]:
    """Captured lists hold plain strings or single-field dicts."""
    values: list[str] = []
    for item in items or []:
        if isinstance(item, str):
            value = item
        elif isinstance(item, dict):
            value = next((v for k, v in item.items() if k != "Position" and isinstance(v, str)), "")
        else:
            continue
        if value:
            values.append(value)
    return values
