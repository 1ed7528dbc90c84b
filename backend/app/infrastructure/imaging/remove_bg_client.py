"""remove.bg client: implements the BackgroundRemover port."""

import logging

import httpx

from app.application.interfaces import BackgroundRemover
from app.domain.exceptions import ServiceProviderError

logger = logging.getLogger(__name__)


class RemoveBgClient(BackgroundRemover):
    """Infrastructure adapter: removes image backgrounds via remove.bg."""

    provider_name = "remove.bg"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.remove.bg/v1.0",
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

    async def remove_background(self, image_url: str) -> bytes:
        if not self._api_key:
            raise ServiceProviderError(self.provider_name, 401, "REMOVEBG_API_KEY is not configured")

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                f"{self._base_url}/removebg",
                headers={"X-Api-Key": self._api_key},
                data={"image_url": image_url, "size": "auto"},
            )
            if response.status_code != 200:
                self._raise_provider_error(response)

            logger.debug("Background removed from %s (%d bytes)", image_url, len(response.content))
            return response.content
        except httpx.HTTPError as e:
            raise ServiceProviderError(self.provider_name, 503, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()

    def _raise_provider_error(self, response: httpx.Response) -> None:
        try:
            errors = response.json().get("errors") or []
            message = "; ".join(e.get("title", "") for e in errors) or response.text
        except ValueError:
            message = response.text
        raise ServiceProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
