"""Cloudinary client: implements the ImageHost port with unsigned uploads."""

import logging

import httpx

from app.application.interfaces import ImageHost, UploadedImage
from app.domain.exceptions import ServiceProviderError

logger = logging.getLogger(__name__)

OPTIMIZED_TRANSFORMATION = "c_fill,w_800,h_600,q_auto,f_auto"
THUMBNAIL_TRANSFORMATION = "c_thumb,w_200,h_200,q_auto,f_auto"


class CloudinaryClient(ImageHost):
    """Infrastructure adapter: uploads images to Cloudinary and builds delivery URLs."""

    provider_name = "cloudinary"

    def __init__(
        self,
        cloud_name: str,
        upload_preset: str = "landing_pages",
        api_base_url: str = "https://api.cloudinary.com/v1_1",
        delivery_base_url: str = "https://res.cloudinary.com",
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._cloud_name = cloud_name
        self._upload_preset = upload_preset
        self._api_base_url = api_base_url.rstrip("/")
        self._delivery_base_url = delivery_base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def upload_image(self, content: bytes, filename: str) -> UploadedImage:
        if not self._cloud_name:
            raise ServiceProviderError(
                self.provider_name, 401, "CLOUDINARY_CLOUD_NAME is not configured"
            )

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                f"{self._api_base_url}/{self._cloud_name}/image/upload",
                data={"upload_preset": self._upload_preset},
                files={"file": (filename, content, "image/png")},
            )
            if response.status_code != 200:
                self._raise_provider_error(response)

            data = response.json()
        except httpx.HTTPError as e:
            raise ServiceProviderError(self.provider_name, 503, str(e) or type(e).__name__) from e
        finally:
            if should_close:
                await client.aclose()

        logger.debug("Uploaded %s as %s", filename, data.get("public_id"))
        return UploadedImage(
            public_id=data["public_id"],
            secure_url=data["secure_url"],
            width=data.get("width"),
            height=data.get("height"),
            format=data.get("format"),
        )

    def delivery_url(self, public_id: str, transformation: str) -> str:
        return (
            f"{self._delivery_base_url}/{self._cloud_name}/image/upload/"
            f"{transformation}/{public_id}"
        )

    def optimized_url(self, public_id: str) -> str:
        return self.delivery_url(public_id, OPTIMIZED_TRANSFORMATION)

    def thumbnail_url(self, public_id: str) -> str:
        return self.delivery_url(public_id, THUMBNAIL_TRANSFORMATION)

    def _raise_provider_error(self, response: httpx.Response) -> None:
        try:
            message = response.json().get("error", {}).get("message", response.text)
        except ValueError:
            message = response.text
        raise ServiceProviderError(
            provider=self.provider_name,
            status_code=response.status_code,
            message=message,
        )
