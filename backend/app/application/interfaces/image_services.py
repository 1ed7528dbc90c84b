"""Abstract interfaces (ports) for image background removal and hosting."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class UploadedImage:
    """An image stored on the CDN."""

    public_id: str
    secure_url: str
    width: int | None = None
    height: int | None = None
    format: str | None = None


class BackgroundRemover(ABC):
    @abstractmethod
    async def remove_background(self, image_url: str) -> bytes:
        """Return the PNG bytes of ``image_url`` with its background removed."""
        ...


class ImageHost(ABC):
    @abstractmethod
    async def upload_image(self, content: bytes, filename: str) -> UploadedImage:
        """Upload raw image bytes and return the hosted asset."""
        ...

    @abstractmethod
    def optimized_url(self, public_id: str) -> str:
        """URL of a display-sized rendition of the asset."""
        ...

    @abstractmethod
    def thumbnail_url(self, public_id: str) -> str:
        """URL of a thumbnail rendition of the asset."""
        ...
