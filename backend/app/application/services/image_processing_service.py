"""Image processing: background removal, CDN upload, and derived renditions."""

import asyncio
import logging
import time

from app.application.interfaces import BackgroundRemover, ImageHost
from app.domain.entities import ProcessedImage
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("ImageProcessingService")


class ImageProcessingService:
    """Turns product image URLs into hosted, optimized renditions.

    A failure on one image never fails the batch: that image falls back to
    its original URL in every field.
    """

    def __init__(
        self,
        background_remover: BackgroundRemover,
        image_host: ImageHost,
        max_concurrency: int = 4,
    ):
        self._remover = background_remover
        self._host = image_host
        self._max_concurrency = max(1, max_concurrency)

    async def process_product_images(self, image_urls: list[str]) -> list[ProcessedImage]:
        """Process every image concurrently; the result keeps the input order."""
        if not image_urls:
            plog.detail("No product images to process")
            return []

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(index: int, url: str) -> ProcessedImage:
            async with semaphore:
                return await self._process_one(index, url)

        results = await asyncio.gather(
            *(bounded(i, url) for i, url in enumerate(image_urls))
        )

        fallbacks = sum(1 for r in results if r.cdn_url == r.original)
        plog.stats(images=len(results), processed=len(results) - fallbacks, fallbacks=fallbacks)
        return list(results)

    async def _process_one(self, index: int, url: str) -> ProcessedImage:
        try:
            content = await self._remover.remove_background(url)
            filename = f"product_{int(time.time() * 1000)}_{index}.png"
            uploaded = await self._host.upload_image(content, filename)
        except Exception as e:
            plog.step_warning(PipelineStage.IMAGES, f"Using original image {url}", error=e)
            return ProcessedImage.unprocessed(url)

        plog.detail("Image processed", index=index, public_id=uploaded.public_id)
        return ProcessedImage(
            original=url,
            background_removed=uploaded.secure_url,
            cdn_url=uploaded.secure_url,
            optimized_url=self._host.optimized_url(uploaded.public_id),
            thumbnail_url=self._host.thumbnail_url(uploaded.public_id),
        )
