"""Landing page generator: orchestrates the full generation pipeline.

Pipeline: Extract → Classify → Design → Content → Images → Countdown → Form

Extraction falls back from the scraper to the search extractor once. LLM
stages fall back to deterministic defaults only when the reply is malformed;
any other failure aborts the run.
"""

import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta, timezone

from app.application.interfaces import (
    ProductLLMClient,
    ProductScraper,
    ProductSearchExtractor,
)
from app.application.services.generation_defaults import (
    default_classification,
    default_content,
    default_theme,
)
from app.application.services.image_processing_service import ImageProcessingService
from app.domain.cod_form import COD_FORM_FIELDS, COD_FORM_RULES
from app.domain.entities import (
    CODFormConfig,
    CountdownTimer,
    Customizations,
    GenerateLandingPageRequest,
    GenerationProgress,
    GenerationStep,
    LandingPageData,
    ProductInfo,
)
from app.domain.exceptions import MalformedReplyError, UnsupportedInputError
from app.domain.product_url import validate_product_url
from app.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("LandingPageGenerator")

ProgressCallback = Callable[[GenerationProgress], Awaitable[None] | None]

DEFAULT_COUNTDOWN_HOURS = 24
DEFAULT_URGENCY = "medium"

COUNTDOWN_TITLES: dict[str, str] = {
    "low": "Special Offer Ends Soon",
    "medium": "Limited Time Offer",
    "high": "FLASH SALE - Ends Today!",
}


def build_cod_form_config() -> CODFormConfig:
    """The order form every generated page carries."""
    return CODFormConfig(
        enabled=True,
        fields=list(COD_FORM_FIELDS),
        validation_rules=dict(COD_FORM_RULES),
    )


def build_countdown(
    customizations: Customizations, now: datetime
) -> CountdownTimer:
    hours = customizations.countdown_hours or DEFAULT_COUNTDOWN_HOURS
    urgency = customizations.urgency_level or DEFAULT_URGENCY
    return CountdownTimer(
        end_time=now + timedelta(hours=hours),
        title=COUNTDOWN_TITLES[urgency],
        urgency_level=urgency,
    )


class LandingPageGenerator:
    """Application service that turns a product URL into a landing page.

    Each ``generate`` call starts a new run. Progress reports from an
    older run that is still finishing are dropped, so a caller sharing one
    generator only ever sees the latest run's progress.
    """

    def __init__(
        self,
        scraper: ProductScraper,
        search_extractor: ProductSearchExtractor,
        llm_client: ProductLLMClient,
        image_processor: ImageProcessingService,
        now: Callable[[], datetime] | None = None,
    ):
        self._scraper = scraper
        self._search = search_extractor
        self._llm = llm_client
        self._images = image_processor
        self._now = now or (lambda: datetime.now(timezone.utc))
        self._current_run = 0

    async def generate(
        self,
        request: GenerateLandingPageRequest,
        on_progress: ProgressCallback | None = None,
    ) -> LandingPageData:
        """Run the pipeline and return the assembled page data.

        Raises:
            UnsupportedInputError: If the URL is not on a supported store;
                raised before any progress is reported.
        """
        if not validate_product_url(request.product_url):
            raise UnsupportedInputError(
                request.product_url,
                "Unsupported product URL. Supported stores: Amazon, Flipkart, "
                "Myntra, Ajio, Nykaa, Shopify, WooCommerce.",
            )

        self._current_run += 1
        run = self._current_run

        async def report(step: GenerationStep, progress: int, message: str, error: str | None = None) -> None:
            if on_progress is None or run != self._current_run:
                return
            result = on_progress(GenerationProgress(step, progress, message, error))
            if inspect.isawaitable(result):
                await result

        plog.separator(f"Generating: {request.product_url}")
        start = time.perf_counter()

        try:
            await report(GenerationStep.STARTING, 0, "Starting landing page generation...")

            await report(GenerationStep.EXTRACTING, 10, "Extracting product information from URL...")
            product_info = await self._extract_product_info(request.product_url)

            await report(GenerationStep.CLASSIFYING, 25, "Classifying product type and target audience...")
            with plog.timed_step(PipelineStage.CLASSIFY, "Classifying product"):
                try:
                    classification = await self._llm.classify_product(product_info)
                except MalformedReplyError as e:
                    plog.step_warning(PipelineStage.CLASSIFY, "Using default classification", error=e)
                    classification = default_classification(product_info)

            await report(GenerationStep.DESIGNING, 40, "Generating design theme and color palette...")
            with plog.timed_step(PipelineStage.DESIGN, "Generating design theme"):
                try:
                    theme = await self._llm.generate_design_theme(classification)
                except MalformedReplyError as e:
                    plog.step_warning(PipelineStage.DESIGN, "Using default theme", error=e)
                    theme = default_theme(classification)

            await report(GenerationStep.CONTENT, 55, "Generating persuasive content and copy...")
            with plog.timed_step(PipelineStage.CONTENT, "Generating marketing copy"):
                try:
                    content = await self._llm.generate_content(product_info, classification)
                except MalformedReplyError as e:
                    plog.step_warning(PipelineStage.CONTENT, "Using default content", error=e)
                    content = default_content(product_info)

            await report(GenerationStep.IMAGES, 70, "Processing product images...")
            with plog.timed_step(PipelineStage.IMAGES, "Processing images", count=len(product_info.images)):
                images = await self._images.process_product_images(product_info.images)

            await report(GenerationStep.COUNTDOWN, 85, "Setting up countdown timer...")
            countdown = build_countdown(request.customizations, self._now())
            plog.step_complete(
                PipelineStage.COUNTDOWN, countdown.title,
                ends=countdown.end_time.isoformat(), urgency=countdown.urgency_level,
            )

            await report(GenerationStep.FORM, 95, "Configuring COD form...")
            cod_form = build_cod_form_config()
            plog.step_complete(PipelineStage.FORM, "COD form attached", fields=len(cod_form.fields))

            data = LandingPageData(
                product_info=product_info,
                classification=classification,
                theme=theme,
                content=content,
                images=images,
                countdown=countdown,
                cod_form=cod_form,
            )

            await report(GenerationStep.COMPLETED, 100, "Landing page generated successfully!")
        except Exception as e:
            plog.step_error(PipelineStage.ERROR, "Landing page generation failed", error=e)
            await report(GenerationStep.ERROR, 0, "Generation failed", str(e) or type(e).__name__)
            raise

        plog.step_complete(
            PipelineStage.COMPLETE,
            f"Generated landing page for '{product_info.name}'",
            elapsed=f"{time.perf_counter() - start:.2f}s",
        )
        return data

    async def _extract_product_info(self, url: str) -> ProductInfo:
        with plog.timed_step(PipelineStage.EXTRACT, "Extracting product information"):
            try:
                info = await self._scraper.scrape_product(url)
            except Exception as e:
                plog.step_warning(PipelineStage.EXTRACT, "Scraper failed, falling back to search", error=e)
                info = await self._search.extract_product_info(url)

            plog.detail(f"Extracted '{info.name}'", price=info.price, images=len(info.images))
            return info
