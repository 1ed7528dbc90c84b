"""Logging setup for the API process.

Each logger category gets its level from its own setting, so SQL echo,
outbound HTTP chatter, and the generation pipeline can be tuned apart.
Call ``setup_logging()`` once from the FastAPI lifespan.
"""

import logging
import sys
from collections.abc import Mapping

from app.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers it controls. Pipeline and adapter loggers are
# listed under both their PipelineLogger component name and module path.
LOG_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_pipeline": (
        "LandingPageGenerator",
        "ImageProcessingService",
        "app.application.services.landing_page_generator",
        "app.application.services.image_processing_service",
        "app.application.services.cod_order_service",
    ),
    "log_level_providers": (
        "GroqProductLLMClient",
        "app.infrastructure.groq",
        "app.infrastructure.llm",
        "app.infrastructure.scraping",
        "app.infrastructure.imaging",
    ),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the root level and every category level from ``settings``.

    Returns the resolved ``{logger name: level}`` map of the categories.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(parse_level(settings.log_level))
    # Uvicorn usually installs a handler; tests and scripts may not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    levels = category_levels({field: getattr(settings, field) for field in LOG_CATEGORIES})
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s %s",
        settings.log_level,
        " ".join(f"{field.removeprefix('log_level_')}={getattr(settings, field)}" for field in LOG_CATEGORIES),
    )
    return levels


def category_levels(configured: Mapping[str, str]) -> dict[str, int]:
    """Expand ``{settings field: level name}`` into ``{logger name: level}``."""
    levels: dict[str, int] = {}
    for field, names in LOG_CATEGORIES.items():
        level = parse_level(configured.get(field, "INFO"))
        for name in names:
            levels[name] = level
    return levels


def parse_level(raw: str) -> int:
    """Level name to ``logging`` constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
