from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "COD Landing Studio API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Published landing pages (in-memory SQLite by default)
    database_url: str = "sqlite+aiosqlite://"
    public_base_url: str = "http://localhost:5173"

    # Demo catalogue
    seed_data_file: str = str(_BACKEND_DIR / "data" / "seed.yaml")

    # Simulation: disabled unless explicitly configured
    simulated_latency_ms: int = Field(default=0, ge=0)
    simulated_error_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    cod_processing_delay_seconds: float = Field(default=1.0, ge=0.0)

    # Groq (OpenAI-compatible chat completions)
    groq_api_key: str = ""
    groq_base_url: str = "https://api.groq.com/openai/v1"
    groq_model: str = "mixtral-8x7b-32768"

    # SerpAPI (search-based fallback extractor)
    serpapi_key: str = ""
    serpapi_base_url: str = "https://serpapi.com"

    # Browse AI (primary scraper): "<api_key>:<robot_id>"
    browseai_api_key: str = ""
    browseai_base_url: str = "https://api.browse.ai/v2"
    browseai_max_attempts: int = 30
    browseai_poll_interval_seconds: float = 2.0

    # Image processing
    removebg_api_key: str = ""
    removebg_base_url: str = "https://api.remove.bg/v1.0"
    cloudinary_cloud_name: str = ""
    cloudinary_upload_preset: str = "landing_pages"
    image_concurrency: int = 4

    # Outbound HTTP
    http_timeout_seconds: float = 60.0

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_pipeline: str = "INFO"         # LandingPageGenerator pipeline
    log_level_providers: str = "INFO"        # Groq / Browse AI / SerpAPI / imaging adapters

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    @property
    def simulated_latency_seconds(self) -> float:
        return self.simulated_latency_ms / 1000

    def provider_status(self) -> dict[str, bool]:
        """Whether each generation adapter has the credentials it needs."""
        api_key, _, robot_id = self.browseai_api_key.partition(":")
        return {
            "groq": bool(self.groq_api_key.strip()),
            "serpapi": bool(self.serpapi_key.strip()),
            "browse_ai": bool(api_key.strip() and robot_id.strip()),
            "remove_bg": bool(self.removebg_api_key.strip()),
            "cloudinary": bool(self.cloudinary_cloud_name.strip()),
        }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
