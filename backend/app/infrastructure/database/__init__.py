from .base import Base
from .session import engine, async_session_factory, create_engine_for, get_db_session
from .models import PublishedLandingPageModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_engine_for",
    "get_db_session",
    "PublishedLandingPageModel",
]
