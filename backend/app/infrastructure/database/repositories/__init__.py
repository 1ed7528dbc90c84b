from .landing_page_repository import SQLAlchemyLandingPageRepository

__all__ = [
    "SQLAlchemyLandingPageRepository",
]
