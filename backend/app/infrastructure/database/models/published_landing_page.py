"""SQLAlchemy ORM model for published landing pages."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class PublishedLandingPageModel(Base):
    """ORM model: maps to the 'published_landing_pages' table.

    The generated page is stored as a JSON document.
    """

    __tablename__ = "published_landing_pages"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    product_name: Mapped[str] = mapped_column(String(500), nullable=False)
    data: Mapped[dict] = mapped_column(JSON, nullable=False)
    published_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_published_landing_pages_published_at", "published_at"),
    )

    def __repr__(self) -> str:
        return f"<PublishedLandingPageModel(id={self.id}, product='{self.product_name}')>"
