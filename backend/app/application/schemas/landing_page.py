"""Pydantic DTOs for landing page generation and publishing."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from app.domain.entities import (
    Customizations,
    GenerateLandingPageRequest,
    LandingPageData,
)


class CustomizationsSchema(BaseModel):
    color_preference: str | None = None
    style_preference: str | None = None
    target_audience: str | None = None
    urgency_level: Literal["low", "medium", "high"] | None = None
    include_countdown: bool = True
    countdown_hours: int | None = Field(None, ge=1, le=168)


class GenerateLandingPageSchema(BaseModel):
    """Schema for starting a generation run."""

    product_url: str = Field(..., min_length=1, examples=["https://www.amazon.in/dp/B0EXAMPLE"])
    customizations: CustomizationsSchema = Field(default_factory=CustomizationsSchema)

    def to_domain(self) -> GenerateLandingPageRequest:
        return GenerateLandingPageRequest(
            product_url=self.product_url,
            customizations=Customizations(**self.customizations.model_dump()),
        )


class ValidateUrlRequest(BaseModel):
    url: str


class ValidateUrlResponse(BaseModel):
    url: str
    supported: bool


class GenerationResponse(BaseModel):
    """Result of a completed run; ``run_id`` matches the SSE progress events."""

    run_id: str
    data: LandingPageData


class PublishLandingPageRequest(BaseModel):
    data: LandingPageData


class PublishedLandingPageResponse(BaseModel):
    id: str
    url: str
    data: LandingPageData
    published_at: datetime
    display_price: str = ""
    discount_percent: int = 0
    countdown_remaining: dict[str, int] = Field(default_factory=dict)
    meta_tags: dict[str, str] = Field(default_factory=dict)

    model_config = {"from_attributes": True}
