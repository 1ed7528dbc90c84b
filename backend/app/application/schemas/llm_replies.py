"""Strict schemas for the JSON replies expected from the LLM stages.

A reply is accepted only if it validates against these models; anything
else is treated as malformed and replaced by a deterministic default.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _Reply(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ClassificationReply(_Reply):
    category: Literal["electronics", "fashion", "home", "beauty", "sports", "books", "other"]
    subcategory: str = Field(..., min_length=1)
    target_audience: Literal["men", "women", "unisex", "kids", "general"] = Field(
        ..., alias="targetAudience"
    )
    price_range: Literal["budget", "mid-range", "premium", "luxury"] = Field(
        ..., alias="priceRange"
    )


class ColorPaletteReply(_Reply):
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    text_light: str = Field(..., alias="textLight")


class FontPairingReply(_Reply):
    heading: str
    body: str
    accent: str


class DesignThemeReply(_Reply):
    name: str
    color_palette: ColorPaletteReply = Field(..., alias="colorPalette")
    fonts: FontPairingReply
    style: Literal["modern", "classic", "minimalist", "bold", "elegant"]


class TestimonialReply(_Reply):
    name: str
    rating: int = Field(..., ge=1, le=5)
    text: str
    verified: bool = True
    avatar: str | None = None


class FAQReply(_Reply):
    question: str
    answer: str


class GeneratedContentReply(_Reply):
    headline: str
    subheadline: str
    description: str
    benefits: list[str]
    upsell_copy: str = Field(..., alias="upsellCopy")
    urgency_text: str = Field(..., alias="urgencyText")
    cta_text: str = Field(..., alias="ctaText")
    testimonials: list[TestimonialReply] = Field(default_factory=list)
    faq: list[FAQReply] = Field(default_factory=list)
