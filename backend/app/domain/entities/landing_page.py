"""Domain entities for landing page generation: framework-independent.

A ``LandingPageData`` is assembled once per successful generation run and is
not modified afterwards; publishing wraps it in a ``PublishedLandingPage``.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Literal

ProductCategory = Literal["electronics", "fashion", "home", "beauty", "sports", "books", "other"]
TargetAudience = Literal["men", "women", "unisex", "kids", "general"]
PriceRange = Literal["budget", "mid-range", "premium", "luxury"]
ThemeStyle = Literal["modern", "classic", "minimalist", "bold", "elegant"]
UrgencyLevel = Literal["low", "medium", "high"]


@dataclass
class ProductInfo:
    """Product data extracted from a store page or search results."""

    name: str
    description: str
    price: float
    images: list[str] = field(default_factory=list)
    category: str = "other"
    original_price: float | None = None
    brand: str | None = None
    features: list[str] = field(default_factory=list)
    specifications: dict[str, str] = field(default_factory=dict)
    rating: float | None = None
    reviews: int | None = None


@dataclass
class ProductClassification:
    category: ProductCategory
    subcategory: str
    target_audience: TargetAudience
    price_range: PriceRange


@dataclass
class ColorPalette:
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    text_light: str


@dataclass
class FontPairing:
    heading: str
    body: str
    accent: str


@dataclass
class DesignTheme:
    name: str
    color_palette: ColorPalette
    fonts: FontPairing
    style: ThemeStyle


@dataclass
class Testimonial:
    name: str
    rating: int
    text: str
    verified: bool = True
    avatar: str | None = None


@dataclass
class FAQ:
    question: str
    answer: str


@dataclass
class GeneratedContent:
    """Marketing copy produced for the landing page."""

    headline: str
    subheadline: str
    description: str
    benefits: list[str]
    upsell_copy: str
    urgency_text: str
    cta_text: str
    testimonials: list[Testimonial] = field(default_factory=list)
    faq: list[FAQ] = field(default_factory=list)


@dataclass
class ProcessedImage:
    """Derived URLs for one product image.

    When processing fails every field holds the original URL.
    """

    original: str
    background_removed: str
    cdn_url: str
    optimized_url: str
    thumbnail_url: str

    @classmethod
    def unprocessed(cls, url: str) -> "ProcessedImage":
        return cls(
            original=url,
            background_removed=url,
            cdn_url=url,
            optimized_url=url,
            thumbnail_url=url,
        )


@dataclass
class CountdownTimer:
    end_time: datetime
    title: str
    urgency_level: UrgencyLevel


@dataclass
class FieldRule:
    """Validation rule for one order-form field."""

    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    min: float | None = None
    max: float | None = None
    message: str | None = None


@dataclass
class CODFormConfig:
    enabled: bool
    fields: list[str]
    validation_rules: dict[str, FieldRule]


@dataclass
class LandingPageData:
    """Aggregate result of one generation run."""

    product_info: ProductInfo
    classification: ProductClassification
    theme: DesignTheme
    content: GeneratedContent
    images: list[ProcessedImage]
    countdown: CountdownTimer
    cod_form: CODFormConfig


class GenerationStep(str, Enum):
    """Pipeline stages, in the order they are reported."""

    STARTING = "starting"
    EXTRACTING = "extracting"
    CLASSIFYING = "classifying"
    DESIGNING = "designing"
    CONTENT = "content"
    IMAGES = "images"
    COUNTDOWN = "countdown"
    FORM = "form"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass
class GenerationProgress:
    """One progress report of a generation run."""

    step: GenerationStep
    progress: int
    message: str
    error: str | None = None

    @property
    def completed(self) -> bool:
        return self.progress == 100

    def to_dict(self) -> dict:
        return {
            "step": self.step.value,
            "progress": self.progress,
            "message": self.message,
            "completed": self.completed,
            "error": self.error,
        }


@dataclass
class Customizations:
    """Caller-supplied options; ``countdown_hours`` bounds are enforced upstream."""

    color_preference: str | None = None
    style_preference: str | None = None
    target_audience: str | None = None
    urgency_level: UrgencyLevel | None = None
    include_countdown: bool = True
    countdown_hours: int | None = None


@dataclass
class GenerateLandingPageRequest:
    product_url: str
    customizations: Customizations = field(default_factory=Customizations)


@dataclass
class PublishedLandingPage:
    """A generated landing page made reachable under a public URL."""

    id: str
    url: str
    data: LandingPageData
    published_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
