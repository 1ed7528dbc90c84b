"""Deterministic fallbacks used when an LLM stage replies with something unusable."""

from app.domain.entities import (
    FAQ,
    ColorPalette,
    DesignTheme,
    FontPairing,
    GeneratedContent,
    ProductClassification,
    ProductInfo,
    Testimonial,
)

_BUDGET_CEILING = 50
_MID_RANGE_CEILING = 200


def default_classification(product_info: ProductInfo) -> ProductClassification:
    if product_info.price < _BUDGET_CEILING:
        price_range = "budget"
    elif product_info.price < _MID_RANGE_CEILING:
        price_range = "mid-range"
    else:
        price_range = "premium"

    return ProductClassification(
        category="other",
        subcategory="general",
        target_audience="general",
        price_range=price_range,
    )


def default_theme(classification: ProductClassification | None = None) -> DesignTheme:
    """Neutral blue theme; independent of the classification."""
    return DesignTheme(
        name="Default Theme",
        color_palette=ColorPalette(
            primary="#3B82F6",
            secondary="#1E40AF",
            accent="#F59E0B",
            background="#FFFFFF",
            text="#1F2937",
            text_light="#6B7280",
        ),
        fonts=FontPairing(heading="Inter", body="Inter", accent="Inter"),
        style="modern",
    )


def default_content(product_info: ProductInfo) -> GeneratedContent:
    return GeneratedContent(
        headline=f"Amazing {product_info.name}",
        subheadline="Get yours today with fast delivery!",
        description=product_info.description,
        benefits=["High Quality", "Fast Shipping", "Great Value", "Customer Support"],
        upsell_copy="Limited time offer - get yours now!",
        urgency_text="Only few left in stock!",
        cta_text="Order Now",
        testimonials=[
            Testimonial(name="John D.", rating=5, text="Great product!"),
            Testimonial(name="Sarah M.", rating=5, text="Highly recommend!"),
            Testimonial(name="Mike R.", rating=4, text="Good value for money."),
        ],
        faq=[
            FAQ(question="How long is shipping?", answer="3-5 business days."),
            FAQ(question="What is your return policy?", answer="30-day money back guarantee."),
        ],
    )
