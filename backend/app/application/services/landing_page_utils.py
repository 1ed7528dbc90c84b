"""Helpers for rendering and identifying landing pages."""

import secrets
import time
from datetime import datetime, timezone

from app.domain.entities import LandingPageData

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(number: int) -> str:
    """Lower-case base-36 representation of a non-negative integer."""
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def random_base36(length: int) -> str:
    return "".join(secrets.choice(_BASE36_DIGITS) for _ in range(length))


def epoch_millis() -> int:
    return int(time.time() * 1000)


def generate_landing_page_id() -> str:
    """``lp_<epoch ms>_<9 base36 chars>``."""
    return f"lp_{epoch_millis()}_{random_base36(9)}"


def calculate_discount(original_price: float | None, current_price: float) -> int:
    """Whole-percent discount, or 0 when there is none."""
    if not original_price or original_price <= current_price:
        return 0
    return round((original_price - current_price) / original_price * 100)


def countdown_remaining(end_time: datetime, now: datetime | None = None) -> dict[str, int]:
    """Split the time left until ``end_time`` into days/hours/minutes/seconds."""
    now = now or datetime.now(timezone.utc)
    if end_time.tzinfo is None:
        end_time = end_time.replace(tzinfo=timezone.utc)
    remaining = int((end_time - now).total_seconds())
    if remaining <= 0:
        return {"days": 0, "hours": 0, "minutes": 0, "seconds": 0}

    days, remaining = divmod(remaining, 86_400)
    hours, remaining = divmod(remaining, 3_600)
    minutes, seconds = divmod(remaining, 60)
    return {"days": days, "hours": hours, "minutes": minutes, "seconds": seconds}


def format_price(price: float) -> str:
    """Format as Indian rupees with lakh/crore digit grouping (``₹1,23,456.00``)."""
    sign = "-" if price < 0 else ""
    whole, fraction = f"{abs(price):.2f}".split(".")

    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])

    return f"{sign}₹{whole}.{fraction}"


def generate_meta_tags(data: LandingPageData) -> dict[str, str]:
    product = data.product_info
    content = data.content

    keywords = [
        product.name,
        product.category,
        product.brand,
        "COD",
        "Cash on Delivery",
        "Buy Online",
    ]

    return {
        "title": f"{content.headline} - {product.name}",
        "description": content.subheadline,
        "keywords": ", ".join(k for k in keywords if k),
        "og_image": data.images[0].optimized_url if data.images else "",
        "og_title": content.headline,
        "og_description": content.subheadline,
    }
