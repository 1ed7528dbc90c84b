"""Unit tests for landing page helper functions."""

import re
from datetime import datetime, timedelta, timezone

import pytest

from app.application.services.landing_page_utils import (
    calculate_discount,
    countdown_remaining,
    format_price,
    generate_landing_page_id,
    generate_meta_tags,
    to_base36,
)
from app.application.services.generation_defaults import default_content, default_theme
from app.application.services.landing_page_generator import build_cod_form_config
from app.domain.entities import (
    CountdownTimer,
    LandingPageData,
    ProcessedImage,
    ProductClassification,
    ProductInfo,
)


def _page(images: list[ProcessedImage]) -> LandingPageData:
    product = ProductInfo(name="Yoga Mat", description="Non-slip", price=799, category="sports", brand="Flex")
    return LandingPageData(
        product_info=product,
        classification=ProductClassification("sports", "yoga", "unisex", "budget"),
        theme=default_theme(),
        content=default_content(product),
        images=images,
        countdown=CountdownTimer(datetime(2024, 1, 1, tzinfo=timezone.utc), "Limited Time Offer", "medium"),
        cod_form=build_cod_form_config(),
    )


@pytest.mark.parametrize(
    ("number", "expected"),
    [(0, "0"), (35, "z"), (36, "10"), (1295, "zz"), (46656, "1000")],
)
def test_to_base36(number, expected):
    assert to_base36(number) == expected


def test_landing_page_id_format():
    page_id = generate_landing_page_id()
    assert re.fullmatch(r"lp_\d{13}_[0-9a-z]{9}", page_id)
    assert generate_landing_page_id() != page_id


@pytest.mark.parametrize(
    ("original", "current", "expected"),
    [(1000, 750, 25), (3499, 1999, 43), (None, 500, 0), (500, 500, 0), (400, 500, 0)],
)
def test_calculate_discount(original, current, expected):
    assert calculate_discount(original, current) == expected


def test_countdown_remaining_splits_duration():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    end = now + timedelta(days=1, hours=2, minutes=3, seconds=4)

    assert countdown_remaining(end, now) == {"days": 1, "hours": 2, "minutes": 3, "seconds": 4}


def test_countdown_remaining_never_goes_negative():
    now = datetime(2024, 1, 2, tzinfo=timezone.utc)
    assert countdown_remaining(now - timedelta(hours=1), now) == {
        "days": 0, "hours": 0, "minutes": 0, "seconds": 0,
    }


def test_countdown_remaining_reads_naive_end_time_as_utc():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert countdown_remaining(datetime(2024, 1, 1, 0, 30), now)["minutes"] == 30


@pytest.mark.parametrize(
    ("price", "expected"),
    [
        (0, "₹0.00"),
        (999, "₹999.00"),
        (1999.5, "₹1,999.50"),
        (123456, "₹1,23,456.00"),
        (12345678.9, "₹1,23,45,678.90"),
    ],
)
def test_format_price_uses_indian_grouping(price, expected):
    assert format_price(price) == expected


def test_meta_tags_use_first_optimized_image():
    image = ProcessedImage("o", "b", "c", "https://cdn.test/opt.png", "t")
    tags = generate_meta_tags(_page([image]))

    assert tags["title"] == "Amazing Yoga Mat - Yoga Mat"
    assert tags["description"] == "Get yours today with fast delivery!"
    assert tags["keywords"] == "Yoga Mat, sports, Flex, COD, Cash on Delivery, Buy Online"
    assert tags["og_image"] == "https://cdn.test/opt.png"
    assert tags["og_title"] == "Amazing Yoga Mat"


def test_meta_tags_without_images():
    assert generate_meta_tags(_page([]))["og_image"] == ""
