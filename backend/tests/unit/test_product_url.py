"""Unit tests for the product URL allowlist."""

import pytest

from app.domain.product_url import validate_product_url


@pytest.mark.parametrize(
    "url",
    [
        "https://www.amazon.in/dp/B0TEST",
        "https://amazon.com/gp/product/123",
        "http://www.flipkart.com/item/p/itm123",
        "https://www.myntra.com/shoes/123",
        "https://ajio.com/p/1",
        "https://www.nykaa.com/lipstick/p/1",
        "https://store.shopify.com/products/mug",
        "https://WWW.AMAZON.IN/dp/B0TEST",
    ],
)
def test_supported_store_urls_are_accepted(url):
    assert validate_product_url(url) is True


@pytest.mark.parametrize(
    "url",
    [
        "",
        "not a url",
        "ftp://amazon.in/dp/1",
        "https://randomshop.example/p/1",
        "https://notamazon.in/dp/1",
        "https://amazon.in.evil.example/dp/1",
        "https:///dp/1",
    ],
)
def test_other_urls_are_rejected(url):
    assert validate_product_url(url) is False
