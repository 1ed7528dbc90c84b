"""Unit tests for the SerpAPI fallback extractor."""

import httpx
import pytest

from app.domain.exceptions import ServiceProviderError
from app.infrastructure.scraping import SerpApiProductSearch
from app.infrastructure.scraping.serpapi_product_search import extract_price


def _search(payload: dict, requests: list[httpx.Request], status_code: int = 200, api_key: str = "serp-key"):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, json=payload)

    return SerpApiProductSearch(
        api_key=api_key,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_extract_product_info_uses_first_organic_result():
    requests: list[httpx.Request] = []
    payload = {
        "organic_results": [
            {"title": "Yoga Mat Pro", "snippet": "Now only ₹799 with free delivery", "rating": 4.5},
            {"title": "Other", "snippet": "ignored"},
        ]
    }
    search = _search(payload, requests)

    info = await search.extract_product_info("https://www.flipkart.com/yoga-mat/p/itm1")

    params = requests[0].url.params
    assert requests[0].url.path == "/search"
    assert params["engine"] == "google"
    assert params["q"] == "site:www.flipkart.com product details"
    assert params["api_key"] == "serp-key"

    assert info.name == "Yoga Mat Pro"
    assert info.description == "Now only ₹799 with free delivery"
    assert info.price == 799.0
    assert info.rating == 4.5
    assert info.images == []
    assert info.category == "other"


@pytest.mark.asyncio
async def test_no_results_yields_placeholder_product():
    search = _search({"organic_results": []}, [])

    info = await search.extract_product_info("https://www.myntra.com/shoes/1")

    assert info.name == "Unknown Product"
    assert info.description == "Product description not available"
    assert info.price == 0.0


@pytest.mark.asyncio
async def test_error_status_is_a_provider_error():
    search = _search({"error": "Invalid API key."}, [], status_code=401)

    with pytest.raises(ServiceProviderError) as exc_info:
        await search.extract_product_info("https://www.myntra.com/shoes/1")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid API key."


@pytest.mark.asyncio
async def test_missing_key_fails_without_a_request():
    requests: list[httpx.Request] = []
    search = _search({}, requests, api_key="")

    with pytest.raises(ServiceProviderError):
        await search.search("anything")

    assert requests == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Price $19.99 today", 19.99),
        ("₹1,499 only", 1499.0),
        ("Hello, world 499", 499.0),
        ("Costs 1,299. Ships today", 1299.0),
        ("no price here", 0.0),
        ("", 0.0),
    ],
)
def test_extract_price(text, expected):
    assert extract_price(text) == expected
