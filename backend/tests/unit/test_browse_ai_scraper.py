"""Unit tests for the BrowseAiScraper."""

import json

import httpx
import pytest

from app.domain.exceptions import ServiceProviderError, TaskTimeoutError
from app.infrastructure.scraping import BrowseAiScraper

FINISHED_RESULT = {
    "id": "task-1",
    "status": "successful",
    "capturedTexts": {
        "productName": "Wireless Headphones",
        "description": "Over-ear, noise cancelling",
        "price": "₹1,999.00",
        "originalPrice": "M.R.P. ₹3,499",
        "brand": "Acme",
        "rating": "4.3 out of 5 stars",
        "reviewCount": "1,204 ratings",
    },
    "capturedLists": {
        "images": [
            {"Position": "1", "image": "https://img.test/1.jpg"},
            {"Position": "2", "image": "https://img.test/2.jpg"},
        ],
        "features": ["40h battery", "", "USB-C"],
    },
}


def _transport(statuses: list[str], requests: list[httpx.Request], create_status: int = 201):
    """Task creation, then one poll response per entry in ``statuses``."""
    polls = iter(statuses)

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.method == "POST":
            return httpx.Response(create_status, json={"result": {"id": "task-1"}})
        status = next(polls)
        result = FINISHED_RESULT if status == "successful" else {"id": "task-1", "status": status}
        return httpx.Response(200, json={"result": result})

    return httpx.MockTransport(handler)


def _scraper(transport: httpx.MockTransport, max_attempts: int = 5, credentials: str = "key:robot-9"):
    return BrowseAiScraper(
        credentials,
        max_attempts=max_attempts,
        poll_interval=0,
        http_client=httpx.AsyncClient(transport=transport),
    )


@pytest.mark.asyncio
async def test_scrape_polls_until_successful():
    requests: list[httpx.Request] = []
    scraper = _scraper(_transport(["in-progress", "in-progress", "successful"], requests))

    info = await scraper.scrape_product("https://www.amazon.in/dp/B0TEST")

    assert [r.method for r in requests] == ["POST", "GET", "GET", "GET"]
    create = requests[0]
    assert create.url.path == "/v2/robots/robot-9/tasks"
    assert create.headers["Authorization"] == "Bearer key"
    assert json.loads(create.content) == {
        "inputParameters": {"originUrl": "https://www.amazon.in/dp/B0TEST"}
    }
    assert requests[1].url.path == "/v2/robots/robot-9/tasks/task-1"

    assert info.name == "Wireless Headphones"
    assert info.price == 1999.0
    assert info.original_price == 3499.0
    assert info.images == ["https://img.test/1.jpg", "https://img.test/2.jpg"]
    assert info.features == ["40h battery", "USB-C"]
    assert info.rating == 4.3
    assert info.reviews == 1204
    assert info.brand == "Acme"


@pytest.mark.asyncio
async def test_failed_task_is_a_provider_error():
    scraper = _scraper(_transport(["in-progress", "failed"], []))

    with pytest.raises(ServiceProviderError) as exc_info:
        await scraper.scrape_product("https://www.amazon.in/dp/B0TEST")

    assert exc_info.value.status_code == 502


@pytest.mark.asyncio
async def test_polling_gives_up_after_max_attempts():
    requests: list[httpx.Request] = []
    scraper = _scraper(_transport(["in-progress"] * 3, requests), max_attempts=3)

    with pytest.raises(TaskTimeoutError) as exc_info:
        await scraper.scrape_product("https://www.amazon.in/dp/B0TEST")

    assert exc_info.value.attempts == 3
    assert len(requests) == 4


@pytest.mark.asyncio
async def test_rejected_task_creation_is_a_provider_error():
    scraper = _scraper(_transport([], [], create_status=403))

    with pytest.raises(ServiceProviderError) as exc_info:
        await scraper.scrape_product("https://www.amazon.in/dp/B0TEST")

    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_credentials_without_robot_id_are_rejected():
    requests: list[httpx.Request] = []
    scraper = _scraper(_transport([], requests), credentials="only-a-key")

    with pytest.raises(ServiceProviderError) as exc_info:
        await scraper.scrape_product("https://www.amazon.in/dp/B0TEST")

    assert exc_info.value.status_code == 401
    assert requests == []


def test_parse_product_data_applies_defaults():
    info = BrowseAiScraper.parse_product_data({})

    assert info.name == "Unknown Product"
    assert info.description == "No description available"
    assert info.price == 0.0
    assert info.images == []
    assert info.category == "other"
    assert info.original_price is None
    assert info.rating is None
