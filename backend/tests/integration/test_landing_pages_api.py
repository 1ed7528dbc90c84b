"""End-to-end tests for landing page generation and publishing."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.application.interfaces import (
    ProductLLMClient,
    ProductScraper,
    ProductSearchExtractor,
)
from app.application.services import (
    ImageProcessingService,
    LandingPageGenerator,
    LandingPagePublisher,
    SSEManager,
)
from app.domain.entities import ProcessedImage, ProductInfo
from app.domain.exceptions import MalformedReplyError
from app.infrastructure.database import Base, create_engine_for
from app.infrastructure.database.repositories import SQLAlchemyLandingPageRepository
from app.infrastructure.dependencies import (
    get_landing_page_generator,
    get_landing_page_publisher,
    get_sse_manager,
)
from app.main import app

PRODUCT_URL = "https://www.flipkart.com/yoga-mat/p/itm123"


class StubScraper(ProductScraper):
    async def scrape_product(self, url):
        return ProductInfo(
            name="Yoga Mat Premium",
            description="Non-slip yoga mat",
            price=799.0,
            original_price=1299.0,
            images=["https://img.test/mat.jpg"],
        )


class UnusedSearch(ProductSearchExtractor):
    async def extract_product_info(self, url):
        raise AssertionError("search fallback should not run")


class MalformedLLM(ProductLLMClient):
    """Every stage replies with prose, so the defaults are used."""

    async def classify_product(self, product_info):
        raise MalformedReplyError("classification", "Sure! Here it is")

    async def generate_design_theme(self, classification):
        raise MalformedReplyError("design theme", "Sure! Here it is")

    async def generate_content(self, product_info, classification):
        raise MalformedReplyError("content", "Sure! Here it is")


class PassthroughImages(ImageProcessingService):
    def __init__(self):
        pass

    async def process_product_images(self, image_urls):
        return [ProcessedImage.unprocessed(url) for url in image_urls]


class RecordingSSE(SSEManager):
    def __init__(self):
        super().__init__()
        self.events: list[tuple[str, dict]] = []

    async def broadcast(self, event_type, data):
        self.events.append((event_type, data))
        await super().broadcast(event_type, data)


@pytest_asyncio.fixture
async def sse():
    return RecordingSSE()


@pytest_asyncio.fixture
async def client(sse):
    engine = create_engine_for("sqlite+aiosqlite://")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def publisher_override():
        async with factory() as session:
            yield LandingPagePublisher(SQLAlchemyLandingPageRepository(session), "https://shop.test")
            await session.commit()

    app.dependency_overrides[get_landing_page_generator] = lambda: LandingPageGenerator(
        scraper=StubScraper(),
        search_extractor=UnusedSearch(),
        llm_client=MalformedLLM(),
        image_processor=PassthroughImages(),
    )
    app.dependency_overrides[get_landing_page_publisher] = publisher_override
    app.dependency_overrides[get_sse_manager] = lambda: sse

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("url", "supported"),
    [(PRODUCT_URL, True), ("https://randomshop.example/p/1", False)],
)
async def test_validate_url(client, url, supported):
    response = await client.post("/api/v1/landing-pages/validate-url", json={"url": url})

    assert response.status_code == 200
    assert response.json() == {"url": url, "supported": supported}


@pytest.mark.asyncio
async def test_generate_returns_page_and_broadcasts_progress(client, sse):
    response = await client.post(
        "/api/v1/landing-pages/generate",
        params={"run_id": "run-42"},
        json={"product_url": PRODUCT_URL, "customizations": {"urgency_level": "high", "countdown_hours": 6}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["run_id"] == "run-42"
    data = body["data"]
    assert data["product_info"]["name"] == "Yoga Mat Premium"
    assert data["classification"]["price_range"] == "premium"
    assert data["theme"]["name"] == "Default Theme"
    assert data["content"]["headline"] == "Amazing Yoga Mat Premium"
    assert data["images"][0]["cdn_url"] == "https://img.test/mat.jpg"
    assert data["countdown"]["title"] == "FLASH SALE - Ends Today!"
    assert data["cod_form"]["enabled"] is True

    assert {event for event, _ in sse.events} == {"generation_progress"}
    assert {payload["run_id"] for _, payload in sse.events} == {"run-42"}
    assert [payload["progress"] for _, payload in sse.events] == [0, 10, 25, 40, 55, 70, 85, 95, 100]
    assert sse.events[-1][1]["completed"] is True


@pytest.mark.asyncio
async def test_generate_rejects_unsupported_store(client, sse):
    response = await client.post(
        "/api/v1/landing-pages/generate",
        json={"product_url": "https://randomshop.example/p/1"},
    )

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert "Unsupported product URL" in response.json()["detail"]
    assert sse.events == []


@pytest.mark.asyncio
async def test_generate_rejects_out_of_range_countdown(client):
    response = await client.post(
        "/api/v1/landing-pages/generate",
        json={"product_url": PRODUCT_URL, "customizations": {"countdown_hours": 500}},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_publish_then_fetch_and_list(client):
    generated = await client.post("/api/v1/landing-pages/generate", json={"product_url": PRODUCT_URL})
    page_data = generated.json()["data"]

    published = await client.post("/api/v1/landing-pages/publish", json={"data": page_data})

    assert published.status_code == 201
    page = published.json()
    assert page["id"].startswith("lp_")
    assert page["url"] == f"https://shop.test/landing/{page['id']}"
    assert page["display_price"] == "₹799.00"
    assert page["discount_percent"] == 38
    assert page["meta_tags"]["title"] == "Amazing Yoga Mat Premium - Yoga Mat Premium"
    assert set(page["countdown_remaining"]) == {"days", "hours", "minutes", "seconds"}
    assert sum(page["countdown_remaining"].values()) > 0

    fetched = await client.get(f"/api/v1/landing-pages/{page['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["product_info"] == page_data["product_info"]
    assert fetched.json()["data"]["cod_form"] == page_data["cod_form"]

    listed = await client.get("/api/v1/landing-pages", params={"limit": 5})
    assert [p["id"] for p in listed.json()] == [page["id"]]


@pytest.mark.asyncio
async def test_fetch_unknown_page_is_404(client):
    response = await client.get("/api/v1/landing-pages/lp_0_missing")

    assert response.status_code == 404
    assert response.json()["detail"] == "LandingPage with id 'lp_0_missing' not found"
