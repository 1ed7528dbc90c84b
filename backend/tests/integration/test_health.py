"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.main import app


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return 200 with status, version, and environment."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "COD Landing Studio API"
    assert "version" in data
    assert "environment" in data
    assert set(data["records"]) == {"users", "products", "orders"}


@pytest.mark.asyncio
async def test_health_reports_configured_providers():
    app.dependency_overrides[get_settings] = lambda: Settings(
        _env_file=None,
        groq_api_key="gsk-test",
        browseai_api_key="key-only",
        simulated_error_rate=0.2,
    )
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            data = (await client.get("/api/v1/health")).json()
    finally:
        app.dependency_overrides.clear()

    assert data["fault_injection"] is True
    assert data["providers"]["groq"] is True
    assert data["providers"]["browse_ai"] is False
    assert data["providers"]["cloudinary"] is False
