"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_defaults_need_no_external_services(monkeypatch):
    """Without configuration the app runs on in-memory storage with no injected faults."""
    for name in ("DATABASE_URL", "SIMULATED_LATENCY_MS", "SIMULATED_ERROR_RATE", "GROQ_MODEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite+aiosqlite://"
    assert settings.simulated_latency_ms == 0
    assert settings.simulated_error_rate == 0.0
    assert settings.groq_model == "mixtral-8x7b-32768"
    assert Path(settings.seed_data_file).name == "seed.yaml"


def test_simulation_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("SIMULATED_LATENCY_MS", "250")
    monkeypatch.setenv("SIMULATED_ERROR_RATE", "0.1")

    settings = Settings(_env_file=None)

    assert settings.simulated_latency_seconds == 0.25
    assert settings.simulated_error_rate == 0.1


def test_provider_status_requires_robot_id_for_browse_ai():
    settings = Settings(
        _env_file=None,
        browseai_api_key="key:robot",
        serpapi_key="  ",
        cloudinary_cloud_name="demo",
    )

    status = settings.provider_status()

    assert status["browse_ai"] is True
    assert status["serpapi"] is False
    assert status["cloudinary"] is True
