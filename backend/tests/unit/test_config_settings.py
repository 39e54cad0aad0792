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


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("LOG_ANALYSIS_LIMIT", "5")
    monkeypatch.setenv("PUBLIC_BASE_URL", "https://cards.hawkforce.ai")

    settings = Settings(_env_file=None)

    assert settings.storage_backend == "memory"
    assert settings.log_analysis_limit == 5
    assert settings.public_base_url == "https://cards.hawkforce.ai"


def test_default_gemini_model():
    settings = Settings(_env_file=None)

    assert settings.gemini_model == "gemini-3-flash-preview"
    assert settings.organization_name == "Hawkforce AI"
