"""Unit tests for application settings configuration."""

from pathlib import Path

from lifelog.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_defaults(monkeypatch):
    for name in ("DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "JWT_ALGORITHM"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.default_page_size == 20
    assert settings.max_page_size == 100
    assert settings.jwt_algorithm == "HS256"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./lifelog.db")
    monkeypatch.setenv("MAX_PAGE_SIZE", "50")
    settings = Settings(_env_file=None)

    assert settings.database_url == "sqlite:///./lifelog.db"
    assert settings.max_page_size == 50
