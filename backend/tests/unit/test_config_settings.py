"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

from client_registry.config import Settings
from client_registry.infrastructure.database.session import get_async_url
from client_registry.infrastructure.logging.log_config import setup_logging


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_lookup_urls_from_environment(monkeypatch):
    monkeypatch.setenv("VIA_CEP_BASE_URL", "http://cep.local/ws")
    monkeypatch.setenv("LOG_LEVEL_LOOKUPS", "DEBUG")

    settings = Settings()

    assert settings.via_cep_base_url == "http://cep.local/ws"
    assert settings.log_level_lookups == "DEBUG"
    assert settings.brasil_api_base_url == "https://brasilapi.com.br/api"


def test_async_url_conversion():
    assert get_async_url("sqlite:///./clients.db") == "sqlite+aiosqlite:///./clients.db"
    assert (
        get_async_url("postgresql://u:p@db:5432/clients")
        == "postgresql+asyncpg://u:p@db:5432/clients"
    )
    assert get_async_url("postgresql+asyncpg://db/x") == "postgresql+asyncpg://db/x"


def test_setup_logging_applies_category_levels():
    settings = Settings(log_level="WARNING", log_level_sql="ERROR", log_level_lookups="DEBUG")

    setup_logging(settings)

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("client_registry.infrastructure.lookups").level == logging.DEBUG


def test_setup_logging_falls_back_to_info_for_unknown_level():
    setup_logging(Settings(log_level_http="LOUD"))

    assert logging.getLogger("httpx").level == logging.INFO
