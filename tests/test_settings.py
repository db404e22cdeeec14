# tests/test_settings.py
"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from devoverflow.core.settings import Settings


def test_defaults(test_settings) -> None:
    assert test_settings.auth_cookie_name == "auth_token"
    assert test_settings.question_reputation_reward == 5
    assert test_settings.trending_min_views == 100
    assert test_settings.trending_window_days == 7
    assert test_settings.default_page_size == 10


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TRENDING_MIN_VIEWS", "250")
    monkeypatch.setenv("ENVIRONMENT", "production")

    settings = Settings(_env_file=None)

    assert settings.trending_min_views == 250
    assert settings.is_production is True
    assert settings.is_development is False


def test_secret_key_is_required(monkeypatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unknown_environment_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "staging")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_database_urls(monkeypatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://app:pw@db/forum")
    monkeypatch.setenv("TEST_DATABASE_URL", "sqlite:///./test.db")

    settings = Settings(_env_file=None)
    assert settings.effective_database_url == "postgresql+asyncpg://app:pw@db/forum"
    assert settings.database_url_sync == "postgresql+psycopg://app:pw@db/forum"

    monkeypatch.setenv("USE_TEST_DATABASE", "true")
    assert Settings(_env_file=None).effective_database_url == "sqlite:///./test.db"
