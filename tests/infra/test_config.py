"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from record_shop.infra.db.config import (
    database_max_overflow,
    database_pool_size,
    database_url,
)
from record_shop.infra.musicbrainz.config import (
    DEFAULT_API_URL,
    musicbrainz_api_url,
    musicbrainz_timeout_seconds,
    musicbrainz_user_agent,
)


# ==============================================================================
# Database
# ==============================================================================


def test_database_url_is_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


def test_database_url_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://shop@localhost/records")

    assert database_url() == "postgresql+psycopg://shop@localhost/records"


def test_pool_settings_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_POOL_SIZE", raising=False)
    monkeypatch.setenv("DATABASE_MAX_OVERFLOW", "")

    assert database_pool_size() == 10
    assert database_max_overflow() == 20


def test_pool_settings_must_be_integers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_POOL_SIZE", "ten")

    with pytest.raises(RuntimeError, match="DATABASE_POOL_SIZE"):
        database_pool_size()


# ==============================================================================
# MusicBrainz
# ==============================================================================


def test_musicbrainz_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MUSICBRAINZ_API_URL", "MUSICBRAINZ_TIMEOUT_SECONDS", "MUSICBRAINZ_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)

    assert musicbrainz_api_url() == DEFAULT_API_URL
    assert musicbrainz_timeout_seconds() == 5.0
    assert musicbrainz_user_agent().startswith("record-shop/")


def test_musicbrainz_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MUSICBRAINZ_API_URL", "http://localhost:5000/ws/2/release/")
    monkeypatch.setenv("MUSICBRAINZ_TIMEOUT_SECONDS", "1.5")

    assert musicbrainz_api_url() == "http://localhost:5000/ws/2/release"
    assert musicbrainz_timeout_seconds() == 1.5


def test_musicbrainz_timeout_must_be_numeric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MUSICBRAINZ_TIMEOUT_SECONDS", "soon")

    with pytest.raises(RuntimeError):
        musicbrainz_timeout_seconds()
