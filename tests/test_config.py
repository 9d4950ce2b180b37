"""Tests for the environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from mock_api.config import ServerSpeed, Settings, get_settings, reset_settings_cache


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("SERVER_PORT", "SERVER_SPEED", "PAGE_SIZE", "CHANCE_OF_SERVER_ERROR", "REQUEST_LOGGING"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


def test_defaults():
    settings = Settings()

    assert settings.port == 3002
    assert settings.speed is ServerSpeed.FAST
    assert settings.page_size == 10
    assert settings.chance_of_server_error == 0.05
    assert settings.request_logging is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SERVER_PORT", "3003")
    monkeypatch.setenv("SERVER_SPEED", "slow")
    monkeypatch.setenv("PAGE_SIZE", "25")
    monkeypatch.setenv("CHANCE_OF_SERVER_ERROR", "0")
    monkeypatch.setenv("REQUEST_LOGGING", "false")

    settings = Settings()

    assert settings.port == 3003
    assert settings.speed is ServerSpeed.SLOW
    assert settings.page_size == 25
    assert settings.chance_of_server_error == 0
    assert settings.request_logging is False


@pytest.mark.parametrize("raw", ["warp", "", "FAST", "SLOW", " slow", "Instant"])
def test_unknown_speed_falls_back_to_fast(monkeypatch, raw):
    monkeypatch.setenv("SERVER_SPEED", raw)

    assert Settings().speed is ServerSpeed.FAST


def test_ignores_generic_port_and_speed_variables(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SPEED", "slow")

    settings = Settings()

    assert settings.port == 3002
    assert settings.speed is ServerSpeed.FAST


def test_keyword_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("SERVER_SPEED", "slow")

    settings = Settings(speed="instant", port=0)

    assert settings.speed is ServerSpeed.INSTANT
    assert settings.port == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"page_size": 0},
        {"chance_of_server_error": 1.5},
        {"chance_of_server_error": -0.1},
        {"fast_latency_min_ms": 900, "fast_latency_max_ms": 100},
        {"slow_latency_min_ms": 3000},
    ],
)
def test_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_get_settings_is_cached_until_reset(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("SERVER_SPEED", "instant")
    reset_settings_cache()

    assert get_settings().speed is ServerSpeed.INSTANT
