"""Tests for the AppConfig dataclass."""

import dataclasses

import pytest

from linear_discord.config import AppConfig, DEFAULT_DELIVERY_TIMEOUT
from linear_discord.domain.errors import ConfigError

ENV_VARS = [
    "DISCORD_WEBHOOK_URL",
    "PORT",
    "HOST",
    "LOG_LEVEL",
    "DELIVERY_TIMEOUT_SECONDS",
    "DISCORD_USERNAME",
    "DISCORD_AVATAR_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig(discord_webhook_url="https://discord.test/hook")
        assert c.port == 3000
        assert c.host == "0.0.0.0"
        assert c.log_level == "INFO"
        assert c.delivery_timeout_seconds == DEFAULT_DELIVERY_TIMEOUT
        assert c.discord_username is None

    def test_immutable(self):
        c = AppConfig(discord_webhook_url="https://discord.test/hook")
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.port = 8080


class TestFromEnv:
    def test_requires_webhook_url(self):
        with pytest.raises(ConfigError):
            AppConfig.from_env()

    def test_blank_webhook_url(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "   ")
        with pytest.raises(ConfigError):
            AppConfig.from_env()

    def test_minimal(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.test/hook")
        c = AppConfig.from_env()
        assert c.discord_webhook_url == "https://discord.test/hook"
        assert c.port == 3000

    def test_all(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.test/hook")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("DELIVERY_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("DISCORD_USERNAME", "Linear")
        monkeypatch.setenv("DISCORD_AVATAR_URL", "https://example.com/a.png")
        c = AppConfig.from_env()
        assert c.port == 8080
        assert c.host == "127.0.0.1"
        assert c.log_level == "DEBUG"
        assert c.delivery_timeout_seconds == 2.5
        assert c.discord_username == "Linear"
        assert c.discord_avatar_url == "https://example.com/a.png"

    @pytest.mark.parametrize("name,value", [
        ("PORT", "abc"),
        ("PORT", "0"),
        ("PORT", "70000"),
        ("DELIVERY_TIMEOUT_SECONDS", "-1"),
        ("LOG_LEVEL", "loud"),
    ])
    def test_invalid(self, monkeypatch, name, value):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.test/hook")
        monkeypatch.setenv(name, value)
        with pytest.raises(ConfigError):
            AppConfig.from_env()

    def test_highest_port(self, monkeypatch):
        monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://discord.test/hook")
        monkeypatch.setenv("PORT", "65535")
        assert AppConfig.from_env().port == 65535

