"""Tests for Settings."""

from __future__ import annotations

import pytest

from docker_status.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("PORT", "DOCKER_STATUS_PORT", "DOCKER_STATUS_HOST", "DOCKER_STATUS_DOCKER_HOST"):
        monkeypatch.delenv(var, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.host == "0.0.0.0"
        assert settings.port == 8860
        assert settings.docker_host is None
        assert settings.log_level == "INFO"

    def test_plain_port_env(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        assert Settings(_env_file=None).port == 9000

    def test_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("DOCKER_STATUS_PORT", "9100")
        monkeypatch.setenv("DOCKER_STATUS_DOCKER_HOST", "tcp://10.0.0.5:2375")
        settings = Settings(_env_file=None)
        assert settings.port == 9100
        assert settings.docker_host == "tcp://10.0.0.5:2375"

    def test_prefixed_port_wins(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DOCKER_STATUS_PORT", "9100")
        assert Settings(_env_file=None).port == 9100

    def test_init_kwargs(self):
        assert Settings(_env_file=None, port=1234).port == 1234
