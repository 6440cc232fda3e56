"""
Basic application tests.

Validates that the FastAPI app starts correctly, reads its settings from
the environment and configures logging as expected.
"""

import logging

from fastapi.testclient import TestClient

from ledgercore.core.config import Settings
from ledgercore.main import app
from ledgercore.shared.logging import configure_logging

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/api/v1/health").json()
        assert body["status"] == "ok"
        assert "version" in body

    def test_docs_disabled_by_default(self) -> None:
        """Interactive docs are only served in debug mode."""
        assert client.get("/docs").status_code == 404


class TestSettings:
    """Tests for environment-driven configuration."""

    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("LEDGERCORE_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.api_prefix == "/api/v1"
        assert settings.debug is False

    def test_env_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("LEDGERCORE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LEDGERCORE_RATE_LIMIT_DEFAULT", "5/second")
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.rate_limit_default == "5/second"


class TestLogging:
    """Tests for logging configuration."""

    def test_level_applied(self) -> None:
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO


class TestRateLimiter:
    """Tests for the shared limiter."""

    def test_no_global_default_limits(self) -> None:
        """Limits come from endpoint decorators only; no middleware applies defaults."""
        from ledgercore.shared.security.rate_limiting import limiter

        assert limiter._default_limits == []
