"""Tests for FastAPI main application."""

import sys
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(autouse=True)
def clear_module_cache() -> None:
    """Clear cached API modules before each test."""
    modules_to_remove = [
        key for key in sys.modules.keys() if key.startswith("regdigest.api")
    ]
    for module in modules_to_remove:
        del sys.modules[module]


class TestApplication:
    """Tests for the application wiring."""

    @pytest.fixture
    def settings(self) -> MagicMock:
        return MagicMock(
            GCP_PROJECT_ID="test-project",
            LOG_JSON=False,
            is_local=True,
            dispatch_backend="dry-run",
            DIGEST_TRIGGER_TOKEN=None,
        )

    def test_health_returns_healthy(self, settings: MagicMock) -> None:
        """GET /health should return healthy status."""
        with (
            patch("regdigest.config.logging.configure_logging"),
            patch("regdigest.config.settings.Settings", return_value=settings),
            patch("regdigest.adapters.firestore_client.firestore"),
            patch("regdigest.services.dispatch.DispatchClient.from_settings"),
        ):
            from regdigest.api.main import app

            with TestClient(app) as client:
                response = client.get("/health")

            assert response.status_code == 200
            assert response.json() == {"status": "healthy"}

    def test_lifespan_populates_state(self, settings: MagicMock) -> None:
        with (
            patch("regdigest.config.logging.configure_logging"),
            patch("regdigest.config.settings.Settings", return_value=settings),
            patch("regdigest.adapters.firestore_client.firestore"),
            patch(
                "regdigest.services.dispatch.DispatchClient.from_settings"
            ) as mock_from_settings,
        ):
            from regdigest.api.main import app

            with TestClient(app):
                assert app.state.settings is settings
                assert app.state.dispatch is mock_from_settings.return_value

    def test_routes_registered(self, settings: MagicMock) -> None:
        with (
            patch("regdigest.config.logging.configure_logging"),
            patch("regdigest.config.settings.Settings", return_value=settings),
        ):
            from regdigest.api.main import app

            paths = {route.path for route in app.routes}  # type: ignore[attr-defined]

        assert {
            "/health",
            "/internal/digest",
            "/feed",
            "/feed/personal",
            "/subscribers",
            "/subscribers/{email}",
        } <= paths
