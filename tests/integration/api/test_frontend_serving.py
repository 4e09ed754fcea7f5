"""Integration tests for serving the dashboard bundle in production mode."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from costboard.presentation.api.app import create_app
from costboard_config import Settings


@pytest.fixture
def bundle_dir(tmp_path: Path) -> Path:
    """A minimal prebuilt frontend bundle."""
    (tmp_path / "index.html").write_text("<html>dashboard shell</html>")
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "app.js").write_text("console.log('app');")
    return tmp_path


def _production_client(frontend_dir: Path | None) -> TestClient:
    settings = Settings(
        _env_file=None,
        app_env="production",
        frontend_dir=frontend_dir,
    )
    return TestClient(create_app(settings))


class TestProductionFrontend:
    """Tests for the catch-all frontend route."""

    def test_root_serves_index(self, bundle_dir: Path):
        with _production_client(bundle_dir) as client:
            response = client.get("/")

        assert response.status_code == 200
        assert "dashboard shell" in response.text

    def test_existing_file_is_served(self, bundle_dir: Path):
        with _production_client(bundle_dir) as client:
            response = client.get("/assets/app.js")

        assert response.status_code == 200
        assert response.text == "console.log('app');"

    def test_unknown_route_falls_back_to_index(self, bundle_dir: Path):
        with _production_client(bundle_dir) as client:
            response = client.get("/accounts/acc-001/details")

        assert response.status_code == 200
        assert "dashboard shell" in response.text

    def test_api_routes_take_precedence(self, bundle_dir: Path, payloads: dict):
        with _production_client(bundle_dir) as client:
            accounts = client.get("/api/accounts")
            health = client.get("/health")

        assert accounts.json() == payloads["/api/accounts"]
        assert health.json()["status"] == "healthy"

    def test_unknown_api_path_is_not_the_shell(self, bundle_dir: Path):
        with _production_client(bundle_dir) as client:
            response = client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Route '/api/unknown' not found",
            "code": "ROUTE_NOT_FOUND",
        }

    def test_unknown_health_subpath_is_not_the_shell(self, bundle_dir: Path):
        with _production_client(bundle_dir) as client:
            response = client.get("/health/deep")

        assert response.status_code == 404
        assert response.json()["code"] == "ROUTE_NOT_FOUND"

    def test_missing_bundle_serves_api_only(self, tmp_path: Path):
        with _production_client(tmp_path / "missing") as client:
            root = client.get("/")
            accounts = client.get("/api/accounts")

        assert root.json()["api_base"] == "/api"
        assert accounts.status_code == 200

    def test_bundled_frontend_is_default(self):
        with _production_client(None) as client:
            response = client.get("/")

        assert response.status_code == 200
        assert "AWS Cost Dashboard" in response.text
        assert "/api/cost-overview" in response.text

    def test_development_mode_does_not_serve_bundle(self, bundle_dir: Path):
        settings = Settings(_env_file=None, app_env="development", frontend_dir=bundle_dir)
        with TestClient(create_app(settings)) as client:
            assert client.get("/assets/app.js").status_code == 404
