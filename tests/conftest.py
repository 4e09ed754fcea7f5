"""Root pytest configuration and shared fixtures.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests
    │   ├── config/            # Settings loading
    │   ├── contracts/         # Wire records
    │   ├── domain/            # Domain exceptions
    │   ├── application/       # Queries
    │   ├── infrastructure/    # Fixture repository, API client
    │   └── presentation/      # Formatting, views, CLI, frontend serving
    └── integration/
        └── api/               # Full app through the FastAPI TestClient
"""

from collections.abc import Iterator

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from costboard.infrastructure.fixtures import billing_data
from costboard.presentation.api.app import create_app
from costboard_config import Settings, clear_settings_cache


def dump_records(records) -> list[dict]:
    """Serialize records exactly as the API puts them on the wire."""
    return [record.model_dump(mode="json", by_alias=True) for record in records]


def fixture_payloads() -> dict[str, object]:
    """JSON bodies of every dashboard endpoint, keyed by path."""
    return {
        "/api/accounts": dump_records(billing_data.ACCOUNTS),
        "/api/cost-overview": billing_data.COST_OVERVIEW.model_dump(
            mode="json",
            by_alias=True,
        ),
        "/api/service-breakdown": dump_records(billing_data.SERVICE_BREAKDOWN),
        "/api/cost-trends": dump_records(billing_data.COST_TRENDS),
        "/api/budget-alerts": dump_records(billing_data.BUDGET_ALERTS),
        "/api/regional-costs": dump_records(billing_data.REGIONAL_COSTS),
    }


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Make every test read settings fresh."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Development settings independent of any local .env file."""
    return Settings(_env_file=None, app_env="development", port=3001)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def test_client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as client:
        yield client


@pytest.fixture
def asgi_transport(app: FastAPI) -> httpx.ASGITransport:
    """Transport routing client requests straight into the app."""
    return httpx.ASGITransport(app=app)


@pytest.fixture
def payloads() -> dict[str, object]:
    return fixture_payloads()
