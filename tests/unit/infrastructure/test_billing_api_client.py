"""Unit tests for the billing API client.

The happy path runs against the real app through an ASGI transport; failure
modes use httpx.MockTransport so a single endpoint can be broken at a time.
"""

from collections.abc import Callable

import httpx
import pytest

from costboard.infrastructure.api_client import (
    BillingApiClient,
    DashboardData,
    DashboardLoadError,
)
from costboard.infrastructure.fixtures import billing_data
from costboard_config import Settings
from tests.conftest import fixture_payloads

BASE_URL = "http://billing.test"


def mock_transport(
    overrides: dict[str, Callable[[httpx.Request], httpx.Response]] | None = None,
) -> httpx.MockTransport:
    """Serve the fixtures, except for paths with an override handler."""
    payloads = fixture_payloads()
    overrides = overrides or {}
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        seen.append(path)
        if path in overrides:
            return overrides[path](request)
        if path in payloads:
            return httpx.Response(200, json=payloads[path])
        return httpx.Response(404, json={"detail": "Not Found"})

    transport = httpx.MockTransport(handler)
    transport.seen = seen  # type: ignore[attr-defined]
    return transport


def server_error(request: httpx.Request) -> httpx.Response:
    return httpx.Response(500, json={"detail": "boom", "code": "INTERNAL_ERROR"})


def connection_refused(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


class TestLoadDashboard:
    """Tests for the concurrent six-way dashboard load."""

    @pytest.mark.asyncio
    async def test_loads_everything_from_the_app(self, asgi_transport):
        async with BillingApiClient("http://testserver", transport=asgi_transport) as client:
            data = await client.load_dashboard()

        assert isinstance(data, DashboardData)
        assert data.accounts == billing_data.ACCOUNTS
        assert data.cost_overview == billing_data.COST_OVERVIEW
        assert data.service_breakdown == billing_data.SERVICE_BREAKDOWN
        assert data.cost_trends == billing_data.COST_TRENDS
        assert data.budget_alerts == billing_data.BUDGET_ALERTS
        assert data.regional_costs == billing_data.REGIONAL_COSTS

    @pytest.mark.asyncio
    async def test_requests_all_six_endpoints(self):
        transport = mock_transport()

        async with BillingApiClient(BASE_URL, transport=transport) as client:
            await client.load_dashboard()

        assert sorted(transport.seen) == sorted(fixture_payloads())

    @pytest.mark.asyncio
    async def test_error_status_fails_whole_load(self):
        transport = mock_transport({"/api/budget-alerts": server_error})

        async with BillingApiClient(BASE_URL, transport=transport) as client:
            with pytest.raises(DashboardLoadError) as exc_info:
                await client.load_dashboard()

        assert exc_info.value.path == "/api/budget-alerts"
        assert exc_info.value.status_code == 500
        assert len(transport.seen) == 6

    @pytest.mark.asyncio
    async def test_first_failure_in_request_order_is_raised(self):
        transport = mock_transport(
            {
                "/api/regional-costs": server_error,
                "/api/cost-overview": connection_refused,
            },
        )

        async with BillingApiClient(BASE_URL, transport=transport) as client:
            with pytest.raises(DashboardLoadError) as exc_info:
                await client.load_dashboard()

        assert exc_info.value.path == "/api/cost-overview"
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_invalid_payload_fails_whole_load(self):
        bad_accounts = fixture_payloads()["/api/accounts"]
        bad_accounts[0]["status"] = "unknown"
        transport = mock_transport(
            {"/api/accounts": lambda request: httpx.Response(200, json=bad_accounts)},
        )

        async with BillingApiClient(BASE_URL, transport=transport) as client:
            with pytest.raises(DashboardLoadError, match="invalid payload"):
                await client.load_dashboard()

    @pytest.mark.asyncio
    async def test_non_json_body_fails_whole_load(self):
        transport = mock_transport(
            {"/api/cost-trends": lambda request: httpx.Response(200, text="<html>")},
        )

        async with BillingApiClient(BASE_URL, transport=transport) as client:
            with pytest.raises(DashboardLoadError):
                await client.load_dashboard()

    @pytest.mark.asyncio
    async def test_failures_are_logged(self, caplog: pytest.LogCaptureFixture):
        transport = mock_transport({"/api/accounts": server_error})

        async with BillingApiClient(BASE_URL, transport=transport) as client:
            with pytest.raises(DashboardLoadError):
                await client.load_dashboard()

        assert "Error fetching dashboard data" in caplog.text


class TestSingleResources:
    """Tests for account lookup and health."""

    @pytest.mark.asyncio
    async def test_get_account(self, asgi_transport):
        async with BillingApiClient("http://testserver", transport=asgi_transport) as client:
            account = await client.get_account("acc-004")

        assert account == billing_data.ACCOUNTS[3]

    @pytest.mark.asyncio
    async def test_get_unknown_account(self, asgi_transport):
        async with BillingApiClient("http://testserver", transport=asgi_transport) as client:
            with pytest.raises(DashboardLoadError) as exc_info:
                await client.get_account("acc-999")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_health(self, asgi_transport):
        async with BillingApiClient("http://testserver", transport=asgi_transport) as client:
            health = await client.health()

        assert health.status == "healthy"


class TestClientConfiguration:
    def test_from_settings_uses_resolved_url(self):
        settings = Settings(
            _env_file=None,
            dashboard_api_url="http://billing:9000/",
            dashboard_timeout=5,
        )

        client = BillingApiClient.from_settings(settings)

        assert client.base_url == "http://billing:9000"

    @pytest.mark.asyncio
    async def test_client_can_be_reused_after_close(self):
        client = BillingApiClient(BASE_URL, transport=mock_transport())

        await client.load_dashboard()
        await client.close()
        await client.close()
        data = await client.load_dashboard()

        assert data.accounts == billing_data.ACCOUNTS
        await client.close()
