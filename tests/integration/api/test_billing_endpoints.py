"""Integration tests for the billing API endpoints.

Every data endpoint serves its fixture verbatim, with camelCase field
names, and returns identical bytes on every call.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from costboard import __version__
from costboard.infrastructure.fixtures import billing_data

DATA_ENDPOINTS = [
    "/api/accounts",
    "/api/cost-overview",
    "/api/service-breakdown",
    "/api/cost-trends",
    "/api/budget-alerts",
    "/api/regional-costs",
]


class TestDataEndpoints:
    """Tests for the six dashboard data endpoints."""

    @pytest.mark.parametrize("path", DATA_ENDPOINTS)
    def test_serves_fixture(self, test_client: TestClient, payloads: dict, path: str):
        response = test_client.get(path)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == payloads[path]

    @pytest.mark.parametrize("path", DATA_ENDPOINTS)
    def test_repeated_calls_are_byte_identical(self, test_client: TestClient, path: str):
        first = test_client.get(path)
        second = test_client.get(path)

        assert first.content == second.content

    def test_collection_sizes(self, test_client: TestClient):
        assert len(test_client.get("/api/accounts").json()) == 5
        assert len(test_client.get("/api/service-breakdown").json()) == 13
        assert len(test_client.get("/api/cost-trends").json()) == 7
        assert len(test_client.get("/api/budget-alerts").json()) == 4
        assert len(test_client.get("/api/regional-costs").json()) == 6

    def test_account_fields_are_camel_case(self, test_client: TestClient):
        account = test_client.get("/api/accounts").json()[0]

        assert set(account) == {
            "id",
            "name",
            "accountNumber",
            "monthlyBudget",
            "currentSpend",
            "status",
        }

    def test_cost_overview_fields(self, test_client: TestClient):
        overview = test_client.get("/api/cost-overview").json()

        assert set(overview) == {
            "totalMonthlySpend",
            "totalBudget",
            "percentOfBudget",
            "previousMonthSpend",
            "changePercent",
            "forecastedMonthEnd",
            "savingsOpportunities",
        }
        assert overview["totalMonthlySpend"] == 899447.78

    def test_cost_trend_uses_lambda_key(self, test_client: TestClient):
        point = test_client.get("/api/cost-trends").json()[0]

        assert point["date"] == "2024-07-01"
        assert point["lambda"] == 67890.12
        assert "lambda_" not in point

    def test_budget_alert_fields(self, test_client: TestClient):
        alert = test_client.get("/api/budget-alerts").json()[0]

        assert set(alert) == {
            "id",
            "account",
            "severity",
            "message",
            "threshold",
            "current",
            "timestamp",
        }
        assert alert["severity"] in {"critical", "warning", "info"}

    def test_statuses_stay_within_closed_set(self, test_client: TestClient):
        statuses = {a["status"] for a in test_client.get("/api/accounts").json()}

        assert statuses <= {"healthy", "warning", "critical"}


class TestAccountLookup:
    """Tests for GET /api/accounts/{id}."""

    @pytest.mark.parametrize("account", billing_data.ACCOUNTS, ids=lambda a: a.id)
    def test_known_id_returns_account(self, test_client: TestClient, account):
        response = test_client.get(f"/api/accounts/{account.id}")

        assert response.status_code == 200
        assert response.json() == account.model_dump(mode="json", by_alias=True)

    def test_lookup_matches_list_entry(self, test_client: TestClient):
        listed = test_client.get("/api/accounts").json()
        by_id = {a["id"]: a for a in listed}

        for account_id, account in by_id.items():
            assert test_client.get(f"/api/accounts/{account_id}").json() == account

    def test_unknown_id_returns_404(self, test_client: TestClient):
        response = test_client.get("/api/accounts/acc-999")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Account 'acc-999' not found",
            "code": "ACCOUNT_NOT_FOUND",
        }

    def test_lookup_is_case_sensitive(self, test_client: TestClient):
        assert test_client.get("/api/accounts/ACC-001").status_code == 404


class TestHealthEndpoint:
    """Tests for GET /health."""

    def test_reports_healthy(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["version"] == __version__

    def test_timestamp_is_current_utc(self, test_client: TestClient):
        before = datetime.now(timezone.utc)
        body = test_client.get("/health").json()
        after = datetime.now(timezone.utc)

        timestamp = datetime.fromisoformat(body["timestamp"])
        assert timestamp.tzinfo is not None
        assert before <= timestamp <= after


class TestRootAndCors:
    """Tests for API info and cross-origin access."""

    def test_root_lists_endpoints(self, test_client: TestClient):
        body = test_client.get("/").json()

        assert body["api_base"] == "/api"
        assert body["endpoints"]["accounts"] == "/api/accounts"
        assert body["endpoints"]["health"] == "/health"

    def test_any_origin_allowed(self, test_client: TestClient):
        response = test_client.get(
            "/api/accounts",
            headers={"Origin": "http://dashboard.example"},
        )

        assert response.headers["access-control-allow-origin"] == "*"

    def test_docs_hidden_without_debug(self, test_client: TestClient):
        assert test_client.get("/openapi.json").status_code == 404

    def test_unknown_path_returns_404(self, test_client: TestClient):
        assert test_client.get("/api/does-not-exist").status_code == 404


class TestWireNumbers:
    """Integral fixture values are served as JSON integers."""

    def test_account_budget_is_integral(self, test_client: TestClient):
        body = test_client.get("/api/accounts/acc-001").text

        assert '"monthlyBudget":500000,' in body
        assert '"currentSpend":487234.56,' in body

    def test_overview_integral_fields(self, test_client: TestClient):
        body = test_client.get("/api/cost-overview").text

        assert '"totalBudget":930000,' in body
        assert '"savingsOpportunities":45234}' in body

    def test_alert_thresholds_are_integral(self, test_client: TestClient):
        body = test_client.get("/api/budget-alerts").text

        assert '"threshold":95,' in body
        assert '"current":109,' in body

    def test_zero_change_is_integral(self, test_client: TestClient):
        body = test_client.get("/api/service-breakdown").text

        assert '"service":"IAM","cost":5432.1,"percentage":0.6,"change":0}' in body
