"""HTTP client for the Costboard billing API."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from costboard_contracts import (
    Account,
    BudgetAlert,
    CostOverview,
    CostTrendPoint,
    HealthResponse,
    RegionalCost,
    ServiceCost,
)

if TYPE_CHECKING:
    from costboard_config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ACCOUNTS = TypeAdapter(tuple[Account, ...])
_ACCOUNT = TypeAdapter(Account)
_COST_OVERVIEW = TypeAdapter(CostOverview)
_SERVICE_BREAKDOWN = TypeAdapter(tuple[ServiceCost, ...])
_COST_TRENDS = TypeAdapter(tuple[CostTrendPoint, ...])
_BUDGET_ALERTS = TypeAdapter(tuple[BudgetAlert, ...])
_REGIONAL_COSTS = TypeAdapter(tuple[RegionalCost, ...])
_HEALTH = TypeAdapter(HealthResponse)


class DashboardLoadError(Exception):
    """Raised when any part of the dashboard data cannot be loaded.

    Transport failures, error statuses and malformed payloads all end up
    here; callers show one generic error instead of partial data.
    """

    def __init__(self, message: str, path: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.status_code = status_code


@dataclass(frozen=True)
class DashboardData:
    """Everything the dashboard page renders, loaded in one go."""

    accounts: tuple[Account, ...]
    cost_overview: CostOverview
    service_breakdown: tuple[ServiceCost, ...]
    cost_trends: tuple[CostTrendPoint, ...]
    budget_alerts: tuple[BudgetAlert, ...]
    regional_costs: tuple[RegionalCost, ...]


class BillingApiClient:
    """Async HTTP client wrapper for the billing API.

    Every response is validated against the shared contracts before it is
    returned, so views only ever see well-formed records.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> BillingApiClient:
        return cls(
            base_url=settings.resolved_api_url,
            timeout=settings.dashboard_timeout,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> BillingApiClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _fetch(self, path: str, adapter: TypeAdapter[T]) -> T:
        """GET ``path`` and validate the body with ``adapter``."""
        client = await self._get_client()
        try:
            response = await client.get(path)
            response.raise_for_status()
            return adapter.validate_json(response.content)
        except httpx.HTTPStatusError as e:
            raise DashboardLoadError(
                f"{path} returned HTTP {e.response.status_code}",
                path=path,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise DashboardLoadError(
                f"Request to {path} failed ({type(e).__name__}): {e}",
                path=path,
            ) from e
        except ValidationError as e:
            raise DashboardLoadError(
                f"{path} returned an invalid payload: {e.error_count()} error(s)",
                path=path,
            ) from e

    # -------------------------------------------------------------------------
    # Dashboard (fan-out / fan-in)
    # -------------------------------------------------------------------------

    async def load_dashboard(self) -> DashboardData:
        """Fetch all six dashboard resources concurrently.

        Waits for every request to settle. If any of them failed, the first
        failure is raised and nothing is returned.

        Raises
        ------
        DashboardLoadError
            If any request fails or returns an invalid payload.
        """
        results = await asyncio.gather(
            self._fetch("/api/accounts", _ACCOUNTS),
            self._fetch("/api/cost-overview", _COST_OVERVIEW),
            self._fetch("/api/service-breakdown", _SERVICE_BREAKDOWN),
            self._fetch("/api/cost-trends", _COST_TRENDS),
            self._fetch("/api/budget-alerts", _BUDGET_ALERTS),
            self._fetch("/api/regional-costs", _REGIONAL_COSTS),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            for failure in failures:
                logger.error("Error fetching dashboard data: %s", failure)
            raise failures[0]

        (
            accounts,
            cost_overview,
            service_breakdown,
            cost_trends,
            budget_alerts,
            regional_costs,
        ) = results
        logger.debug(
            "Dashboard loaded: %d accounts, %d services, %d alerts, %d regions",
            len(accounts),
            len(service_breakdown),
            len(budget_alerts),
            len(regional_costs),
        )
        return DashboardData(
            accounts=accounts,
            cost_overview=cost_overview,
            service_breakdown=service_breakdown,
            cost_trends=cost_trends,
            budget_alerts=budget_alerts,
            regional_costs=regional_costs,
        )

    # -------------------------------------------------------------------------
    # Single resources
    # -------------------------------------------------------------------------

    async def get_account(self, account_id: str) -> Account:
        """Fetch one account. Unknown ids raise DashboardLoadError (404)."""
        return await self._fetch(f"/api/accounts/{account_id}", _ACCOUNT)

    async def health(self) -> HealthResponse:
        """Fetch the service liveness payload."""
        return await self._fetch("/health", _HEALTH)
