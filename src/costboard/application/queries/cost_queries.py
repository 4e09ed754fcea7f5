"""Cost queries. Overview, service breakdown, trends and regions."""

from __future__ import annotations

from costboard.domain.billing import BillingRepository
from costboard_contracts import CostOverview, CostTrendPoint, RegionalCost, ServiceCost


class CostOverviewQuery:
    """Query the organisation-wide spend summary."""

    def __init__(self, billing_repository: BillingRepository):
        self._repo = billing_repository

    async def execute(self) -> CostOverview:
        return await self._repo.get_cost_overview()


class ServiceBreakdownQuery:
    """Query spend per AWS service."""

    def __init__(self, billing_repository: BillingRepository):
        self._repo = billing_repository

    async def execute(self) -> list[ServiceCost]:
        return list(await self._repo.list_service_costs())


class CostTrendsQuery:
    """Query the monthly spend time series."""

    def __init__(self, billing_repository: BillingRepository):
        self._repo = billing_repository

    async def execute(self) -> list[CostTrendPoint]:
        return list(await self._repo.list_cost_trends())


class RegionalCostsQuery:
    """Query spend per AWS region."""

    def __init__(self, billing_repository: BillingRepository):
        self._repo = billing_repository

    async def execute(self) -> list[RegionalCost]:
        return list(await self._repo.list_regional_costs())
