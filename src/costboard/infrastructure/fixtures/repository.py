"""Billing repository serving the static fixture records."""

from __future__ import annotations

from collections.abc import Sequence

from costboard.domain.billing import BillingRepository
from costboard.infrastructure.fixtures import billing_data
from costboard_contracts import (
    Account,
    BudgetAlert,
    CostOverview,
    CostTrendPoint,
    RegionalCost,
    ServiceCost,
)


class FixtureBillingRepository(BillingRepository):
    """In-memory implementation over ``billing_data``.

    The records are frozen tuples shared by every request, so this class
    holds no state of its own beyond an id index built once.
    """

    def __init__(
        self,
        accounts: Sequence[Account] = billing_data.ACCOUNTS,
        cost_overview: CostOverview = billing_data.COST_OVERVIEW,
        service_costs: Sequence[ServiceCost] = billing_data.SERVICE_BREAKDOWN,
        cost_trends: Sequence[CostTrendPoint] = billing_data.COST_TRENDS,
        budget_alerts: Sequence[BudgetAlert] = billing_data.BUDGET_ALERTS,
        regional_costs: Sequence[RegionalCost] = billing_data.REGIONAL_COSTS,
    ):
        self._accounts = tuple(accounts)
        self._accounts_by_id = {account.id: account for account in self._accounts}
        self._cost_overview = cost_overview
        self._service_costs = tuple(service_costs)
        self._cost_trends = tuple(cost_trends)
        self._budget_alerts = tuple(budget_alerts)
        self._regional_costs = tuple(regional_costs)

    async def list_accounts(self) -> Sequence[Account]:
        return self._accounts

    async def find_account(self, account_id: str) -> Account | None:
        return self._accounts_by_id.get(account_id)

    async def get_cost_overview(self) -> CostOverview:
        return self._cost_overview

    async def list_service_costs(self) -> Sequence[ServiceCost]:
        return self._service_costs

    async def list_cost_trends(self) -> Sequence[CostTrendPoint]:
        return self._cost_trends

    async def list_budget_alerts(self) -> Sequence[BudgetAlert]:
        return self._budget_alerts

    async def list_regional_costs(self) -> Sequence[RegionalCost]:
        return self._regional_costs
