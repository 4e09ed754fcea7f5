"""Abstract repository for billing data."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from costboard_contracts import (
    Account,
    BudgetAlert,
    CostOverview,
    CostTrendPoint,
    RegionalCost,
    ServiceCost,
)


class BillingRepository(ABC):
    """Read-only access to the billing records shown on the dashboard.

    Implementations must return the same records on every call; callers
    never mutate what they receive.
    """

    @abstractmethod
    async def list_accounts(self) -> Sequence[Account]:
        """Return all accounts in display order."""

    @abstractmethod
    async def find_account(self, account_id: str) -> Account | None:
        """Find an account by id, returns None if not exists."""

    @abstractmethod
    async def get_cost_overview(self) -> CostOverview:
        """Return the organisation-wide cost overview."""

    @abstractmethod
    async def list_service_costs(self) -> Sequence[ServiceCost]:
        """Return per-service spend, largest first."""

    @abstractmethod
    async def list_cost_trends(self) -> Sequence[CostTrendPoint]:
        """Return monthly trend points, oldest first."""

    @abstractmethod
    async def list_budget_alerts(self) -> Sequence[BudgetAlert]:
        """Return budget alerts, newest first."""

    @abstractmethod
    async def list_regional_costs(self) -> Sequence[RegionalCost]:
        """Return per-region spend, largest first."""
