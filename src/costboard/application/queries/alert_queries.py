"""Budget alert query."""

from __future__ import annotations

from costboard.domain.billing import BillingRepository
from costboard_contracts import BudgetAlert


class BudgetAlertsQuery:
    """Query the current budget alerts."""

    def __init__(self, billing_repository: BillingRepository):
        self._repo = billing_repository

    async def execute(self) -> list[BudgetAlert]:
        return list(await self._repo.list_budget_alerts())
