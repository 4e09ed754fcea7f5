"""Alerts router for budget alert endpoints."""

from fastapi import APIRouter

from costboard.application.queries import BudgetAlertsQuery
from costboard.presentation.api.dependencies import BillingRepo
from costboard_contracts import BudgetAlert

router = APIRouter()


@router.get("/budget-alerts", summary="Get budget alerts")
async def get_budget_alerts(repository: BillingRepo) -> list[BudgetAlert]:
    """Current budget alerts across all accounts, newest first."""
    return await BudgetAlertsQuery(repository).execute()
