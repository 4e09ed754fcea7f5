"""Costs router for overview, breakdown, trend and regional endpoints."""

from fastapi import APIRouter

from costboard.application.queries import (
    CostOverviewQuery,
    CostTrendsQuery,
    RegionalCostsQuery,
    ServiceBreakdownQuery,
)
from costboard.presentation.api.dependencies import BillingRepo
from costboard_contracts import CostOverview, CostTrendPoint, RegionalCost, ServiceCost

router = APIRouter()


@router.get("/cost-overview", summary="Get cost overview")
async def get_cost_overview(repository: BillingRepo) -> CostOverview:
    """
    Organisation-wide spend for the current month.

    Includes budget usage, month-over-month change, the month-end forecast
    and identified savings opportunities.
    """
    return await CostOverviewQuery(repository).execute()


@router.get("/service-breakdown", summary="Get spend per service")
async def get_service_breakdown(repository: BillingRepo) -> list[ServiceCost]:
    """Spend per AWS service, largest first, with change from last month."""
    return await ServiceBreakdownQuery(repository).execute()


@router.get("/cost-trends", summary="Get monthly cost trends")
async def get_cost_trends(repository: BillingRepo) -> list[CostTrendPoint]:
    """Monthly totals, oldest first, with EC2, S3, RDS and Lambda broken out."""
    return await CostTrendsQuery(repository).execute()


@router.get("/regional-costs", summary="Get spend per region")
async def get_regional_costs(repository: BillingRepo) -> list[RegionalCost]:
    """Spend per AWS region, largest first."""
    return await RegionalCostsQuery(repository).execute()
