"""Query layer. Read-only operations for retrieving billing data."""

from costboard.application.queries.account_queries import (
    GetAccountQuery,
    ListAccountsQuery,
)
from costboard.application.queries.alert_queries import BudgetAlertsQuery
from costboard.application.queries.cost_queries import (
    CostOverviewQuery,
    CostTrendsQuery,
    RegionalCostsQuery,
    ServiceBreakdownQuery,
)

__all__ = [
    "BudgetAlertsQuery",
    "CostOverviewQuery",
    "CostTrendsQuery",
    "GetAccountQuery",
    "ListAccountsQuery",
    "RegionalCostsQuery",
    "ServiceBreakdownQuery",
]
