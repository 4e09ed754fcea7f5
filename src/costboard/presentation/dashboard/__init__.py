"""Terminal dashboard rendered with rich."""

from costboard.presentation.dashboard.page import (
    GENERIC_ERROR_MESSAGE,
    DashboardPage,
    render_dashboard,
    render_error,
)
from costboard.presentation.dashboard.views import (
    AccountsListView,
    BudgetAlertsView,
    CostOverviewView,
    CostTrendsView,
    ErrorView,
    LoadingView,
    RegionalCostsView,
    ServiceBreakdownView,
)

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "AccountsListView",
    "BudgetAlertsView",
    "CostOverviewView",
    "CostTrendsView",
    "DashboardPage",
    "ErrorView",
    "LoadingView",
    "RegionalCostsView",
    "ServiceBreakdownView",
    "render_dashboard",
    "render_error",
]
