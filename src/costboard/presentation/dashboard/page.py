"""Top-level dashboard page.

Composes the individual views into the full page layout. The page is
rendered only once all data has loaded; a load failure shows the error
view and nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from costboard.infrastructure.api_client import DashboardData
from costboard.presentation.dashboard.views import (
    AccountsListView,
    BudgetAlertsView,
    CostOverviewView,
    CostTrendsView,
    ErrorView,
    RegionalCostsView,
    ServiceBreakdownView,
)

DASHBOARD_TITLE = "AWS Cost Dashboard"
DASHBOARD_SUBTITLE = "Enterprise Multi-Account View"
GENERIC_ERROR_MESSAGE = "Failed to load dashboard data. Please try again later."


def _section(title: str, body: RenderableType) -> Panel:
    return Panel(
        body,
        title=Text(title, style="bold white"),
        title_align="left",
        border_style="grey37",
    )


def _header() -> Table:
    header = Table.grid(expand=True)
    header.add_column()
    header.add_column(justify="right")
    title = Text("$ ", style="bold #f59e0b")
    title.append(DASHBOARD_TITLE, style="bold white")
    header.add_row(title, Text(DASHBOARD_SUBTITLE, style="grey70"))
    return header


@dataclass(frozen=True)
class DashboardPage:
    """The full dashboard built from one successful load."""

    data: DashboardData

    def __rich__(self) -> RenderableType:
        data = self.data

        bottom = Table.grid(expand=True, padding=(0, 1))
        bottom.add_column(ratio=1)
        bottom.add_column(ratio=1)
        bottom.add_row(
            _section("Service Breakdown", ServiceBreakdownView(data.service_breakdown)),
            _section("Regional Distribution", RegionalCostsView(data.regional_costs)),
        )

        return Group(
            _header(),
            Rule(style="grey37"),
            Text("Cost & Billing Overview", style="bold white"),
            CostOverviewView(data.cost_overview),
            _section("Accounts Overview", AccountsListView(data.accounts)),
            _section("Budget Alerts", BudgetAlertsView(data.budget_alerts)),
            _section(
                f"Cost Trends (Last {len(data.cost_trends)} Months)",
                CostTrendsView(data.cost_trends),
            ),
            bottom,
        )


def render_dashboard(data: DashboardData) -> DashboardPage:
    return DashboardPage(data)


def render_error(message: str = GENERIC_ERROR_MESSAGE) -> ErrorView:
    return ErrorView(message)
