"""Presentational views for the terminal dashboard.

Each view wraps the records it displays and renders them through rich's
``__rich__`` protocol. Views hold no state beyond their input and never
fetch anything themselves.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rich.align import Align
from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from costboard.presentation.dashboard.formatting import (
    BadgeVariant,
    Trend,
    bar_fraction,
    budget_variant,
    format_change,
    format_currency,
    format_month,
    format_number,
    format_thousands,
    format_timestamp,
    remaining_budget,
    service_icon,
    severity_variant,
    status_variant,
    trend,
    usage_percent,
)
from costboard_contracts import (
    Account,
    AlertSeverity,
    BudgetAlert,
    CostOverview,
    CostTrendPoint,
    RegionalCost,
    ServiceCost,
)

DEFAULT_ERROR_MESSAGE = "Failed to load dashboard data"
DEFAULT_LOADING_TEXT = "Loading AWS Cost Dashboard..."

BADGE_STYLES: dict[BadgeVariant, str] = {
    BadgeVariant.SUCCESS: "bold black on green",
    BadgeVariant.WARNING: "bold black on dark_orange",
    BadgeVariant.DESTRUCTIVE: "bold white on red",
    BadgeVariant.INFO: "bold white on blue",
}

# Bar colours by budget variant
BAR_STYLES: dict[BadgeVariant, str] = {
    BadgeVariant.SUCCESS: "green",
    BadgeVariant.WARNING: "dark_orange",
    BadgeVariant.DESTRUCTIVE: "red",
    BadgeVariant.INFO: "blue",
}

SEVERITY_DOT_STYLES: dict[AlertSeverity, str] = {
    AlertSeverity.CRITICAL: "bold red",
    AlertSeverity.WARNING: "bold dark_orange",
    AlertSeverity.INFO: "bold blue",
}

TREND_STYLES: dict[Trend, str] = {
    Trend.UP: "dark_orange",
    Trend.DOWN: "green",
    Trend.FLAT: "grey50",
}
TREND_ARROWS: dict[Trend, str] = {Trend.UP: "▲", Trend.DOWN: "▼", Trend.FLAT: " "}

# Line colours of the cost trend series
SERIES_STYLES = {
    "total": "#f59e0b",
    "ec2": "#3b82f6",
    "s3": "#22c55e",
    "rds": "#8b5cf6",
    "lambda": "#ec4899",
}

SERVICE_ICON_STYLES = (
    "bold white on #f97316",
    "bold white on #3b82f6",
    "bold white on #22c55e",
    "bold white on #a855f7",
    "bold white on #ec4899",
    "bold white on #06b6d4",
    "bold white on #eab308",
    "bold white on #6366f1",
    "bold white on #14b8a6",
    "bold white on #ef4444",
    "bold white on #10b981",
    "bold white on #6b7280",
)

REGION_COLORS = ("#f59e0b", "#3b82f6", "#22c55e", "#8b5cf6", "#ec4899", "#14b8a6")

BAR_WIDTH = 24


def badge(label: str, variant: BadgeVariant) -> Text:
    return Text(f" {label} ", style=BADGE_STYLES[variant])


def progress_bar(percent: float, style: str, width: int = BAR_WIDTH) -> Text:
    """Horizontal bar filled to ``percent`` (capped at 100)."""
    filled = round(bar_fraction(percent) * width)
    bar = Text("█" * filled, style=style)
    bar.append("░" * (width - filled), style="grey30")
    return bar


def _scaled(value: float, largest: float) -> float:
    return value / largest * 100 if largest > 0 else 0.0


def _card(title: RenderableType, body: RenderableType, border_style: str = "grey37") -> Panel:
    return Panel(body, title=title, title_align="left", border_style=border_style)


@dataclass(frozen=True)
class CostOverviewView:
    """Four summary cards: spend, budget usage, forecast and savings."""

    overview: CostOverview

    def cards(self) -> list[Panel]:
        data = self.overview
        direction = Trend.UP if data.change_percent > 0 else Trend.DOWN
        change = Text(TREND_ARROWS[direction] + " ", style=TREND_STYLES[direction])
        change.append(format_change(data.change_percent), style=TREND_STYLES[direction])
        change.append(" from last month", style="grey50")

        variant = budget_variant(data.percent_of_budget)
        budget_title = Text("BUDGET USAGE  ", style="grey70")
        budget_title.append_text(
            badge(f"{format_number(data.percent_of_budget)}%", variant),
        )

        savings_title = Text("SAVINGS OPPORTUNITIES  ", style="grey70")
        savings_title.append_text(badge("Available", BadgeVariant.INFO))

        return [
            _card(
                Text("TOTAL MONTHLY SPEND", style="grey70"),
                Group(
                    Text(format_currency(data.total_monthly_spend), style="bold white"),
                    change,
                ),
            ),
            _card(
                budget_title,
                Group(
                    Text(format_currency(data.total_budget), style="bold white"),
                    Text(
                        f"{format_currency(data.total_budget - data.total_monthly_spend)}"
                        " remaining",
                        style="grey70",
                    ),
                    progress_bar(data.percent_of_budget, BAR_STYLES[variant]),
                ),
            ),
            _card(
                Text("FORECASTED MONTH END", style="grey70"),
                Group(
                    Text(format_currency(data.forecasted_month_end), style="bold white"),
                    Text("Based on current trends", style="grey70"),
                ),
            ),
            _card(
                savings_title,
                Group(
                    Text(format_currency(data.savings_opportunities), style="bold blue"),
                    Text("Potential monthly savings", style="grey70"),
                ),
                border_style="blue",
            ),
        ]

    def __rich__(self) -> RenderableType:
        return Columns(self.cards(), equal=True, expand=True)


@dataclass(frozen=True)
class AccountsListView:
    """One card per AWS account with budget usage."""

    accounts: Sequence[Account]

    @staticmethod
    def card(account: Account) -> Panel:
        percent = usage_percent(account.current_spend, account.monthly_budget)
        variant = status_variant(account.status)

        title = Text(account.name, style="bold white")
        title.append("  ")
        title.append_text(badge(account.status.value.capitalize(), variant))

        usage = Text(
            f"{format_currency(account.current_spend)} / "
            f"{format_currency(account.monthly_budget)}",
            style="grey70",
        )
        usage.append(f"  {percent:.1f}%", style="bold white")

        totals = Table.grid(expand=True)
        totals.add_column()
        totals.add_column()
        totals.add_row(Text("SPENT", style="grey50"), Text("REMAINING", style="grey50"))
        totals.add_row(
            Text(format_currency(account.current_spend), style="bold white"),
            Text(
                format_currency(
                    remaining_budget(account.current_spend, account.monthly_budget),
                ),
                style="bold white",
            ),
        )

        body = Group(
            Text(f"Account: {account.account_number}", style="grey50"),
            usage,
            progress_bar(percent, BAR_STYLES[variant]),
            totals,
        )
        return _card(title, body)

    def cards(self) -> list[Panel]:
        return [self.card(account) for account in self.accounts]

    def __rich__(self) -> RenderableType:
        return Columns(self.cards(), equal=True, expand=True)


@dataclass(frozen=True)
class BudgetAlertsView:
    """One row per budget alert."""

    alerts: Sequence[BudgetAlert]

    def table(self) -> Table:
        table = Table(expand=True, show_header=False, box=None, padding=(0, 1))
        table.add_column(width=1)
        table.add_column(ratio=1)
        table.add_column(no_wrap=True)
        table.add_column(justify="right", no_wrap=True)

        for alert in self.alerts:
            text = Text(f"{alert.account}: ", style="bold white")
            text.append(alert.message, style="white")
            table.add_row(
                Text("●", style=SEVERITY_DOT_STYLES[alert.severity]),
                text,
                Text(format_timestamp(alert.timestamp), style="grey50"),
                badge(
                    alert.severity.value.capitalize(),
                    severity_variant(alert.severity),
                ),
            )
        return table

    def __rich__(self) -> RenderableType:
        return self.table()


@dataclass(frozen=True)
class CostTrendsView:
    """Monthly totals with the main services broken out."""

    points: Sequence[CostTrendPoint]

    def table(self) -> Table:
        table = Table(expand=True, border_style="grey37", header_style="grey70")
        table.add_column("Month", no_wrap=True)
        table.add_column("Total Cost", justify="right", style=SERIES_STYLES["total"])
        table.add_column("EC2", justify="right", style=SERIES_STYLES["ec2"])
        table.add_column("S3", justify="right", style=SERIES_STYLES["s3"])
        table.add_column("RDS", justify="right", style=SERIES_STYLES["rds"])
        table.add_column("Lambda", justify="right", style=SERIES_STYLES["lambda"])
        table.add_column("Trend", no_wrap=True)

        largest = max((point.total for point in self.points), default=0.0)
        for point in self.points:
            table.add_row(
                format_month(point.date),
                format_thousands(point.total),
                format_thousands(point.ec2),
                format_thousands(point.s3),
                format_thousands(point.rds),
                format_thousands(point.lambda_),
                progress_bar(_scaled(point.total, largest), SERIES_STYLES["total"]),
            )
        return table

    def __rich__(self) -> RenderableType:
        return self.table()


@dataclass(frozen=True)
class ServiceBreakdownView:
    """One row per AWS service with its share and change."""

    services: Sequence[ServiceCost]

    def table(self) -> Table:
        table = Table(expand=True, border_style="grey37", header_style="grey70")
        table.add_column("", no_wrap=True)
        table.add_column("Service", style="bold white")
        table.add_column("Share", justify="right", style="grey70")
        table.add_column("Cost", justify="right", style="grey70")
        table.add_column("Change", justify="right", no_wrap=True)

        for index, service in enumerate(self.services):
            direction = trend(service.change)
            change = Text(
                f"{TREND_ARROWS[direction]} {format_change(service.change)}",
                style=TREND_STYLES[direction],
            )
            table.add_row(
                Text(
                    f" {service_icon(service.service)} ",
                    style=SERVICE_ICON_STYLES[index % len(SERVICE_ICON_STYLES)],
                ),
                service.service,
                f"{format_number(service.percentage)}%",
                format_currency(service.cost),
                change,
            )
        return table

    def __rich__(self) -> RenderableType:
        return self.table()


@dataclass(frozen=True)
class RegionalCostsView:
    """One bar per AWS region, scaled to the most expensive region."""

    regions: Sequence[RegionalCost]

    def table(self) -> Table:
        table = Table(expand=True, border_style="grey37", header_style="grey70")
        table.add_column("Region", style="bold white", no_wrap=True)
        table.add_column("Code", style="grey50", no_wrap=True)
        table.add_column("Cost", no_wrap=True)
        table.add_column("", justify="right", style="grey70")
        table.add_column("Share", justify="right", style="grey70")

        largest = max((region.cost for region in self.regions), default=0.0)
        for index, region in enumerate(self.regions):
            color = REGION_COLORS[index % len(REGION_COLORS)]
            table.add_row(
                region.name,
                region.region,
                progress_bar(_scaled(region.cost, largest), color, width=16),
                format_thousands(region.cost),
                f"{format_number(region.percentage)}%",
            )
        return table

    def __rich__(self) -> RenderableType:
        return self.table()


@dataclass(frozen=True)
class ErrorView:
    """Full-page error shown instead of any dashboard widget."""

    message: str = DEFAULT_ERROR_MESSAGE

    def __rich__(self) -> RenderableType:
        return Panel(
            Align.center(Text(f"⚠  {self.message}", style="bold red")),
            border_style="red",
            padding=(1, 2),
        )


@dataclass(frozen=True)
class LoadingView:
    """Spinner shown while the dashboard data is in flight."""

    text: str = DEFAULT_LOADING_TEXT

    def __rich__(self) -> RenderableType:
        return Spinner("dots", text=Text(self.text, style="grey70"))
