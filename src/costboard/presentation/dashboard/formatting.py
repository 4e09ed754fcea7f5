"""Formatting helpers shared by the dashboard views.

Amounts are shown in pounds sterling with en-GB digit grouping.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from costboard_contracts import AccountStatus, AlertSeverity


class BadgeVariant(str, Enum):
    """Visual weight of a status badge."""

    SUCCESS = "success"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"
    INFO = "info"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    FLAT = "flat"


BUDGET_WARNING_PERCENT = 90.0
BUDGET_EXCEEDED_PERCENT = 100.0

_STATUS_VARIANTS = {
    AccountStatus.HEALTHY: BadgeVariant.SUCCESS,
    AccountStatus.WARNING: BadgeVariant.WARNING,
    AccountStatus.CRITICAL: BadgeVariant.DESTRUCTIVE,
}

_SEVERITY_VARIANTS = {
    AlertSeverity.CRITICAL: BadgeVariant.DESTRUCTIVE,
    AlertSeverity.WARNING: BadgeVariant.WARNING,
    AlertSeverity.INFO: BadgeVariant.INFO,
}


def format_currency(value: float) -> str:
    """Whole pounds with thousands separators, e.g. ``£487,235``."""
    rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}£{abs(rounded):,}"


def format_thousands(value: float) -> str:
    """Compact chart-axis amount, e.g. ``£899k``."""
    return f"£{value / 1000:.0f}k"


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` (``15.0`` -> ``15``)."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_change(change: float) -> str:
    """Signed percentage change, e.g. ``+9.2%`` or ``-2.1%``."""
    prefix = "+" if change > 0 else ""
    return f"{prefix}{format_number(change)}%"


def format_timestamp(timestamp: datetime) -> str:
    """Alert time in UTC, e.g. ``Jan 5, 2025 10:30``."""
    ts = timestamp.astimezone(timezone.utc) if timestamp.tzinfo else timestamp
    return f"{ts:%b} {ts.day}, {ts:%Y %H:%M}"


def format_month(day: date) -> str:
    """Month label for trend points, e.g. ``Jan 2025``."""
    return day.strftime("%b %Y")


def usage_percent(spend: float, budget: float) -> float:
    """Spend as a percentage of budget. A zero budget reports 0%."""
    if budget <= 0:
        return 0.0
    return spend / budget * 100


def remaining_budget(spend: float, budget: float) -> float:
    """Budget left this month, never negative."""
    return max(0.0, budget - spend)


def bar_fraction(percent: float) -> float:
    """Fill ratio for a progress bar, capped at a full bar."""
    return min(max(percent, 0.0), 100.0) / 100


def budget_variant(percent: float) -> BadgeVariant:
    if percent >= BUDGET_EXCEEDED_PERCENT:
        return BadgeVariant.DESTRUCTIVE
    if percent >= BUDGET_WARNING_PERCENT:
        return BadgeVariant.WARNING
    return BadgeVariant.SUCCESS


def status_variant(status: AccountStatus) -> BadgeVariant:
    return _STATUS_VARIANTS[status]


def severity_variant(severity: AlertSeverity) -> BadgeVariant:
    return _SEVERITY_VARIANTS[severity]


def trend(change: float) -> Trend:
    if change > 0:
        return Trend.UP
    if change < 0:
        return Trend.DOWN
    return Trend.FLAT


def service_icon(service: str) -> str:
    """Two-letter badge for a service name (``CloudFront`` -> ``CL``)."""
    return service[:2].upper()
