"""Simulated AWS billing data for a large multi-account organisation.

All figures are fictional. The records are created once at import time and
are immutable; every request serves these exact objects.
"""

from datetime import date, datetime, timezone

from costboard_contracts import (
    Account,
    AccountStatus,
    AlertSeverity,
    BudgetAlert,
    CostOverview,
    CostTrendPoint,
    RegionalCost,
    ServiceCost,
)

# =============================================================================
# Accounts
# =============================================================================

ACCOUNTS: tuple[Account, ...] = (
    Account(
        id="acc-001",
        name="Production",
        account_number="123456789012",
        monthly_budget=500000,
        current_spend=487234.56,
        status=AccountStatus.WARNING,
    ),
    Account(
        id="acc-002",
        name="Staging",
        account_number="123456789013",
        monthly_budget=50000,
        current_spend=32145.78,
        status=AccountStatus.HEALTHY,
    ),
    Account(
        id="acc-003",
        name="Development",
        account_number="123456789014",
        monthly_budget=30000,
        current_spend=28934.21,
        status=AccountStatus.WARNING,
    ),
    Account(
        id="acc-004",
        name="Data Analytics",
        account_number="123456789015",
        monthly_budget=200000,
        current_spend=187654.32,
        status=AccountStatus.HEALTHY,
    ),
    Account(
        id="acc-005",
        name="Machine Learning",
        account_number="123456789016",
        monthly_budget=150000,
        current_spend=163478.91,
        status=AccountStatus.CRITICAL,
    ),
)

# =============================================================================
# Cost Overview
# =============================================================================

COST_OVERVIEW = CostOverview(
    total_monthly_spend=899447.78,
    total_budget=930000,
    percent_of_budget=96.7,
    previous_month_spend=823456.12,
    change_percent=9.2,
    forecasted_month_end=945000,
    savings_opportunities=45234,
)

# =============================================================================
# Service Breakdown (largest first)
# =============================================================================

SERVICE_BREAKDOWN: tuple[ServiceCost, ...] = tuple(
    ServiceCost(service=service, cost=cost, percentage=percentage, change=change)
    for service, cost, percentage, change in (
        ("EC2", 245678.34, 27.3, 5.2),
        ("S3", 134567.89, 15, -2.1),
        ("RDS", 123456.78, 13.7, 8.4),
        ("Lambda", 87654.32, 9.7, 12.3),
        ("CloudFront", 76543.21, 8.5, 3.6),
        ("ECS", 65432.10, 7.3, 6.8),
        ("DynamoDB", 54321.09, 6, -1.5),
        ("ElastiCache", 43210.98, 4.8, 2.9),
        ("Route53", 23456.78, 2.6, 0.4),
        ("CloudWatch", 21098.76, 2.3, 4.1),
        ("VPC", 12345.67, 1.4, -0.8),
        ("IAM", 5432.10, 0.6, 0),
        ("Others", 6249.76, 0.7, 1.2),
    )
)

# =============================================================================
# Cost Trends (monthly, oldest first)
# =============================================================================

COST_TRENDS: tuple[CostTrendPoint, ...] = tuple(
    CostTrendPoint(
        date=month,
        total=total,
        ec2=ec2,
        s3=s3,
        rds=rds,
        lambda_=lambda_cost,
        others=others,
    )
    for month, total, ec2, s3, rds, lambda_cost, others in (
        (date(2024, 7, 1), 756234.12, 198234.56, 124567.89, 98765.43, 67890.12, 266776.12),  # NOQA: E501
        (date(2024, 8, 1), 789456.23, 215678.90, 132456.78, 105678.90, 72345.67, 263296.98),  # NOQA: E501
        (date(2024, 9, 1), 812345.67, 223456.78, 128901.23, 112345.67, 78901.23, 268740.76),  # NOQA: E501
        (date(2024, 10, 1), 823456.12, 234567.89, 138567.89, 114567.89, 81234.56, 254517.89),  # NOQA: E501
        (date(2024, 11, 1), 845678.90, 238901.23, 136789.01, 117890.12, 83456.78, 268641.76),  # NOQA: E501
        (date(2024, 12, 1), 867890.12, 242345.67, 135678.90, 120123.45, 85678.90, 284063.20),  # NOQA: E501
        (date(2025, 1, 1), 899447.78, 245678.34, 134567.89, 123456.78, 87654.32, 308090.45),  # NOQA: E501
    )
)

# =============================================================================
# Budget Alerts (newest first)
# =============================================================================

BUDGET_ALERTS: tuple[BudgetAlert, ...] = (
    BudgetAlert(
        id="alert-001",
        account="Production",
        severity=AlertSeverity.WARNING,
        message="Monthly spend at 97.4% of budget",
        threshold=95,
        current=97.4,
        timestamp=datetime(2025, 1, 5, 10, 30, tzinfo=timezone.utc),
    ),
    BudgetAlert(
        id="alert-002",
        account="Machine Learning",
        severity=AlertSeverity.CRITICAL,
        message="Monthly spend exceeded budget by 9%",
        threshold=100,
        current=109,
        timestamp=datetime(2025, 1, 5, 9, 15, tzinfo=timezone.utc),
    ),
    BudgetAlert(
        id="alert-003",
        account="Development",
        severity=AlertSeverity.WARNING,
        message="EC2 costs up 45% from last month",
        threshold=20,
        current=45,
        timestamp=datetime(2025, 1, 5, 8, 0, tzinfo=timezone.utc),
    ),
    BudgetAlert(
        id="alert-004",
        account="Data Analytics",
        severity=AlertSeverity.INFO,
        message="S3 Intelligent-Tiering saved £12,345 this month",
        threshold=0,
        current=12345,
        timestamp=datetime(2025, 1, 4, 14, 20, tzinfo=timezone.utc),
    ),
)

# =============================================================================
# Regional Costs (largest first)
# =============================================================================

REGIONAL_COSTS: tuple[RegionalCost, ...] = tuple(
    RegionalCost(region=region, name=name, cost=cost, percentage=percentage)
    for region, name, cost, percentage in (
        ("us-east-1", "N. Virginia", 342567.89, 38.1),
        ("us-west-2", "Oregon", 234567.78, 26.1),
        ("eu-west-1", "Ireland", 178901.23, 19.9),
        ("ap-southeast-1", "Singapore", 87654.32, 9.7),
        ("eu-central-1", "Frankfurt", 43210.98, 4.8),
        ("ap-northeast-1", "Tokyo", 12545.58, 1.4),
    )
)
