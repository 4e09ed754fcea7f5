"""Cost overview, breakdown, trend and regional contracts."""

import datetime

from pydantic import Field

from costboard_contracts.common import Amount, BillingRecord


class CostOverview(BillingRecord):
    """Organisation-wide spend figures for the current month."""

    total_monthly_spend: Amount
    total_budget: Amount
    percent_of_budget: Amount
    previous_month_spend: Amount
    change_percent: Amount
    forecasted_month_end: Amount
    savings_opportunities: Amount


class ServiceCost(BillingRecord):
    """Spend attributed to one AWS service."""

    service: str
    cost: Amount
    percentage: Amount
    change: Amount


class CostTrendPoint(BillingRecord):
    """Monthly spend total with the largest services broken out."""

    date: datetime.date
    total: Amount
    ec2: Amount
    s3: Amount
    rds: Amount
    lambda_: Amount = Field(..., alias="lambda")
    others: Amount


class RegionalCost(BillingRecord):
    """Spend attributed to one AWS region."""

    region: str
    name: str
    cost: Amount
    percentage: Amount
