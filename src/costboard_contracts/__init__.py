"""Billing API contracts.

This package defines the wire records shared by the Costboard API and the
dashboard client. Both sides validate against the same models.
"""

from costboard_contracts.accounts import Account
from costboard_contracts.alerts import BudgetAlert
from costboard_contracts.common import (
    AccountStatus,
    AlertSeverity,
    Amount,
    BillingRecord,
    NonNegativeAmount,
)
from costboard_contracts.costs import (
    CostOverview,
    CostTrendPoint,
    RegionalCost,
    ServiceCost,
)
from costboard_contracts.health import ErrorResponse, HealthResponse

__all__ = [
    # Common
    "AccountStatus",
    "AlertSeverity",
    "Amount",
    "BillingRecord",
    "NonNegativeAmount",
    # Accounts
    "Account",
    # Costs
    "CostOverview",
    "CostTrendPoint",
    "RegionalCost",
    "ServiceCost",
    # Alerts
    "BudgetAlert",
    # Health
    "ErrorResponse",
    "HealthResponse",
]
