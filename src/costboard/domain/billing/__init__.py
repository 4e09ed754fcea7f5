"""Billing domain - simulated AWS cost data served by the dashboard."""

from costboard.domain.billing.exceptions import AccountNotFoundError
from costboard.domain.billing.repositories import BillingRepository

__all__ = [
    "AccountNotFoundError",
    "BillingRepository",
]
