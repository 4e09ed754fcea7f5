"""Budget alert contracts."""

from datetime import datetime

from costboard_contracts.common import AlertSeverity, Amount, BillingRecord


class BudgetAlert(BillingRecord):
    """A budget notification raised for an account.

    ``account`` holds the account's display name. The reference is not
    checked against the account list.
    """

    id: str
    account: str
    severity: AlertSeverity
    message: str
    threshold: Amount
    current: Amount
    timestamp: datetime
