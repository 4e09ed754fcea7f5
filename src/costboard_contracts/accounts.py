"""Account contracts."""

from pydantic import Field

from costboard_contracts.common import AccountStatus, BillingRecord, NonNegativeAmount


class Account(BillingRecord):
    """A single AWS account with its monthly budget and spend."""

    id: str = Field(..., min_length=1)
    name: str
    account_number: str = Field(..., pattern=r"^\d{12}$")
    monthly_budget: NonNegativeAmount
    current_spend: NonNegativeAmount
    status: AccountStatus
