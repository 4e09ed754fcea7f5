"""Shared base model and closed value sets for billing contracts."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, NonNegativeFloat, NonNegativeInt
from pydantic.alias_generators import to_camel


class AccountStatus(str, Enum):
    """Budget health of an AWS account as shown on the dashboard."""

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"


class AlertSeverity(str, Enum):
    """Severity of a budget alert."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class BillingRecord(BaseModel):
    """Base for every record exchanged between the API and the dashboard.

    Python attributes are snake_case, the wire format is camelCase. Records
    are immutable and reject unknown fields so a drifting payload fails at
    the boundary instead of deep inside a view.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )


# Whole amounts stay integers on the wire (500000, not 500000.0)
Amount = int | float
NonNegativeAmount = NonNegativeInt | NonNegativeFloat
