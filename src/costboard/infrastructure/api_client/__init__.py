from costboard.infrastructure.api_client.client import (
    BillingApiClient,
    DashboardData,
    DashboardLoadError,
)

__all__ = [
    "BillingApiClient",
    "DashboardData",
    "DashboardLoadError",
]
