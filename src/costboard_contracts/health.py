"""Service health and error contracts."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness payload returned by ``GET /health``."""

    status: str = Field(..., description="Health status")
    timestamp: datetime = Field(..., description="Server time (UTC)")
    version: str = Field(..., description="API version")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code for programmatic handling")

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Account 'acc-999' not found",
                "code": "ACCOUNT_NOT_FOUND",
            },
        },
    }
