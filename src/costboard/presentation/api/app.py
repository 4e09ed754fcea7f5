"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

Endpoints:
    GET /health                  -> liveness payload (status + timestamp)
    GET /api/accounts            -> all accounts
    GET /api/accounts/{id}       -> one account, 404 if unknown
    GET /api/cost-overview       -> organisation-wide spend summary
    GET /api/service-breakdown   -> spend per service
    GET /api/cost-trends         -> monthly time series
    GET /api/budget-alerts       -> budget alerts
    GET /api/regional-costs      -> spend per region

In production mode (APP_ENV=production) the prebuilt dashboard bundle is
served from the same origin; otherwise the root path returns API info.
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from costboard import __version__
from costboard.presentation.api.exception_handlers import setup_exception_handlers
from costboard.presentation.api.routers import (
    accounts_router,
    alerts_router,
    costs_router,
)
from costboard.presentation.web import BUNDLED_FRONTEND_DIR, mount_frontend
from costboard_config.settings import Settings, get_settings
from costboard_contracts import HealthResponse


@lru_cache(maxsize=1)
def _configure_logging(level_name: str) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for costboard modules (from settings)
    - WARNING level for noisy third-party libraries

    Cached per level, so repeated app creation with the same settings is a
    no-op while a different level reconfigures.
    """
    log_level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("costboard").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_PREFIX = "/api"

OPENAPI_TAGS = [
    {
        "name": "Accounts",
        "description": """AWS accounts with their monthly budget and spend.

**Status values:**
- `healthy`: spend comfortably within budget
- `warning`: spend approaching budget
- `critical`: budget exceeded
""",
    },
    {
        "name": "Costs",
        "description": """Spend summaries for cards and charts.

- `/cost-overview` - totals, budget usage, forecast, savings
- `/service-breakdown` - spend per AWS service
- `/cost-trends` - monthly time series (line chart)
- `/regional-costs` - spend per region (bar chart)
""",
    },
    {
        "name": "Alerts",
        "description": "Budget alerts with severity `critical`, `warning` or `info`.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    base_url = f"http://localhost:{settings.port}"

    logger.info(
        "%s API v%s running on port %d",
        settings.app_name,
        API_VERSION,
        settings.port,
    )
    logger.info("Health check: %s/health", base_url)
    if app.state.frontend_mounted:
        logger.info("Serving dashboard at %s", base_url)
    yield
    logger.info("Shutting down %s API...", settings.app_name)


def create_api_router() -> APIRouter:
    """Create the API router with all billing endpoints."""
    api_router = APIRouter()

    api_router.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    api_router.include_router(costs_router, tags=["Costs"])
    api_router.include_router(alerts_router, tags=["Alerts"])

    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Simulated **AWS billing data** for a multi-account organisation.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings
    app.state.frontend_mounted = False

    # Wildcard origins cannot be combined with credentials
    allow_any = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_any else settings.cors_origins,
        allow_credentials=not allow_any,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint.

        Returns service status and the current server time.
        """
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(UTC),
            version=API_VERSION,
        )

    if settings.is_production:
        frontend_dir = settings.frontend_dir or BUNDLED_FRONTEND_DIR
        app.state.frontend_mounted = mount_frontend(app, frontend_dir)

    if not app.state.frontend_mounted:

        @app.get("/", tags=["Info"])
        async def root() -> dict:
            """API root endpoint with version information."""
            return {
                "name": f"{settings.app_name} API",
                "version": API_VERSION,
                "docs": "/docs" if settings.api_debug else None,
                "api_base": API_PREFIX,
                "endpoints": {
                    "health": "/health",
                    "accounts": f"{API_PREFIX}/accounts",
                    "cost_overview": f"{API_PREFIX}/cost-overview",
                    "service_breakdown": f"{API_PREFIX}/service-breakdown",
                    "cost_trends": f"{API_PREFIX}/cost-trends",
                    "budget_alerts": f"{API_PREFIX}/budget-alerts",
                    "regional_costs": f"{API_PREFIX}/regional-costs",
                },
            }

    return app


# Application instance for uvicorn
app = create_app()
