"""Costboard CLI application using Typer.

This module provides command-line utilities for running the billing API
and viewing the cost dashboard in the terminal.
"""

import asyncio
import logging
import sys

import typer
import uvicorn
from rich.console import Console
from rich.live import Live

from costboard.infrastructure.api_client import (
    BillingApiClient,
    DashboardData,
    DashboardLoadError,
)
from costboard.presentation.dashboard import (
    GENERIC_ERROR_MESSAGE,
    LoadingView,
    render_dashboard,
    render_error,
)
from costboard_config.settings import get_settings
from costboard_contracts import HealthResponse

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="costboard",
    help="Costboard - read-only AWS cost dashboard",
    no_args_is_help=True,
)
console = Console()

API_URL_OPTION = typer.Option(
    None,
    "--api-url",
    help="Base URL of the billing API (defaults to COSTBOARD_API_URL or localhost)",
)


@app.callback()
def main() -> None:
    """Configure logging for every command."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_client(api_url: str | None) -> BillingApiClient:
    """Build the API client from settings, honouring a ``--api-url`` override."""
    settings = get_settings()
    return BillingApiClient(
        base_url=api_url or settings.resolved_api_url,
        timeout=settings.dashboard_timeout,
    )


async def _load_dashboard(client: BillingApiClient) -> DashboardData:
    async with client:
        return await client.load_dashboard()


async def _load_health(client: BillingApiClient) -> HealthResponse:
    async with client:
        return await client.health()


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Listen port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the billing API server."""
    settings = get_settings()
    uvicorn.run(
        "costboard.presentation.api.app:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


@app.command("dashboard")
def dashboard(api_url: str | None = API_URL_OPTION) -> None:
    """Load every dashboard resource and render the cost dashboard.

    Nothing is shown until all six requests have completed. If any of them
    fails the error view is shown instead and the command exits with 1.
    """
    client = create_client(api_url)

    try:
        with Live(LoadingView(), console=console, transient=True):
            data = asyncio.run(_load_dashboard(client))
    except DashboardLoadError as e:
        logger.error("Error fetching dashboard data: %s", e)
        console.print(render_error(GENERIC_ERROR_MESSAGE))
        raise typer.Exit(code=1) from e

    console.print(render_dashboard(data))


@app.command("health")
def health(api_url: str | None = API_URL_OPTION) -> None:
    """Check that the billing API is up."""
    client = create_client(api_url)

    try:
        result = asyncio.run(_load_health(client))
    except DashboardLoadError as e:
        console.print(f"[red]✗ {client.base_url} is unreachable:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]✓ {client.base_url}[/green] {result.status} "
        f"(v{result.version}, {result.timestamp.isoformat()})"
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
