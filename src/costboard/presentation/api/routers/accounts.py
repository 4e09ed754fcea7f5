"""Accounts router for AWS account endpoints."""

from fastapi import APIRouter

from costboard.application.queries import GetAccountQuery, ListAccountsQuery
from costboard.presentation.api.dependencies import BillingRepo
from costboard_contracts import Account, ErrorResponse

router = APIRouter()


@router.get(
    "",
    summary="List accounts",
    responses={
        200: {"description": "All AWS accounts with budget and spend"},
    },
)
async def list_accounts(repository: BillingRepo) -> list[Account]:
    """List every AWS account in the organisation."""
    return await ListAccountsQuery(repository).execute()


@router.get(
    "/{account_id}",
    summary="Get account",
    responses={
        200: {"description": "The requested account"},
        404: {"model": ErrorResponse, "description": "Account not found"},
    },
)
async def get_account(account_id: str, repository: BillingRepo) -> Account:
    """
    Get a single account by its id (e.g. `acc-001`).

    Unknown ids return 404 with code `ACCOUNT_NOT_FOUND`.
    """
    return await GetAccountQuery(repository).execute(account_id)
