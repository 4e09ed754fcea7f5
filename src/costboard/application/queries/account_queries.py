"""Account queries. List accounts and look one up by id."""

from __future__ import annotations

import logging

from costboard.domain.billing import AccountNotFoundError, BillingRepository
from costboard_contracts import Account

logger = logging.getLogger(__name__)


class ListAccountsQuery:
    """Query to list every AWS account."""

    def __init__(self, billing_repository: BillingRepository):
        self._repo = billing_repository

    async def execute(self) -> list[Account]:
        return list(await self._repo.list_accounts())


class GetAccountQuery:
    """Query to fetch a single account by id."""

    def __init__(self, billing_repository: BillingRepository):
        self._repo = billing_repository

    async def execute(self, account_id: str) -> Account:
        """Return the account with ``account_id``.

        Raises
        ------
        AccountNotFoundError
            If no account has this id.
        """
        account = await self._repo.find_account(account_id)
        if account is None:
            logger.debug("Account lookup missed: %s", account_id)
            raise AccountNotFoundError(account_id)
        return account
