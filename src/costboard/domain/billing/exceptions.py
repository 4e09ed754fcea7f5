"""Billing domain exceptions."""

from costboard.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no AWS account matches the requested id."""

    def __init__(self, account_id: str) -> None:
        super().__init__(
            message=f"Account '{account_id}' not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account_id": account_id},
        )
        self.account_id = account_id
