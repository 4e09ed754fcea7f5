"""Unit tests for billing domain exceptions."""

from costboard.domain.billing import AccountNotFoundError
from costboard.domain.shared import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RouteNotFoundError,
)


class TestAccountNotFoundError:
    def test_carries_id_and_code(self):
        error = AccountNotFoundError("acc-999")

        assert error.account_id == "acc-999"
        assert error.code is ErrorCode.ACCOUNT_NOT_FOUND
        assert error.details == {"account_id": "acc-999"}
        assert str(error) == "Account 'acc-999' not found"

    def test_is_a_not_found_domain_error(self):
        error = AccountNotFoundError("acc-999")

        assert isinstance(error, EntityNotFoundError)
        assert isinstance(error, DomainException)

    def test_repr_includes_code(self):
        assert "ACCOUNT_NOT_FOUND" in repr(AccountNotFoundError("acc-1"))


class TestRouteNotFoundError:
    def test_carries_path_and_code(self):
        error = RouteNotFoundError("/api/unknown")

        assert error.path == "/api/unknown"
        assert error.code is ErrorCode.ROUTE_NOT_FOUND
        assert isinstance(error, EntityNotFoundError)
