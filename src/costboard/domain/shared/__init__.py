from costboard.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RouteNotFoundError,
)

__all__ = [
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "RouteNotFoundError",
]
