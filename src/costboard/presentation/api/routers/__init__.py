from costboard.presentation.api.routers.accounts import router as accounts_router
from costboard.presentation.api.routers.alerts import router as alerts_router
from costboard.presentation.api.routers.costs import router as costs_router

__all__ = [
    "accounts_router",
    "alerts_router",
    "costs_router",
]
