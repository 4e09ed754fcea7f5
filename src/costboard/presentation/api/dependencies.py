"""FastAPI dependency injection for the Costboard API.

Provides the billing repository (fixture-backed, one shared instance).
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from costboard.domain.billing import BillingRepository
from costboard.infrastructure.fixtures import FixtureBillingRepository

logger = logging.getLogger(__name__)


@lru_cache()
def get_billing_repository() -> BillingRepository:
    """Return the shared billing repository.

    The fixtures never change, so a single instance serves every request.
    Tests override this dependency to inject other records.
    """
    logger.debug("Creating fixture billing repository")
    return FixtureBillingRepository()


BillingRepo = Annotated[BillingRepository, Depends(get_billing_repository)]
