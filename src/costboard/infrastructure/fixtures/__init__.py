from costboard.infrastructure.fixtures.repository import FixtureBillingRepository

__all__ = ["FixtureBillingRepository"]
