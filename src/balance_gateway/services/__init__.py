"""Request handling services."""

from balance_gateway.services.balance_service import BalanceService

__all__ = ["BalanceService"]
