"""Dry-run provider for testing (no network access)."""

from balance_gateway.address import AccountAddress
from balance_gateway.providers.base import MAX_BALANCE, BalanceProvider


class DryRunBalanceProvider(BalanceProvider):
    """Simulated provider that returns the same balance for every address."""

    def __init__(self, balance: int = 0):
        if not 0 <= balance <= MAX_BALANCE:
            raise ValueError(f"Balance out of range: {balance}")
        self.balance = balance

    @property
    def name(self) -> str:
        return "dryrun"

    async def get_balance(self, address: AccountAddress) -> int:
        return self.balance
