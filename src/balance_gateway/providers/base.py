"""Balance provider base interface."""

from abc import ABC, abstractmethod

from balance_gateway.address import AccountAddress

# Native balances are uint256 on EVM chains
MAX_BALANCE = 2**256 - 1


class BalanceProvider(ABC):
    """Abstract base class for blockchain balance providers.

    Implementations must raise ProviderError for every failure so callers
    only have one exception type to handle.
    """

    @abstractmethod
    async def get_balance(self, address: AccountAddress) -> int:
        """Get the native balance of an account.

        Args:
            address: Parsed account address

        Returns:
            Balance in the smallest native unit (wei)

        Raises:
            ProviderError: If the balance could not be fetched
        """
        raise NotImplementedError()

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name."""
        raise NotImplementedError()

    async def aclose(self) -> None:
        """Release network resources held by the provider."""
        return None
