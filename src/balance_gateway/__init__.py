"""Balance Gateway - HTTP gateway for on-chain account balances."""

__version__ = "0.1.0"
