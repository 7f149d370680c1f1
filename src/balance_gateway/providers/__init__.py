"""Blockchain balance providers."""

from balance_gateway.providers.base import BalanceProvider
from balance_gateway.providers.dryrun import DryRunBalanceProvider
from balance_gateway.providers.factory import create_provider
from balance_gateway.providers.rpc import JsonRpcBalanceProvider

__all__ = [
    "BalanceProvider",
    "DryRunBalanceProvider",
    "JsonRpcBalanceProvider",
    "create_provider",
]
