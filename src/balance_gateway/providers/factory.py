"""Provider factory for creating balance providers."""

import logging

from balance_gateway.config import Settings
from balance_gateway.providers.base import BalanceProvider
from balance_gateway.providers.dryrun import DryRunBalanceProvider
from balance_gateway.providers.rpc import JsonRpcBalanceProvider

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> BalanceProvider:
    """Create the configured balance provider.

    Provider is selected based on PROVIDER environment variable:
    - rpc (default): JSON-RPC node at ETHEREUM_RPC_URL
    - dryrun: Fixed balance (DRY_RUN_BALANCE), no network access

    The caller owns the returned provider and must aclose() it.

    Returns:
        Configured BalanceProvider instance
    """
    provider_name = settings.provider.lower()

    if provider_name == "dryrun":
        logger.info("Using dry-run balance provider")
        return DryRunBalanceProvider(balance=settings.dry_run_balance)

    if provider_name != "rpc":
        raise ValueError(f"Unknown provider: {settings.provider}")

    return JsonRpcBalanceProvider(
        rpc_url=settings.rpc_url,
        timeout=settings.rpc_timeout,
    )
