"""Balance lookup service.

Validates the address, queries the provider once and shapes the response.
Holds only read-only references, so one instance serves all concurrent
requests.
"""

import logging
from typing import Optional

from opentelemetry import trace

from balance_gateway.address import AccountAddress
from balance_gateway.contracts import BalanceResponse
from balance_gateway.errors import (
    AddressValidationError,
    InvalidAddressError,
    ProviderError,
    UpstreamUnavailableError,
)
from balance_gateway.providers.base import BalanceProvider

module_logger = logging.getLogger(__name__)


class BalanceService:
    """Service for fetching account balances through a provider."""

    def __init__(
        self,
        provider: BalanceProvider,
        tracer: Optional[trace.Tracer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the service.

        Args:
            provider: Balance provider shared by all requests
            tracer: OpenTelemetry tracer (global tracer if None)
            logger: Logger for request events (module logger if None)
        """
        self.provider = provider
        self.tracer = tracer or trace.get_tracer(__name__)
        self.logger = logger or module_logger

    async def get_balance(self, raw_address: str) -> BalanceResponse:
        """Get the balance for an address taken from the request path.

        Args:
            raw_address: Unvalidated address string

        Returns:
            BalanceResponse with the balance as a decimal string

        Raises:
            InvalidAddressError: Address is malformed (provider not called)
            UpstreamUnavailableError: Provider failed
        """
        with self.tracer.start_as_current_span("get_balance") as span:
            self.logger.info("Parsing address: %s", raw_address)
            try:
                address = AccountAddress.parse(raw_address)
            except AddressValidationError as e:
                self.logger.error("Failed to parse address %r: %s", raw_address, e)
                raise InvalidAddressError(str(e), raw_address) from e

            span.set_attribute("account.address", address.hex)
            self.logger.info("Querying balance for address: %s", address)

            try:
                balance = await self.provider.get_balance(address)
            except ProviderError as e:
                self.logger.error(
                    "Provider %s failed for %s: %s", self.provider.name, address, e
                )
                raise UpstreamUnavailableError(str(e), raw_address) from e

            self.logger.info("Fetched balance: %s", balance)
            span.add_event("Fetched balance", {"balance": str(balance)})

            return BalanceResponse(balance=str(balance))
