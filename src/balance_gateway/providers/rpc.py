"""JSON-RPC balance provider.

Queries eth_getBalance on an Ethereum-compatible node over HTTP using httpx.
"""

import itertools
import logging
import re
from typing import Any, Optional

import httpx

from balance_gateway.address import AccountAddress
from balance_gateway.errors import ProviderError
from balance_gateway.providers.base import MAX_BALANCE, BalanceProvider

logger = logging.getLogger(__name__)

_QUANTITY_RE = re.compile(r"0x[0-9a-fA-F]+")


class JsonRpcBalanceProvider(BalanceProvider):
    """Balance provider backed by a JSON-RPC node.

    One httpx.AsyncClient is shared by all requests. Failures are raised as
    ProviderError and never retried here.

    Example:
        provider = JsonRpcBalanceProvider("http://localhost:8545")
        wei = await provider.get_balance(AccountAddress.parse("0x..."))
        await provider.aclose()
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the provider.

        Args:
            rpc_url: Node JSON-RPC endpoint
            timeout: Request timeout in seconds (ignored for an injected client)
            client: Optional pre-built client; the caller keeps ownership

        Raises:
            ValueError: If rpc_url is not an absolute http(s) URL
        """
        try:
            url = httpx.URL(rpc_url)
        except httpx.InvalidURL as e:
            raise ValueError(f"Invalid RPC URL {rpc_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"Invalid RPC URL {rpc_url!r}: expected http(s)://host")

        self.rpc_url = rpc_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._ids = itertools.count(1)

    @property
    def name(self) -> str:
        return "jsonrpc"

    async def get_balance(self, address: AccountAddress) -> int:
        result = await self._call("eth_getBalance", [address.hex, "latest"])
        return self._parse_quantity(result)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _call(self, method: str, params: list) -> Any:
        """Send a JSON-RPC request and return its result field."""
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": next(self._ids),
        }
        logger.debug("RPC %s id=%s -> %s", method, payload["id"], self.rpc_url)

        try:
            response = await self._client.post(self.rpc_url, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise ProviderError(f"{method} timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"{method} failed with HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"{method} request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(f"{method} returned invalid JSON") from e

        if not isinstance(data, dict):
            raise ProviderError(f"{method} returned unexpected payload")

        if data.get("error") is not None:
            error = data["error"]
            if isinstance(error, dict):
                message = error.get("message", "unknown error")
                code = error.get("code")
                raise ProviderError(f"{method} RPC error {code}: {message}")
            raise ProviderError(f"{method} RPC error: {error}")

        if "result" not in data:
            raise ProviderError(f"{method} response has no result")

        return data["result"]

    @staticmethod
    def _parse_quantity(value: Any) -> int:
        """Decode a hex-encoded JSON-RPC quantity (e.g. "0x3e8")."""
        if not isinstance(value, str) or not _QUANTITY_RE.fullmatch(value):
            raise ProviderError(f"Malformed quantity: {value!r}")

        quantity = int(value, 16)

        if quantity > MAX_BALANCE:
            raise ProviderError(f"Quantity exceeds 256 bits: {value!r}")

        return quantity
