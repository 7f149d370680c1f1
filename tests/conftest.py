"""Pytest configuration and fixtures."""

import os

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

# Set test environment
os.environ["PROVIDER"] = "dryrun"
os.environ["DEBUG"] = "false"

from balance_gateway.address import AccountAddress
from balance_gateway.api.app import create_app
from balance_gateway.config import Settings
from balance_gateway.errors import ProviderError
from balance_gateway.providers.base import BalanceProvider

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class StubProvider(BalanceProvider):
    """Returns a fixed balance and records every queried address."""

    def __init__(self, balance: int = 1000):
        self.balance = balance
        self.calls: list[AccountAddress] = []

    @property
    def name(self) -> str:
        return "stub"

    async def get_balance(self, address: AccountAddress) -> int:
        self.calls.append(address)
        return self.balance


class FailingProvider(StubProvider):
    """Always fails like an unreachable node."""

    @property
    def name(self) -> str:
        return "failing"

    async def get_balance(self, address: AccountAddress) -> int:
        self.calls.append(address)
        raise ProviderError("connection refused")


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's .env file."""
    return Settings(
        _env_file=None,
        provider="dryrun",
        ethereum_rpc_url="http://node.test:8545",
    )


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider(balance=1000)


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter):
    """Tracer recording finished spans in memory (global provider untouched)."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("tests")


@pytest_asyncio.fixture
async def client(settings, stub_provider, tracer):
    """Async test client backed by the stub provider."""
    app = create_app(settings, provider=stub_provider, tracer=tracer)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def failing_client(settings, failing_provider, tracer):
    """Async test client whose provider always fails."""
    app = create_app(settings, provider=failing_provider, tracer=tracer)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
