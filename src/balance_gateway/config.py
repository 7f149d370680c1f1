"""Application configuration using pydantic-settings."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_RPC_URL = "http://localhost:8545"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # Upstream node
    # ======================
    ethereum_rpc_url: Optional[str] = Field(
        default=None, description="JSON-RPC endpoint of the Ethereum node"
    )
    provider: str = Field(
        default="rpc", description="Balance provider: rpc (JSON-RPC node) or dryrun"
    )
    dry_run_balance: int = Field(
        default=0, ge=0, description="Balance returned by the dryrun provider (wei)"
    )
    rpc_timeout: float = Field(
        default=10.0, gt=0, description="Upstream RPC timeout in seconds"
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=3030, description="API server port")

    # ======================
    # Runtime
    # ======================
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # ======================
    # Tracing
    # ======================
    otel_service_name: str = Field(
        default="balance-gateway", description="service.name resource attribute"
    )
    otel_exporter_otlp_endpoint: Optional[str] = Field(
        default=None, description="OTLP gRPC collector endpoint (tracing export disabled if unset)"
    )

    @property
    def rpc_url(self) -> str:
        """Configured RPC URL, falling back to a local node."""
        if self.ethereum_rpc_url:
            return self.ethereum_rpc_url
        logger.warning("ETHEREUM_RPC_URL not set, using default %s", DEFAULT_RPC_URL)
        return DEFAULT_RPC_URL

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "debug": self.debug,
            "provider": self.provider,
            "rpc_url": self._redact_url(self.ethereum_rpc_url or DEFAULT_RPC_URL),
            "rpc_timeout": self.rpc_timeout,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "otel_exporter": self.otel_exporter_otlp_endpoint or "(not set)",
        }

    @staticmethod
    def _redact_url(url: str) -> str:
        """Redact credentials embedded in a URL."""
        if "://" in url and "@" in url:
            proto, rest = url.split("://", 1)
            if "@" in rest:
                creds, host = rest.rsplit("@", 1)
                if ":" in creds:
                    user, _ = creds.split(":", 1)
                    return f"{proto}://{user}:***@{host}"
                return f"{proto}://***@{host}"
        return url


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
