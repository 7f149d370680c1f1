"""HTTP API."""

from balance_gateway.api.app import create_app

__all__ = ["create_app"]
