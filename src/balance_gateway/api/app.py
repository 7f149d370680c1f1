"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from opentelemetry import trace
from starlette.exceptions import HTTPException as StarletteHTTPException

from balance_gateway import __version__
from balance_gateway.api.middleware import (
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    CORS_ALLOW_ORIGINS,
    AccessLogMiddleware,
)
from balance_gateway.api.routes import balance, health
from balance_gateway.config import Settings, get_settings
from balance_gateway.errors import HandlerError
from balance_gateway.providers import BalanceProvider, create_provider
from balance_gateway.services.balance_service import BalanceService

logger = logging.getLogger(__name__)


async def handler_error_handler(request: Request, exc: HandlerError) -> Response:
    """Failed balance lookups answer 500 with an empty body."""
    logger.debug("%s for %r: %s", type(exc).__name__, exc.address, exc)
    return Response(status_code=500)


async def routing_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Treat a wrong method on a known path as a routing miss."""
    if exc.status_code == 405:
        exc = StarletteHTTPException(status_code=404)
    return await http_exception_handler(request, exc)


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[BalanceProvider] = None,
    tracer: Optional[trace.Tracer] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings (cached settings if None)
        provider: Balance provider; built from settings and closed on
            shutdown if None
        tracer: OpenTelemetry tracer for request spans

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    owns_provider = provider is None
    if provider is None:
        provider = create_provider(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        logger.info("Balance provider: %s", provider.name)
        yield
        if owns_provider:
            await provider.aclose()

    app = FastAPI(
        title="Balance Gateway",
        description="Account balance lookups against a blockchain node",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.state.balance_service = BalanceService(provider, tracer=tracer)

    app.add_exception_handler(HandlerError, handler_error_handler)
    app.add_exception_handler(StarletteHTTPException, routing_error_handler)

    # Last added runs outermost: CORS -> access log -> routes
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(balance.router, tags=["Balances"])

    return app
