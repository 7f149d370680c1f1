"""Main entry point - runs the API server."""

import asyncio
import logging

import uvicorn

from balance_gateway.api.app import create_app
from balance_gateway.config import get_settings
from balance_gateway.observability import (
    configure_logging,
    configure_tracing,
    shutdown_tracing,
)
from balance_gateway.providers import create_provider

logger = logging.getLogger(__name__)


class Application:
    """Main application: wires settings, provider and tracer into the API."""

    def __init__(self):
        self.settings = get_settings()
        self.provider = None

    async def start(self):
        """Start the API server and block until it stops."""
        configure_logging(self.settings)

        logger.info("Starting Balance Gateway...")
        logger.info("Config: %s", self.settings.get_safe_dict())

        tracer = configure_tracing(self.settings)
        self.provider = create_provider(self.settings)

        try:
            await self._run_api(tracer)
        finally:
            await self._cleanup()

    async def _run_api(self, tracer):
        """Run the FastAPI server."""
        app = create_app(self.settings, provider=self.provider, tracer=tracer)
        config = uvicorn.Config(
            app,
            host=self.settings.api_host,
            port=self.settings.api_port,
            log_level="debug" if self.settings.debug else "info",
            access_log=False,
        )
        server = uvicorn.Server(config)
        logger.info(
            "Server starting on http://%s:%s", self.settings.api_host, self.settings.api_port
        )
        await server.serve()

    async def _cleanup(self):
        """Cleanup resources."""
        logger.info("Cleaning up...")

        if self.provider is not None:
            await self.provider.aclose()

        shutdown_tracing()
        logger.info("Cleanup complete")


def main():
    """Main entry point."""
    app = Application()

    try:
        asyncio.run(app.start())
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received")


if __name__ == "__main__":
    main()
