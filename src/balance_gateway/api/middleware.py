"""HTTP middleware."""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

# Same CORS policy for every route
CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]

access_logger = logging.getLogger("balance_gateway.access")


def _remote_addr(request: Request) -> str:
    if request.client is None:
        return "Unknown"
    return f"{request.client.host}:{request.client.port}"


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, remote address, status, elapsed.

    2xx responses are logged at INFO, everything else at ERROR.
    """

    def __init__(self, app: ASGIApp, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or access_logger

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        method = request.method
        path = request.url.path
        remote = _remote_addr(request)

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.logger.exception(
                "Request: %s %s from %s failed with status 500 and took %.2fms",
                method,
                path,
                remote,
                elapsed_ms,
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        if 200 <= response.status_code < 300:
            self.logger.info(
                "Request: %s %s from %s took %.2fms", method, path, remote, elapsed_ms
            )
        else:
            self.logger.error(
                "Request: %s %s from %s failed with status %d and took %.2fms",
                method,
                path,
                remote,
                response.status_code,
                elapsed_ms,
            )
        return response
