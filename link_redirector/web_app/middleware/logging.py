"""Access logging middleware."""

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from ...common.logging_config import get_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """One access line per request.

    The query string is never logged since it carries the shared secret.
    Redirect targets are logged at DEBUG, server errors at ERROR.
    """

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or get_logger("web")

    async def dispatch(self, request: Request, call_next: Callable):
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        client_ip = request.client.host if request.client else "unknown"
        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        self.logger.log(
            level,
            f"{client_ip} {request.method} {request.url.path} "
            f"{response.status_code} {duration_ms:.2f}ms",
        )

        location = response.headers.get("location")
        if location:
            self.logger.debug(f"{request.url.path} -> {location}")

        return response
