"""HTTP request logging for the resource API.

Logs method, path, status and latency for every request at the boundary,
including requests that end in an unhandled exception.
"""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("resources.http")

CallNext = Callable[[Request], Awaitable[Response]]


def request_logging_middleware_factory() -> Callable[[Request, CallNext], Awaitable[Response]]:
    async def middleware(request: Request, call_next: CallNext) -> Response:
        start = time.perf_counter()
        # Unhandled errors propagate past call_next and are rendered as 500.
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )

    return middleware
