"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client default rate limit.
Protects against denial-of-service and resource abuse.

The default limit is applied by DefaultRateLimitMiddleware for every
request, matched route or not, by hitting the slowapi limiter's storage
directly instead of resolving the endpoint first.
"""

import logging
from typing import Callable

from limits import parse_many
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

DEFAULT_RATE_LIMIT = "60/minute"


def build_limiter(default_limit: str = DEFAULT_RATE_LIMIT, enabled: bool = True) -> Limiter:
    """Create a limiter keyed on the client address.

    Each application gets its own limiter so counters are not shared
    between app instances.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


def rate_limit_exceeded_response() -> JSONResponse:
    """A 429 JSON response with a clear error message."""
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded"},
    )


class DefaultRateLimitMiddleware(BaseHTTPMiddleware):
    """Applies the default limit to every request.

    Reads the limiter from ``app.state.limiter``; a disabled limiter lets
    everything through.
    """

    def __init__(
        self,
        app: ASGIApp,
        limit: str = DEFAULT_RATE_LIMIT,
        key_func: Callable[[Request], str] = get_remote_address,
    ) -> None:
        super().__init__(app)
        self._limits = parse_many(limit)
        self._key_func = key_func

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        limiter: Limiter = request.app.state.limiter
        if limiter.enabled:
            key = self._key_func(request)
            for item in self._limits:
                if not limiter.limiter.hit(item, key):
                    logger.warning("Rate limit %s exceeded", item)
                    return rate_limit_exceeded_response()
        return await call_next(request)
