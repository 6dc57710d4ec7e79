"""
Request-mode price refresh middleware.

Runs the Price Updater before routing, so matched, unmatched and
rejected requests all move stale prices first. A refresh failure
aborts the request and is answered by the 500 handler.
"""

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from tradesim.interfaces.trading.dependencies import refresh_prices_on_request

REFRESH_EXEMPT_PATHS = frozenset({"/health"})


class PriceRefreshMiddleware(BaseHTTPMiddleware):
    """Refreshes stale prices ahead of every request except the health check."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path not in REFRESH_EXEMPT_PATHS:
            await run_in_threadpool(refresh_prices_on_request, request)
        return await call_next(request)
