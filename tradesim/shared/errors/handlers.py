"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
All error responses use the ErrorResponse shape: {"error": message}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tradesim.domain.trading.errors import (
    InsufficientFundsError,
    InsufficientHoldingsError,
    InvalidRequestError,
    PortfolioNotFoundError,
    StockNotFoundError,
    TradingDomainError,
    UnauthorizedError,
)
from tradesim.shared.security.headers import SECURE_HEADERS
from tradesim.shared.security.identity import get_identity_claim, is_protected_path

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_405 = 405
HTTP_500 = 500


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(InvalidRequestError)
    async def handle_invalid_request(
        _request: Request, exc: InvalidRequestError
    ) -> JSONResponse:
        """Handle request bodies that fail route validation."""
        logger.warning("Invalid request: %s", exc.message)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(InsufficientFundsError)
    async def handle_insufficient_funds(
        _request: Request, exc: InsufficientFundsError
    ) -> JSONResponse:
        """Handle insufficient funds errors."""
        logger.warning("Insufficient funds")
        return _error_response(HTTP_400, "Insufficient funds")

    @app.exception_handler(InsufficientHoldingsError)
    async def handle_insufficient_holdings(
        _request: Request, exc: InsufficientHoldingsError
    ) -> JSONResponse:
        """Handle sells larger than the held position."""
        logger.warning("Insufficient holdings: %s", exc.symbol)
        return _error_response(HTTP_400, "Insufficient holdings")

    @app.exception_handler(StockNotFoundError)
    async def handle_stock_not_found(
        _request: Request, exc: StockNotFoundError
    ) -> JSONResponse:
        """Handle unknown ticker errors."""
        logger.warning("Stock not found: %s", exc.symbol)
        return _error_response(HTTP_404, "Stock not found")

    @app.exception_handler(PortfolioNotFoundError)
    async def handle_portfolio_not_found(
        _request: Request, exc: PortfolioNotFoundError
    ) -> JSONResponse:
        """Handle missing portfolio errors."""
        logger.warning("Portfolio not found")
        return _error_response(HTTP_404, "Portfolio not found")

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(
        _request: Request, exc: UnauthorizedError
    ) -> JSONResponse:
        """Handle protected routes called without an identity claim."""
        logger.warning("Rejected unauthenticated request")
        return _error_response(HTTP_401, exc.message)

    @app.exception_handler(TradingDomainError)
    async def handle_trading_domain(
        _request: Request, exc: TradingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled trading domain errors."""
        logger.error("Unhandled trading domain error: %s", exc.message)
        return _error_response(HTTP_500, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Report unknown paths and unsupported methods as unsupported routes.

        A protected path reached with another method still requires an
        identity claim, so an anonymous caller gets 401 there.
        """
        if exc.status_code in (HTTP_404, HTTP_405):
            if is_protected_path(request) and get_identity_claim(request) is None:
                logger.warning("Rejected unauthenticated request")
                return _error_response(HTTP_401, UnauthorizedError().message)
            return _error_response(HTTP_404, "Unsupported route")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle framework-level validation failures."""
        logger.warning("Request validation failed: %d errors", len(exc.errors()))
        return _error_response(HTTP_400, "Invalid request")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors, including store failures.

        Runs outside the middleware stack, so the security headers are
        set here.
        """
        logger.exception(
            "Unexpected error on %s %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
        )
        response = _error_response(HTTP_500, str(exc) or type(exc).__name__)
        response.headers.update(SECURE_HEADERS)
        return response
