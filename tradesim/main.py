"""
Application entry point.

Creates the FastAPI application and wires together:
- Store adapters (SQL or in-memory), injected through app.state
- Routers (trading, health)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting) and request logging
- Request-mode price refresh ahead of routing
- Background price refresh, when enabled

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy import create_engine

from tradesim.application.trading.refresh_stock_prices import (
    RefreshStockPricesUseCase,
)
from tradesim.core.config import Settings, settings as default_settings
from tradesim.domain.trading.ports import PortfolioRepository, StockRepository
from tradesim.infrastructure.trading.memory_repository import (
    InMemoryPortfolioRepository,
    InMemoryStockRepository,
)
from tradesim.infrastructure.trading.portfolio_repository import (
    SqlPortfolioRepository,
)
from tradesim.infrastructure.trading.price_scheduler import PriceRefreshScheduler
from tradesim.infrastructure.trading.seed import DEFAULT_STOCKS
from tradesim.infrastructure.trading.stock_repository import SqlStockRepository
from tradesim.interfaces.health import router as health_router
from tradesim.interfaces.trading.middleware import PriceRefreshMiddleware
from tradesim.interfaces.trading.router import router as trading_router
from tradesim.shared.errors.handlers import register_error_handlers
from tradesim.shared.logging import RequestLoggingMiddleware, configure_logging
from tradesim.shared.security.headers import SecurityHeadersMiddleware
from tradesim.shared.security.rate_limiting import (
    DefaultRateLimitMiddleware,
    build_limiter,
)

logger = logging.getLogger(__name__)


def build_repositories(
    config: Settings,
) -> tuple[StockRepository, PortfolioRepository]:
    """Build the store adapters selected by configuration.

    With ``database_url`` set both tables live in that database;
    otherwise an in-memory store seeded with the default catalog is used.
    """
    if config.database_url:
        engine = create_engine(config.database_url, pool_pre_ping=True)
        logger.info("Using SQL store at %s", engine.url.render_as_string(hide_password=True))
        return SqlStockRepository(engine), SqlPortfolioRepository(engine)

    logger.info("DATABASE_URL not set; using in-memory store")
    return InMemoryStockRepository(DEFAULT_STOCKS), InMemoryPortfolioRepository()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: start/stop the background price refresh."""
    config: Settings = app.state.settings
    scheduler: Optional[PriceRefreshScheduler] = None

    if config.price_refresh_mode == "background":
        scheduler = PriceRefreshScheduler(
            RefreshStockPricesUseCase(
                stock_repo=app.state.stock_repo,
                staleness_seconds=config.price_staleness_seconds,
            ),
            interval_seconds=config.price_refresh_interval_seconds,
        )
        scheduler.start()
        scheduler.run_now()
    app.state.price_scheduler = scheduler

    yield

    if scheduler is not None:
        scheduler.stop()


def create_app(
    settings: Optional[Settings] = None,
    stock_repo: Optional[StockRepository] = None,
    portfolio_repo: Optional[PortfolioRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application. Store adapters
    not passed in are built from settings.

    Args:
        settings: Configuration; defaults to the environment-loaded settings.
        stock_repo: Stock store adapter.
        portfolio_repo: Portfolio store adapter.

    Returns:
        A fully configured FastAPI application instance.
    """
    config = settings or default_settings
    configure_logging(level=config.log_level)

    if stock_repo is None or portfolio_repo is None:
        built_stocks, built_portfolios = build_repositories(config)
        stock_repo = stock_repo or built_stocks
        portfolio_repo = portfolio_repo or built_portfolios

    app = FastAPI(
        title=config.project_name,
        version=config.version,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.stock_repo = stock_repo
    app.state.portfolio_repo = portfolio_repo

    # --- Price Refresh (runs after rate limiting) ---
    app.add_middleware(PriceRefreshMiddleware)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(
        config.rate_limit_default, enabled=config.rate_limit_enabled
    )
    app.add_middleware(DefaultRateLimitMiddleware, limit=config.rate_limit_default)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(trading_router, prefix=config.api_prefix)

    return app


app = create_app()
