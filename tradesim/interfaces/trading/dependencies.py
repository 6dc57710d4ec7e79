"""
Dependency injection for the trading bounded context.

Provides FastAPI dependency functions that wire the store adapters
held on ``app.state`` into use cases via constructor injection, and
resolve the caller's identity claim.
"""

import json
import logging
from typing import Any, Optional

from fastapi import Depends, Request

from tradesim.application.trading.add_cash import AddCashUseCase
from tradesim.application.trading.buy_stock import BuyStockUseCase
from tradesim.application.trading.get_portfolio import GetPortfolioUseCase
from tradesim.application.trading.list_stocks import ListStocksUseCase
from tradesim.application.trading.list_transactions import ListTransactionsUseCase
from tradesim.application.trading.refresh_stock_prices import (
    RefreshStockPricesUseCase,
)
from tradesim.application.trading.sell_stock import SellStockUseCase
from tradesim.domain.trading.errors import UnauthorizedError
from tradesim.domain.trading.ports import PortfolioRepository, StockRepository
from tradesim.shared.security.identity import get_identity_claim

logger = logging.getLogger(__name__)


def get_stock_repo(request: Request) -> StockRepository:
    return request.app.state.stock_repo


def get_portfolio_repo(request: Request) -> PortfolioRepository:
    return request.app.state.portfolio_repo


def get_refresh_prices_use_case(request: Request) -> RefreshStockPricesUseCase:
    """Build RefreshStockPricesUseCase with its store dependency."""
    return RefreshStockPricesUseCase(
        stock_repo=get_stock_repo(request),
        staleness_seconds=request.app.state.settings.price_staleness_seconds,
    )


def refresh_prices_on_request(request: Request) -> None:
    """Refresh stale prices before the request is dispatched.

    Only active in ``request`` refresh mode. Failures propagate and
    fail the request.
    """
    if request.app.state.settings.price_refresh_mode != "request":
        return
    get_refresh_prices_use_case(request).execute()


def require_user_id(user_id: Optional[str] = Depends(get_identity_claim)) -> str:
    """Gate for protected routes.

    Raises:
        UnauthorizedError: If no identity claim is present.
    """
    if not user_id:
        raise UnauthorizedError()
    return user_id


async def json_body(request: Request) -> Any:
    """Decode the request body as JSON regardless of its content type.

    An empty or undecodable body yields an empty object, which then
    fails route validation.
    """
    raw = await request.body()
    if not raw:
        return {}
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Request body is not valid JSON")
        return {}


def get_list_stocks_use_case(request: Request) -> ListStocksUseCase:
    """Build ListStocksUseCase with its store dependency."""
    return ListStocksUseCase(stock_repo=get_stock_repo(request))


def get_portfolio_use_case(request: Request) -> GetPortfolioUseCase:
    """Build GetPortfolioUseCase with its store dependency."""
    return GetPortfolioUseCase(portfolio_repo=get_portfolio_repo(request))


def get_add_cash_use_case(request: Request) -> AddCashUseCase:
    """Build AddCashUseCase with its store dependency."""
    return AddCashUseCase(portfolio_repo=get_portfolio_repo(request))


def get_list_transactions_use_case(request: Request) -> ListTransactionsUseCase:
    """Build ListTransactionsUseCase with its store dependency."""
    return ListTransactionsUseCase(portfolio_repo=get_portfolio_repo(request))


def get_buy_stock_use_case(request: Request) -> BuyStockUseCase:
    """Build BuyStockUseCase with its store dependencies."""
    return BuyStockUseCase(
        stock_repo=get_stock_repo(request),
        portfolio_repo=get_portfolio_repo(request),
    )


def get_sell_stock_use_case(request: Request) -> SellStockUseCase:
    """Build SellStockUseCase with its store dependencies."""
    return SellStockUseCase(
        stock_repo=get_stock_repo(request),
        portfolio_repo=get_portfolio_repo(request),
    )
