"""
FastAPI router for the trading bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.

Protected routes resolve the identity gate before the use case. The
request-mode price refresh runs earlier, in PriceRefreshMiddleware.
"""

from typing import Any

from fastapi import APIRouter, Depends

from tradesim.application.trading.add_cash import AddCashUseCase
from tradesim.application.trading.buy_stock import BuyStockUseCase
from tradesim.application.trading.dtos import (
    AddCashCommand,
    GetPortfolioQuery,
    ListTransactionsQuery,
    TradeCommand,
)
from tradesim.application.trading.get_portfolio import GetPortfolioUseCase
from tradesim.application.trading.list_stocks import ListStocksUseCase
from tradesim.application.trading.list_transactions import ListTransactionsUseCase
from tradesim.application.trading.sell_stock import SellStockUseCase
from tradesim.interfaces.trading.dependencies import (
    get_add_cash_use_case,
    get_buy_stock_use_case,
    get_list_stocks_use_case,
    get_list_transactions_use_case,
    get_portfolio_use_case,
    get_sell_stock_use_case,
    json_body,
    require_user_id,
)
from tradesim.interfaces.trading.schemas import (
    AddCashRequest,
    BuyRequest,
    ErrorResponse,
    SellRequest,
    StockItem,
)

router = APIRouter(tags=["trading"])

PROTECTED_RESPONSES: dict[int | str, dict[str, Any]] = {
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}
TRADE_RESPONSES: dict[int | str, dict[str, Any]] = {
    **PROTECTED_RESPONSES,
    400: {"model": ErrorResponse},
}


@router.get(
    "/stocks",
    response_model=list[StockItem],
    summary="List stocks",
    description="Return every listed stock with its current simulated price.",
)
def list_stocks(
    use_case: ListStocksUseCase = Depends(get_list_stocks_use_case),
) -> list[dict[str, Any]]:
    """List the stock catalog in store order."""
    return [stock.to_record() for stock in use_case.execute()]


@router.get(
    "/portfolio",
    responses=PROTECTED_RESPONSES,
    summary="Get portfolio",
    description="Return the caller's cash balance, holdings and history.",
)
def get_portfolio(
    user_id: str = Depends(require_user_id),
    use_case: GetPortfolioUseCase = Depends(get_portfolio_use_case),
) -> dict[str, Any]:
    """Get the caller's portfolio."""
    portfolio = use_case.execute(GetPortfolioQuery(user_id=user_id))
    return portfolio.to_record()


@router.post(
    "/add-cash",
    responses=TRADE_RESPONSES,
    summary="Deposit cash",
    description="Credit cash to the caller's portfolio, creating it if needed.",
)
def add_cash(
    user_id: str = Depends(require_user_id),
    payload: Any = Depends(json_body),
    use_case: AddCashUseCase = Depends(get_add_cash_use_case),
) -> dict[str, Any]:
    """Deposit cash into the caller's portfolio."""
    request = AddCashRequest.from_payload(payload)
    portfolio = use_case.execute(
        AddCashCommand(user_id=user_id, amount=request.amount)
    )
    return portfolio.to_record()


@router.get(
    "/transactions",
    responses=PROTECTED_RESPONSES,
    summary="List transactions",
    description="Return the caller's transaction history, newest first.",
)
def list_transactions(
    user_id: str = Depends(require_user_id),
    use_case: ListTransactionsUseCase = Depends(get_list_transactions_use_case),
) -> dict[str, Any]:
    """List the caller's transactions."""
    transactions = use_case.execute(ListTransactionsQuery(user_id=user_id))
    return {"transactions": [t.to_record() for t in transactions]}


@router.post(
    "/buy",
    responses=TRADE_RESPONSES,
    summary="Buy shares",
    description="Buy whole shares at the current price using portfolio cash.",
)
def buy(
    user_id: str = Depends(require_user_id),
    payload: Any = Depends(json_body),
    use_case: BuyStockUseCase = Depends(get_buy_stock_use_case),
) -> dict[str, Any]:
    """Buy shares of a stock."""
    request = BuyRequest.from_payload(payload)
    portfolio = use_case.execute(
        TradeCommand(user_id=user_id, ticker=request.ticker, quantity=request.quantity)
    )
    return portfolio.to_record()


@router.post(
    "/sell",
    responses=TRADE_RESPONSES,
    summary="Sell shares",
    description="Sell held shares at the current price.",
)
def sell(
    user_id: str = Depends(require_user_id),
    payload: Any = Depends(json_body),
    use_case: SellStockUseCase = Depends(get_sell_stock_use_case),
) -> dict[str, Any]:
    """Sell shares of a stock."""
    request = SellRequest.from_payload(payload)
    portfolio = use_case.execute(
        TradeCommand(user_id=user_id, ticker=request.ticker, quantity=request.quantity)
    )
    return portfolio.to_record()
