"""
Use case: Sell held shares at the current stock price.

Input: TradeCommand (user_id, ticker, quantity)
Output: Portfolio after the sale
Side effects: Overwrites the portfolio in the store.
Failure cases: InvalidRequestError, PortfolioNotFoundError,
    InsufficientHoldingsError, StockNotFoundError.
"""

import logging
from datetime import datetime
from typing import Callable

from tradesim.application.trading.buy_stock import validate_trade
from tradesim.application.trading.dtos import TradeCommand
from tradesim.domain.trading.entities import Portfolio
from tradesim.domain.trading.errors import (
    InsufficientHoldingsError,
    PortfolioNotFoundError,
    StockNotFoundError,
)
from tradesim.domain.trading.ports import PortfolioRepository, StockRepository
from tradesim.domain.trading.pricing import format_timestamp, utc_now

logger = logging.getLogger(__name__)


class SellStockUseCase:
    """Orchestrates a sale.

    Holdings are checked before the stock is looked up, so selling an
    unheld ticker reports insufficient holdings even if it is unlisted.
    """

    def __init__(
        self,
        stock_repo: StockRepository,
        portfolio_repo: PortfolioRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._stock_repo = stock_repo
        self._portfolio_repo = portfolio_repo
        self._clock = clock

    def execute(self, command: TradeCommand) -> Portfolio:
        validate_trade(command)

        portfolio = self._portfolio_repo.get(command.user_id)
        if portfolio is None:
            raise PortfolioNotFoundError(command.user_id)

        held = portfolio.quantity_of(command.ticker)
        if held < command.quantity:
            raise InsufficientHoldingsError(command.ticker, command.quantity, held)

        stock = self._stock_repo.get(command.ticker)
        if stock is None:
            raise StockNotFoundError(command.ticker)

        portfolio.record_sell(
            command.ticker,
            command.quantity,
            stock.price,
            format_timestamp(self._clock()),
        )
        self._portfolio_repo.put(portfolio)

        logger.info(
            "Sold %d %s at %.2f", command.quantity, command.ticker, stock.price
        )
        return portfolio
