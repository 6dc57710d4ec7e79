"""
Use case: Buy shares at the current stock price.

Input: TradeCommand (user_id, ticker, quantity)
Output: Portfolio after the purchase
Side effects: Overwrites the portfolio in the store.
Failure cases: InvalidRequestError, StockNotFoundError,
    PortfolioNotFoundError, InsufficientFundsError.
"""

import logging
from datetime import datetime
from typing import Callable

from tradesim.application.trading.dtos import TradeCommand
from tradesim.domain.trading.entities import Portfolio
from tradesim.domain.trading.errors import (
    InsufficientFundsError,
    InvalidRequestError,
    PortfolioNotFoundError,
    StockNotFoundError,
)
from tradesim.domain.trading.ports import PortfolioRepository, StockRepository
from tradesim.domain.trading.pricing import format_timestamp, utc_now

logger = logging.getLogger(__name__)

INVALID_TRADE = "Invalid ticker or quantity"


def validate_trade(command: TradeCommand) -> None:
    """Reject a trade without a ticker or with a non-positive quantity."""
    if not command.ticker or command.quantity <= 0:
        raise InvalidRequestError(INVALID_TRADE)


class BuyStockUseCase:
    """Orchestrates a purchase.

    The stock is looked up before the portfolio. A caller without a
    portfolio gets PortfolioNotFoundError; buying never creates one.
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

        stock = self._stock_repo.get(command.ticker)
        if stock is None:
            raise StockNotFoundError(command.ticker)

        total_cost = stock.price * command.quantity

        portfolio = self._portfolio_repo.get(command.user_id)
        if portfolio is None:
            raise PortfolioNotFoundError(command.user_id)

        if not portfolio.can_afford(total_cost):
            raise InsufficientFundsError(
                required=total_cost, available=portfolio.cash_balance
            )

        portfolio.record_buy(
            command.ticker,
            command.quantity,
            stock.price,
            format_timestamp(self._clock()),
        )
        self._portfolio_repo.put(portfolio)

        logger.info(
            "Bought %d %s at %.2f", command.quantity, command.ticker, stock.price
        )
        return portfolio
