"""
Use case: Deposit cash into the caller's portfolio.

Input: AddCashCommand (user_id, amount)
Output: Portfolio after the deposit
Side effects: Creates the portfolio on first deposit; overwrites it in the store.
Failure cases: InvalidRequestError.
"""

import logging
import math
from datetime import datetime
from typing import Callable

from tradesim.application.trading.dtos import AddCashCommand
from tradesim.domain.trading.entities import Portfolio
from tradesim.domain.trading.errors import InvalidRequestError
from tradesim.domain.trading.ports import PortfolioRepository
from tradesim.domain.trading.pricing import format_timestamp, utc_now

logger = logging.getLogger(__name__)

INVALID_AMOUNT = "Invalid amount"


class AddCashUseCase:
    """Credits cash and appends an add_cash transaction.

    This is the only operation that creates a portfolio.
    """

    def __init__(
        self,
        portfolio_repo: PortfolioRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._portfolio_repo = portfolio_repo
        self._clock = clock

    def execute(self, command: AddCashCommand) -> Portfolio:
        """Run the deposit.

        Raises:
            InvalidRequestError: If the amount is not finite or not positive.
        """
        if not math.isfinite(command.amount) or command.amount <= 0:
            raise InvalidRequestError(INVALID_AMOUNT)

        portfolio = self._portfolio_repo.get(command.user_id)
        if portfolio is None:
            logger.info("Creating portfolio on first deposit")
            portfolio = Portfolio(user_id=command.user_id)

        portfolio.deposit(command.amount, format_timestamp(self._clock()))
        self._portfolio_repo.put(portfolio)
        return portfolio
