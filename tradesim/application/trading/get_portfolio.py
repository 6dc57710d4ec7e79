"""
Use case: Read the caller's portfolio.

Input: GetPortfolioQuery (user_id)
Output: Portfolio
Side effects: None.
Failure cases: PortfolioNotFoundError.
"""

import logging

from tradesim.application.trading.dtos import GetPortfolioQuery
from tradesim.domain.trading.entities import Portfolio
from tradesim.domain.trading.errors import PortfolioNotFoundError
from tradesim.domain.trading.ports import PortfolioRepository

logger = logging.getLogger(__name__)


class GetPortfolioUseCase:
    """Loads a portfolio by user id."""

    def __init__(self, portfolio_repo: PortfolioRepository) -> None:
        self._portfolio_repo = portfolio_repo

    def execute(self, query: GetPortfolioQuery) -> Portfolio:
        """Run the use case.

        Raises:
            PortfolioNotFoundError: If the user has no portfolio yet.
        """
        portfolio = self._portfolio_repo.get(query.user_id)
        if portfolio is None:
            raise PortfolioNotFoundError(query.user_id)
        return portfolio
