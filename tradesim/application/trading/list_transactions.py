"""
Use case: List a portfolio's transactions, newest first.

Input: ListTransactionsQuery (user_id)
Output: list[Transaction] sorted by date descending
Side effects: None.
Failure cases: PortfolioNotFoundError.
"""

import logging
from datetime import datetime, timezone

from tradesim.application.trading.dtos import ListTransactionsQuery
from tradesim.domain.trading.entities import Transaction
from tradesim.domain.trading.errors import PortfolioNotFoundError
from tradesim.domain.trading.ports import PortfolioRepository
from tradesim.domain.trading.pricing import parse_timestamp

logger = logging.getLogger(__name__)

_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _sort_key(transaction: Transaction) -> datetime:
    return parse_timestamp(transaction.date) or _EPOCH


class ListTransactionsUseCase:
    """Returns the history of a portfolio ordered newest first.

    Entries with equal dates keep their original relative order.
    """

    def __init__(self, portfolio_repo: PortfolioRepository) -> None:
        self._portfolio_repo = portfolio_repo

    def execute(self, query: ListTransactionsQuery) -> list[Transaction]:
        """Run the use case.

        Raises:
            PortfolioNotFoundError: If the user has no portfolio yet.
        """
        portfolio = self._portfolio_repo.get(query.user_id)
        if portfolio is None:
            raise PortfolioNotFoundError(query.user_id)

        # sorted() with reverse=True is stable for equal keys
        return sorted(portfolio.history, key=_sort_key, reverse=True)
