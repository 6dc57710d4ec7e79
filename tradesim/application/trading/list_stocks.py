"""
Use case: List the stock catalog.

Input: none
Output: list[Stock] in store scan order
Side effects: None.
"""

import logging

from tradesim.domain.trading.entities import Stock
from tradesim.domain.trading.ports import StockRepository

logger = logging.getLogger(__name__)


class ListStocksUseCase:
    """Returns every listed stock with its current price."""

    def __init__(self, stock_repo: StockRepository) -> None:
        self._stock_repo = stock_repo

    def execute(self) -> list[Stock]:
        stocks = self._stock_repo.scan()
        logger.debug("Listing %d stocks", len(stocks))
        return stocks
