"""
Use case: Refresh stale stock prices with a small random walk.

Input: none
Output: RefreshPricesResult
Side effects: Partial price updates in the stock store.
Failure cases: Any store error propagates to the caller.
"""

import logging
import random
from datetime import datetime
from typing import Callable

from tradesim.application.trading.dtos import RefreshPricesResult
from tradesim.domain.trading.ports import StockRepository
from tradesim.domain.trading.pricing import (
    STALENESS_WINDOW_SECONDS,
    RandomSource,
    format_timestamp,
    is_stale,
    next_price,
    utc_now,
)

logger = logging.getLogger(__name__)


class RefreshStockPricesUseCase:
    """Moves the price of every stock not updated within the staleness window.

    Stocks are scanned and updated one at a time. Records refreshed
    within the window are left untouched to throttle write volume.
    """

    def __init__(
        self,
        stock_repo: StockRepository,
        staleness_seconds: float = STALENESS_WINDOW_SECONDS,
        rand: RandomSource = random.random,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._stock_repo = stock_repo
        self._staleness_seconds = staleness_seconds
        self._rand = rand
        self._clock = clock

    def execute(self) -> RefreshPricesResult:
        """Run one refresh cycle over the whole catalog.

        Returns:
            Counts of scanned and updated stocks.
        """
        stocks = self._stock_repo.scan()
        now = self._clock()
        updated = 0

        for stock in stocks:
            if not is_stale(stock.last_updated, now, self._staleness_seconds):
                continue

            move = next_price(stock.price, self._rand)
            self._stock_repo.update_price(
                stock.symbol,
                price=move.price,
                change_percent=move.change_percent,
                last_updated=format_timestamp(self._clock()),
            )
            updated += 1

        if updated:
            logger.info("Refreshed prices for %d of %d stocks", updated, len(stocks))
        return RefreshPricesResult(scanned=len(stocks), updated=updated)
