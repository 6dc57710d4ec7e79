"""
Background price refresh.

Runs RefreshStockPricesUseCase on an APScheduler interval job so price
movement no longer depends on incoming requests. A failing cycle is
logged and the next one runs on schedule.
"""

import logging
from typing import Any

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from tradesim.application.trading.dtos import RefreshPricesResult
from tradesim.application.trading.refresh_stock_prices import (
    RefreshStockPricesUseCase,
)

logger = logging.getLogger(__name__)

JOB_ID = "refresh_stock_prices"


class PriceRefreshScheduler:
    """Owns the APScheduler job driving price refreshes.

    Usage:
        scheduler = PriceRefreshScheduler(use_case, interval_seconds=60)
        scheduler.start()
        scheduler.run_now()
        scheduler.stop()
    """

    def __init__(
        self,
        use_case: RefreshStockPricesUseCase,
        interval_seconds: float = 60,
    ) -> None:
        self._use_case = use_case
        self._interval_seconds = interval_seconds
        self._scheduler: Any | None = None

    @property
    def is_running(self) -> bool:
        return self._scheduler is not None

    def start(self) -> None:
        """Start the interval job. A second call is a no-op."""
        if self._scheduler is not None:
            logger.warning("Price refresh scheduler already running.")
            return

        self._scheduler = BackgroundScheduler(
            timezone="UTC",
            job_defaults={"coalesce": True, "max_instances": 1},
        )
        self._scheduler.add_job(
            self.run_now,
            IntervalTrigger(seconds=self._interval_seconds),
            id=JOB_ID,
            name="Stock price refresh",
        )
        self._scheduler.start()
        logger.info(
            "Price refresh scheduler started (every %ss).", self._interval_seconds
        )

    def stop(self) -> None:
        if self._scheduler is not None:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
            logger.info("Price refresh scheduler stopped.")

    def run_now(self) -> RefreshPricesResult | None:
        """Run one refresh cycle, logging instead of raising on failure."""
        try:
            return self._use_case.execute()
        except Exception:
            logger.exception("Price refresh cycle failed")
            return None
