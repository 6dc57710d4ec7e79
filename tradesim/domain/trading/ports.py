"""
Port interfaces (ABCs) for the trading bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from tradesim.domain.trading.entities import Portfolio, Stock


class StockRepository(ABC):
    """Port for the stock catalog, keyed by symbol."""

    @abstractmethod
    def scan(self) -> list[Stock]:
        """Return every stock in store scan order."""
        raise NotImplementedError

    @abstractmethod
    def get(self, symbol: str) -> Optional[Stock]:
        """Return a stock by symbol, or None if not listed."""
        raise NotImplementedError

    @abstractmethod
    def update_price(
        self,
        symbol: str,
        price: float,
        change_percent: float,
        last_updated: str,
    ) -> None:
        """Overwrite the price fields of a stock, leaving the rest intact."""
        raise NotImplementedError


class PortfolioRepository(ABC):
    """Port for persisting and retrieving portfolios, keyed by user id."""

    @abstractmethod
    def get(self, user_id: str) -> Optional[Portfolio]:
        """Return a user's portfolio, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def put(self, portfolio: Portfolio) -> None:
        """Persist a portfolio, replacing any stored version."""
        raise NotImplementedError
