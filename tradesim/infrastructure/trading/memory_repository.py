"""
Adapter: In-process stores.

Dict-backed implementations of the stock and portfolio ports. Records
are kept in their serialized shape and rebuilt on every read, so callers
never share mutable state with the store. Scan order is insertion order.
"""

from typing import Any, Iterable, Optional

from tradesim.domain.trading.entities import Portfolio, Stock
from tradesim.domain.trading.ports import PortfolioRepository, StockRepository


class InMemoryStockRepository(StockRepository):
    """Stock catalog held in a dict keyed by symbol."""

    def __init__(self, stocks: Iterable[Stock] = ()) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        for stock in stocks:
            self._records[stock.symbol] = stock.to_record()

    def scan(self) -> list[Stock]:
        return [Stock.from_record(r) for r in self._records.values()]

    def get(self, symbol: str) -> Optional[Stock]:
        record = self._records.get(symbol)
        return Stock.from_record(record) if record is not None else None

    def update_price(
        self,
        symbol: str,
        price: float,
        change_percent: float,
        last_updated: str,
    ) -> None:
        record = self._records.setdefault(symbol, {"symbol": symbol, "name": ""})
        record.update(
            {"price": price, "changePercent": change_percent, "lastUpdated": last_updated}
        )


class InMemoryPortfolioRepository(PortfolioRepository):
    """Portfolios held in a dict keyed by user id."""

    def __init__(self, portfolios: Iterable[Portfolio] = ()) -> None:
        self._records: dict[str, dict[str, Any]] = {}
        for portfolio in portfolios:
            self.put(portfolio)

    def get(self, user_id: str) -> Optional[Portfolio]:
        record = self._records.get(user_id)
        return Portfolio.from_record(record) if record is not None else None

    def put(self, portfolio: Portfolio) -> None:
        self._records[portfolio.user_id] = portfolio.to_record()
