"""
Adapter: Stock catalog persistence.

Implements StockRepository port on top of a SQLAlchemy engine.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Engine

from tradesim.domain.trading.entities import Stock
from tradesim.domain.trading.ports import StockRepository
from tradesim.infrastructure.trading.tables import metadata, stocks_table

logger = logging.getLogger(__name__)


def _row_to_stock(row) -> Stock:
    return Stock(
        symbol=row.symbol,
        name=row.name,
        price=row.price,
        change_percent=row.change_percent,
        last_updated=row.last_updated,
    )


class SqlStockRepository(StockRepository):
    """Reads and updates the stocks table.

    Creates the table on construction if it does not exist.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        metadata.create_all(engine, tables=[stocks_table])

    def scan(self) -> list[Stock]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(stocks_table)).fetchall()
        return [_row_to_stock(row) for row in rows]

    def get(self, symbol: str) -> Optional[Stock]:
        query = select(stocks_table).where(stocks_table.c.symbol == symbol)
        with self._engine.connect() as conn:
            row = conn.execute(query).first()
        return _row_to_stock(row) if row is not None else None

    def update_price(
        self,
        symbol: str,
        price: float,
        change_percent: float,
        last_updated: str,
    ) -> None:
        statement = (
            update(stocks_table)
            .where(stocks_table.c.symbol == symbol)
            .values(
                price=price,
                change_percent=change_percent,
                last_updated=last_updated,
            )
        )
        with self._engine.begin() as conn:
            conn.execute(statement)

    def seed(self, stocks: Iterable[Stock]) -> int:
        """Insert or replace catalog entries.

        Args:
            stocks: Stocks to write.

        Returns:
            Number of stocks written.
        """
        count = 0
        with self._engine.begin() as conn:
            for stock in stocks:
                values = {
                    "name": stock.name,
                    "price": stock.price,
                    "change_percent": stock.change_percent,
                    "last_updated": stock.last_updated,
                }
                result = conn.execute(
                    update(stocks_table)
                    .where(stocks_table.c.symbol == stock.symbol)
                    .values(**values)
                )
                if result.rowcount == 0:
                    conn.execute(
                        insert(stocks_table).values(symbol=stock.symbol, **values)
                    )
                count += 1

        logger.info("Seeded %d stocks", count)
        return count
