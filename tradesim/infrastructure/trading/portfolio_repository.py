"""
Adapter: Portfolio persistence.

Implements PortfolioRepository port on top of a SQLAlchemy engine.
Each put replaces the whole record; concurrent writers race and the
last one wins.
"""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.engine import Engine

from tradesim.domain.trading.entities import Portfolio, Transaction
from tradesim.domain.trading.ports import PortfolioRepository
from tradesim.infrastructure.trading.tables import metadata, portfolios_table


class SqlPortfolioRepository(PortfolioRepository):
    """Reads and writes the portfolios table.

    Holdings and history are stored as JSON in their record shape.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        metadata.create_all(engine, tables=[portfolios_table])

    def get(self, user_id: str) -> Optional[Portfolio]:
        """Return a portfolio by user id, or None if not found.

        Args:
            user_id: Subject id of the owner.

        Returns:
            Portfolio entity or None.
        """
        query = select(portfolios_table).where(portfolios_table.c.user_id == user_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).first()

        if row is None:
            return None

        return Portfolio(
            user_id=row.user_id,
            cash_balance=row.cash_balance,
            holdings=dict(row.holdings or {}),
            history=[Transaction.from_record(r) for r in row.history or []],
        )

    def put(self, portfolio: Portfolio) -> None:
        """Persist a portfolio, replacing the stored version.

        Args:
            portfolio: Portfolio entity to save.
        """
        record = portfolio.to_record()
        values = {
            "cash_balance": record["cashBalance"],
            "holdings": record["holdings"],
            "history": record["history"],
        }
        with self._engine.begin() as conn:
            result = conn.execute(
                update(portfolios_table)
                .where(portfolios_table.c.user_id == portfolio.user_id)
                .values(**values)
            )
            if result.rowcount == 0:
                conn.execute(
                    insert(portfolios_table).values(
                        user_id=portfolio.user_id, **values
                    )
                )
