"""
SQLAlchemy table definitions for the trading store.

Both tables are key-value shaped: one primary key and the record
fields. Holdings and history are kept as JSON documents.
"""

from sqlalchemy import JSON, Column, Float, MetaData, String, Table

metadata = MetaData()

stocks_table = Table(
    "stocks",
    metadata,
    Column("symbol", String(16), primary_key=True),
    Column("name", String(255), nullable=False, default=""),
    Column("price", Float, nullable=False),
    Column("change_percent", Float, nullable=False, default=0.0),
    Column("last_updated", String(40), nullable=True),
)

portfolios_table = Table(
    "portfolios",
    metadata,
    Column("user_id", String(128), primary_key=True),
    Column("cash_balance", Float, nullable=False, default=0.0),
    Column("holdings", JSON, nullable=False),
    Column("history", JSON, nullable=False),
)
