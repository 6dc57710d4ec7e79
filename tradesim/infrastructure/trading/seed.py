"""
Default stock catalog.

Used to populate the in-memory store for local runs and by
scripts/seed_stocks.py for SQL databases.
"""

import json
from pathlib import Path

from tradesim.domain.trading.entities import Stock

DEFAULT_STOCKS: tuple[Stock, ...] = (
    Stock(symbol="AAPL", name="Apple Inc.", price=189.84),
    Stock(symbol="MSFT", name="Microsoft Corporation", price=415.26),
    Stock(symbol="GOOGL", name="Alphabet Inc.", price=171.95),
    Stock(symbol="AMZN", name="Amazon.com, Inc.", price=183.63),
    Stock(symbol="NVDA", name="NVIDIA Corporation", price=120.91),
    Stock(symbol="TSLA", name="Tesla, Inc.", price=177.29),
    Stock(symbol="META", name="Meta Platforms, Inc.", price=493.50),
    Stock(symbol="NFLX", name="Netflix, Inc.", price=640.46),
)


def load_stocks(path: Path) -> list[Stock]:
    """Read a JSON array of stock records.

    Each entry needs ``symbol`` and ``price``; ``name``, ``changePercent``
    and ``lastUpdated`` are optional.
    """
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    return [Stock.from_record(record) for record in records]
