#!/usr/bin/env python3
"""
CLI tool: Seed the stock catalog.

Writes the default catalog, or the stocks listed in a JSON file, to the
SQL store named by DATABASE_URL (or --database-url). Existing symbols
are overwritten.

Usage:
    python scripts/seed_stocks.py [--file=stocks.json] [--database-url=sqlite:///tradesim.db]
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import create_engine

from tradesim.core.config import settings
from tradesim.infrastructure.trading.seed import DEFAULT_STOCKS, load_stocks
from tradesim.infrastructure.trading.stock_repository import SqlStockRepository
from tradesim.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Seed the stocks table and report how many rows were written."""
    parser = argparse.ArgumentParser(description="Seed the stock catalog")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="JSON array of stock records (default: built-in catalog)",
    )
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="SQLAlchemy URL of the store (default: DATABASE_URL)",
    )
    args = parser.parse_args()

    configure_logging(settings.log_level)

    if not args.database_url:
        logger.error("No database URL: set DATABASE_URL or pass --database-url")
        return 1

    stocks = load_stocks(args.file) if args.file else list(DEFAULT_STOCKS)
    repo = SqlStockRepository(create_engine(args.database_url))
    count = repo.seed(stocks)
    logger.info("Wrote %d stocks", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
