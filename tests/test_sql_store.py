"""
Tests for the SQLAlchemy store adapters.

Runs against an in-memory SQLite database shared across connections.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from tradesim.core.config import Settings
from tradesim.domain.trading.entities import (
    Portfolio,
    Stock,
    Transaction,
    TransactionType,
)
from tradesim.domain.trading.pricing import format_timestamp, utc_now
from tradesim.infrastructure.trading.portfolio_repository import (
    SqlPortfolioRepository,
)
from tradesim.infrastructure.trading.seed import load_stocks
from tradesim.infrastructure.trading.stock_repository import SqlStockRepository
from tradesim.main import create_app


@pytest.fixture
def engine() -> Engine:
    return create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


@pytest.fixture
def stock_repo(engine) -> SqlStockRepository:
    repo = SqlStockRepository(engine)
    repo.seed([
        Stock(symbol="AAPL", name="Apple Inc.", price=100.0, last_updated=format_timestamp(utc_now())),
        Stock(symbol="MSFT", name="Microsoft", price=250.0),
    ])
    return repo


@pytest.fixture
def portfolio_repo(engine) -> SqlPortfolioRepository:
    return SqlPortfolioRepository(engine)


class TestSqlStockRepository:
    """Tests for SqlStockRepository."""

    def test_scan_returns_seeded_stocks(self, stock_repo) -> None:
        symbols = sorted(s.symbol for s in stock_repo.scan())
        assert symbols == ["AAPL", "MSFT"]

    def test_get_unknown_symbol(self, stock_repo) -> None:
        assert stock_repo.get("ZZZZ") is None

    def test_never_updated_stock_has_no_timestamp(self, stock_repo) -> None:
        assert stock_repo.get("MSFT").last_updated is None

    def test_update_price(self, stock_repo) -> None:
        stock_repo.update_price("AAPL", 100.25, 0.25, "2024-05-01T12:00:00.000Z")

        stock = stock_repo.get("AAPL")
        assert stock.price == 100.25
        assert stock.change_percent == 0.25
        assert stock.last_updated == "2024-05-01T12:00:00.000Z"
        assert stock.name == "Apple Inc."

    def test_seed_overwrites_existing(self, stock_repo) -> None:
        written = stock_repo.seed([Stock(symbol="AAPL", name="Apple", price=1.0)])

        assert written == 1
        assert stock_repo.get("AAPL").price == 1.0
        assert len(stock_repo.scan()) == 2


class TestSqlPortfolioRepository:
    """Tests for SqlPortfolioRepository."""

    def test_missing_portfolio(self, portfolio_repo) -> None:
        assert portfolio_repo.get("nobody") is None

    def test_put_then_get(self, portfolio_repo) -> None:
        portfolio = Portfolio(
            user_id="u1",
            cash_balance=500.0,
            holdings={"AAPL": 5},
            history=[
                Transaction(type=TransactionType.ADD_CASH, date="2024-01-01T00:00:00.000Z", amount=1000.0),
                Transaction(
                    type=TransactionType.BUY,
                    date="2024-01-02T00:00:00.000Z",
                    ticker="AAPL",
                    quantity=5,
                    price=100.0,
                    total=500.0,
                ),
            ],
        )

        portfolio_repo.put(portfolio)

        assert portfolio_repo.get("u1") == portfolio

    def test_put_replaces_whole_record(self, portfolio_repo) -> None:
        portfolio_repo.put(Portfolio(user_id="u1", cash_balance=1.0, holdings={"AAPL": 1}))
        portfolio_repo.put(Portfolio(user_id="u1", cash_balance=2.0))

        stored = portfolio_repo.get("u1")
        assert stored.cash_balance == 2.0
        assert stored.holdings == {}


class TestSqlBackedApi:
    """End-to-end flow against the SQL adapters."""

    def test_deposit_buy_sell(self, stock_repo, portfolio_repo) -> None:
        app = create_app(
            settings=Settings(_env_file=None, identity_header="X-User-Id", rate_limit_enabled=False),
            stock_repo=stock_repo,
            portfolio_repo=portfolio_repo,
        )
        client = TestClient(app)
        headers = {"X-User-Id": "u1"}

        assert client.post("/add-cash", json={"amount": 1000}, headers=headers).status_code == 200
        # MSFT has never been priced, so each request moves it; trade AAPL only.
        buy = client.post("/buy", json={"ticker": "AAPL", "quantity": 4}, headers=headers)
        sell = client.post("/sell", json={"ticker": "AAPL", "quantity": 1}, headers=headers)

        assert buy.status_code == 200
        assert sell.status_code == 200
        stored = portfolio_repo.get("u1")
        assert stored.cash_balance == 700.0
        assert stored.holdings == {"AAPL": 3}
        assert [t.type for t in stored.history] == [
            TransactionType.ADD_CASH,
            TransactionType.BUY,
            TransactionType.SELL,
        ]


class TestLoadStocks:
    """Tests for reading a catalog file."""

    def test_load_stocks_from_json(self, tmp_path, stock_repo) -> None:
        path = tmp_path / "stocks.json"
        path.write_text(
            '[{"symbol": "IBM", "name": "IBM", "price": 180.5},'
            ' {"symbol": "AAPL", "name": "Apple", "price": 120.0, "changePercent": 1.5}]',
            encoding="utf-8",
        )

        stocks = load_stocks(path)
        stock_repo.seed(stocks)

        assert [s.symbol for s in stocks] == ["IBM", "AAPL"]
        assert stock_repo.get("IBM").price == 180.5
        assert stock_repo.get("AAPL").change_percent == 1.5
