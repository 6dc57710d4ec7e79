"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds as expected.
"""

from fastapi.testclient import TestClient

from tradesim.core.config import Settings
from tradesim.infrastructure.trading.memory_repository import (
    InMemoryPortfolioRepository,
    InMemoryStockRepository,
)
from tradesim.main import create_app

app = create_app(
    settings=Settings(_env_file=None, version="9.9.9"),
    stock_repo=InMemoryStockRepository(),
    portfolio_repo=InMemoryPortfolioRepository(),
)
client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        response = client.get("/health")
        body = response.json()
        assert body["status"] == "ok"
        assert body["version"] == "9.9.9"


class TestDefaultApp:
    """Tests for the module-level application."""

    def test_default_app_serves_seeded_catalog(self) -> None:
        """Without DATABASE_URL the app lists the built-in catalog."""
        from tradesim.infrastructure.trading.seed import DEFAULT_STOCKS

        default_app = create_app(settings=Settings(_env_file=None))
        response = TestClient(default_app).get("/stocks")

        assert response.status_code == 200
        symbols = [s["symbol"] for s in response.json()]
        assert symbols == [s.symbol for s in DEFAULT_STOCKS]
