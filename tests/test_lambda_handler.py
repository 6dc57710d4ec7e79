"""
Tests for the AWS Lambda entry point.

Drives the Mangum-wrapped application with API Gateway HTTP API (v2)
events, the way the JWT authorizer delivers them.
"""

import json
from datetime import datetime, timezone
from typing import Any, Optional

import pytest
from mangum import Mangum

from tradesim.core.config import Settings
from tradesim.domain.trading.entities import Portfolio, Stock
from tradesim.domain.trading.pricing import format_timestamp
from tradesim.infrastructure.trading.memory_repository import (
    InMemoryPortfolioRepository,
    InMemoryStockRepository,
)
from tradesim.main import create_app


class FakeLambdaContext:
    function_name = "tradesim-test"
    aws_request_id = "req-1"


def make_event(
    method: str,
    path: str,
    sub: Optional[str] = None,
    body: Optional[Any] = None,
) -> dict[str, Any]:
    """Build a minimal HTTP API v2 event."""
    request_context: dict[str, Any] = {
        "accountId": "123456789012",
        "apiId": "api-id",
        "domainName": "example.execute-api.us-east-1.amazonaws.com",
        "requestId": "req-1",
        "routeKey": "$default",
        "stage": "$default",
        "http": {
            "method": method,
            "path": path,
            "protocol": "HTTP/1.1",
            "sourceIp": "203.0.113.7",
            "userAgent": "pytest",
        },
    }
    if sub is not None:
        request_context["authorizer"] = {"jwt": {"claims": {"sub": sub}, "scopes": None}}

    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": path,
        "rawQueryString": "",
        "headers": {
            "host": "example.execute-api.us-east-1.amazonaws.com",
            "content-type": "application/json",
            "x-forwarded-proto": "https",
        },
        "requestContext": request_context,
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def portfolio_repo() -> InMemoryPortfolioRepository:
    return InMemoryPortfolioRepository()


@pytest.fixture
def handler(portfolio_repo) -> Mangum:
    now = format_timestamp(datetime.now(timezone.utc))
    stock_repo = InMemoryStockRepository([
        Stock(symbol="AAPL", name="Apple Inc.", price=100.0, last_updated=now),
    ])
    app = create_app(
        settings=Settings(_env_file=None, rate_limit_enabled=False),
        stock_repo=stock_repo,
        portfolio_repo=portfolio_repo,
    )
    return Mangum(app, lifespan="off")


class TestLambdaHandler:
    """Tests for requests arriving as Lambda events."""

    def test_public_route(self, handler) -> None:
        response = handler(make_event("GET", "/stocks"), FakeLambdaContext())

        assert response["statusCode"] == 200
        assert json.loads(response["body"])[0]["symbol"] == "AAPL"

    def test_protected_route_without_claims(self, handler) -> None:
        response = handler(make_event("GET", "/portfolio"), FakeLambdaContext())

        assert response["statusCode"] == 401
        assert json.loads(response["body"]) == {"error": "Invalid token: not authorized"}

    def test_sub_claim_identifies_caller(self, handler, portfolio_repo) -> None:
        """The authorizer's sub claim selects the portfolio."""
        portfolio_repo.put(Portfolio(user_id="abc-123", cash_balance=7.5))

        response = handler(make_event("GET", "/portfolio", sub="abc-123"), FakeLambdaContext())

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["cashBalance"] == 7.5

    def test_post_body_is_decoded(self, handler, portfolio_repo) -> None:
        event = make_event("POST", "/add-cash", sub="abc-123", body={"amount": 100})

        response = handler(event, FakeLambdaContext())

        assert response["statusCode"] == 200
        assert portfolio_repo.get("abc-123").cash_balance == 100

    def test_unsupported_route(self, handler) -> None:
        response = handler(make_event("PUT", "/stocks"), FakeLambdaContext())

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"error": "Unsupported route"}


class TestModuleHandler:
    """Tests for the deployed handler object."""

    def test_handler_is_importable(self) -> None:
        from tradesim.handler import handler

        assert isinstance(handler, Mangum)
