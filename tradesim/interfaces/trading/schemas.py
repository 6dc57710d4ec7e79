"""
Pydantic schemas for trading API request/response validation.

Each mutating route has its own request variant. A body that fails
validation is reported with the route's own message rather than the
framework's 422 payload. No business logic belongs here.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field, ValidationError

from tradesim.application.trading.add_cash import INVALID_AMOUNT
from tradesim.application.trading.buy_stock import INVALID_TRADE
from tradesim.domain.trading.errors import InvalidRequestError


class RouteRequest(BaseModel):
    """Base for request bodies parsed from an arbitrary JSON payload."""

    invalid_message: ClassVar[str] = "Invalid request"

    @classmethod
    def from_payload(cls, payload: Any) -> "RouteRequest":
        """Validate a decoded JSON body.

        Args:
            payload: Decoded body; anything other than an object counts
                as an empty object.

        Raises:
            InvalidRequestError: With the route's message on any failure.
        """
        data = payload if isinstance(payload, dict) else {}
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise InvalidRequestError(cls.invalid_message) from exc


class AddCashRequest(RouteRequest):
    """Request schema for POST /add-cash.

    Attributes:
        amount: Positive, finite amount to deposit. Numeric strings are accepted.
    """

    invalid_message: ClassVar[str] = INVALID_AMOUNT

    amount: float = Field(..., gt=0, allow_inf_nan=False)


class TradeRequest(RouteRequest):
    """Shared shape of buy and sell bodies.

    Attributes:
        ticker: Stock symbol, non-empty.
        quantity: Positive whole number of shares. ``5``, ``5.0`` and ``"5"``
            are accepted; ``5.5`` is not.
    """

    invalid_message: ClassVar[str] = INVALID_TRADE

    ticker: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)


class BuyRequest(TradeRequest):
    """Request schema for POST /buy."""


class SellRequest(TradeRequest):
    """Request schema for POST /sell."""


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    error: str


class StockItem(BaseModel):
    """A stock in the GET /stocks response."""

    symbol: str
    name: str
    price: float
    changePercent: float
    lastUpdated: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
