"""
Domain-specific errors for the trading bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class TradingDomainError(Exception):
    """Base error for all trading domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidRequestError(TradingDomainError):
    """Raised when a request body fails validation for its route."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StockNotFoundError(TradingDomainError):
    """Raised when a ticker is not present in the stock catalog."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Stock not found: {symbol}")
        self.symbol = symbol


class PortfolioNotFoundError(TradingDomainError):
    """Raised when a user has no portfolio yet."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Portfolio not found: {user_id}")
        self.user_id = user_id


class InsufficientFundsError(TradingDomainError):
    """Raised when the portfolio lacks cash for a purchase."""

    def __init__(self, required: float, available: float) -> None:
        super().__init__(
            f"Insufficient funds: required {required}, available {available}"
        )
        self.required = required
        self.available = available


class InsufficientHoldingsError(TradingDomainError):
    """Raised when a sell asks for more shares than are held."""

    def __init__(self, symbol: str, requested: int, held: int) -> None:
        super().__init__(
            f"Insufficient holdings of {symbol}: requested {requested}, held {held}"
        )
        self.symbol = symbol
        self.requested = requested
        self.held = held


class UnauthorizedError(TradingDomainError):
    """Raised when a protected route is called without an identity claim."""

    def __init__(self) -> None:
        super().__init__("Invalid token: not authorized")
