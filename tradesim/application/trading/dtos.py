"""
Data Transfer Objects for the trading application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class GetPortfolioQuery:
    """Input DTO for reading a portfolio.

    Attributes:
        user_id: Subject id from the caller's identity claim.
    """

    user_id: str


@dataclass(frozen=True)
class ListTransactionsQuery:
    """Input DTO for reading a portfolio's history.

    Attributes:
        user_id: Subject id from the caller's identity claim.
    """

    user_id: str


@dataclass(frozen=True)
class AddCashCommand:
    """Input DTO for depositing cash.

    Attributes:
        user_id: Subject id from the caller's identity claim.
        amount: Positive, finite amount to credit.
    """

    user_id: str
    amount: float


@dataclass(frozen=True)
class TradeCommand:
    """Input DTO for buying or selling shares.

    Attributes:
        user_id: Subject id from the caller's identity claim.
        ticker: Stock symbol to trade.
        quantity: Positive whole number of shares.
    """

    user_id: str
    ticker: str
    quantity: int


@dataclass(frozen=True)
class RefreshPricesResult:
    """Output DTO for a price refresh cycle.

    Attributes:
        scanned: Number of stocks read from the store.
        updated: Number of stale stocks that received a new price.
    """

    scanned: int
    updated: int
