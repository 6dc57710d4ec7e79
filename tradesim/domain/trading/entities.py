"""
Domain entities for the trading bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.

Field names follow the stored record shape (camelCase keys on the wire
and in the store); attributes are snake_case.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class TransactionType(Enum):
    """Kind of portfolio transaction."""

    ADD_CASH = "add_cash"
    BUY = "buy"
    SELL = "sell"


@dataclass
class Stock:
    """A listed stock with its current simulated price."""

    symbol: str
    name: str
    price: float
    change_percent: float = 0.0
    last_updated: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        """Return the public projection of the stock."""
        return {
            "symbol": self.symbol,
            "name": self.name,
            "price": self.price,
            "changePercent": self.change_percent,
            "lastUpdated": self.last_updated,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Stock":
        return cls(
            symbol=record["symbol"],
            name=record.get("name", ""),
            price=record["price"],
            change_percent=record.get("changePercent", 0.0),
            last_updated=record.get("lastUpdated"),
        )


@dataclass(frozen=True)
class Transaction:
    """An immutable entry in a portfolio's history.

    ``amount`` is set for add_cash entries; ``ticker``, ``quantity``,
    ``price`` and ``total`` are set for buy and sell entries.
    """

    type: TransactionType
    date: str
    amount: Optional[float] = None
    ticker: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None
    total: Optional[float] = None

    def to_record(self) -> dict[str, Any]:
        if self.type is TransactionType.ADD_CASH:
            return {"type": self.type.value, "amount": self.amount, "date": self.date}
        return {
            "type": self.type.value,
            "ticker": self.ticker,
            "quantity": self.quantity,
            "price": self.price,
            "total": self.total,
            "date": self.date,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Transaction":
        return cls(
            type=TransactionType(record["type"]),
            date=record.get("date", ""),
            amount=record.get("amount"),
            ticker=record.get("ticker"),
            quantity=record.get("quantity"),
            price=record.get("price"),
            total=record.get("total"),
        )


@dataclass
class Portfolio:
    """A user's cash balance, holdings and transaction history.

    Holdings map a ticker to a positive share count. A holding that
    reaches zero is removed rather than stored.
    """

    user_id: str
    cash_balance: float = 0.0
    holdings: dict[str, int] = field(default_factory=dict)
    history: list[Transaction] = field(default_factory=list)

    def deposit(self, amount: float, date: str) -> Transaction:
        """Credit cash and record an add_cash transaction."""
        self.cash_balance += amount
        transaction = Transaction(type=TransactionType.ADD_CASH, date=date, amount=amount)
        self.history.append(transaction)
        return transaction

    def can_afford(self, total: float) -> bool:
        return self.cash_balance >= total

    def quantity_of(self, ticker: str) -> int:
        return self.holdings.get(ticker, 0)

    def record_buy(
        self, ticker: str, quantity: int, price: float, date: str
    ) -> Transaction:
        """Debit cash, add shares and record a buy transaction.

        Affordability is checked by the caller.
        """
        total = price * quantity
        self.cash_balance -= total
        self.holdings[ticker] = self.quantity_of(ticker) + quantity
        transaction = Transaction(
            type=TransactionType.BUY,
            date=date,
            ticker=ticker,
            quantity=quantity,
            price=price,
            total=total,
        )
        self.history.append(transaction)
        return transaction

    def record_sell(
        self, ticker: str, quantity: int, price: float, date: str
    ) -> Transaction:
        """Credit proceeds, remove shares and record a sell transaction.

        Holding sufficiency is checked by the caller.
        """
        total = price * quantity
        self.cash_balance += total
        remaining = self.quantity_of(ticker) - quantity
        if remaining == 0:
            self.holdings.pop(ticker, None)
        else:
            self.holdings[ticker] = remaining
        transaction = Transaction(
            type=TransactionType.SELL,
            date=date,
            ticker=ticker,
            quantity=quantity,
            price=price,
            total=total,
        )
        self.history.append(transaction)
        return transaction

    def to_record(self) -> dict[str, Any]:
        return {
            "userId": self.user_id,
            "cashBalance": self.cash_balance,
            "holdings": dict(self.holdings),
            "history": [t.to_record() for t in self.history],
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Portfolio":
        return cls(
            user_id=record["userId"],
            cash_balance=record.get("cashBalance", 0.0),
            holdings=dict(record.get("holdings") or {}),
            history=[Transaction.from_record(r) for r in record.get("history") or []],
        )
