"""
Simulated price movement.

Pure functions for the random-walk price model and timestamp handling.
No IO; the random source and clock are passed in by callers.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional

STALENESS_WINDOW_SECONDS = 60
MAX_STEP = 0.0025  # +/- 0.25% per refresh

RandomSource = Callable[[], float]


@dataclass(frozen=True)
class PriceMove:
    """Result of one random-walk step."""

    price: float
    change_percent: float


def round2(value: float) -> float:
    """Round to two decimal places."""
    return round(value, 2)


def next_price(price: float, rand: RandomSource) -> PriceMove:
    """Move a price by a uniform step in [-0.25%, +0.25%].

    A zero price stays at zero with a 0.0 change rather than dividing
    by zero.

    Args:
        price: Current price.
        rand: Callable returning a float in [0, 1).

    Returns:
        The rounded new price and the rounded percentage change.
    """
    step = (rand() - 0.5) / 200
    new_price = round2(price * (1 + step))
    if not price:
        return PriceMove(price=new_price, change_percent=0.0)
    change_percent = round2((new_price - price) / price * 100)
    return PriceMove(price=new_price, change_percent=change_percent)


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as an ISO-8601 UTC string with milliseconds and Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """Parse a stored ISO timestamp; naive values are read as UTC.

    Returns None for missing or unparsable values.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_stale(
    last_updated: Optional[str],
    now: datetime,
    window_seconds: float = STALENESS_WINDOW_SECONDS,
) -> bool:
    """Return True when a price was never updated or is older than the window."""
    last = parse_timestamp(last_updated)
    if last is None:
        return True
    return (now - last).total_seconds() >= window_seconds


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
