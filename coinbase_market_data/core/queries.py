"""Query helper objects for the paginated and windowed endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from ..models.shared import Granularity

DEFAULT_LIMIT = 100
TRADES_MAX_LIMIT = 1000


@dataclass(frozen=True, slots=True)
class CandleWindow:
    """Represents a historic rates (OHLCV) query window."""

    product_id: str
    granularity: Granularity = Granularity.HOUR_1
    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        if not self.product_id:
            raise ValueError("product_id must be a non-empty string")
        if (self.start is None) != (self.end is None):
            raise ValueError("start and end must be provided together")
        if self.start and self.end and _as_utc(self.start) >= _as_utc(self.end):
            raise ValueError("start must be earlier than end")

    def params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"granularity": int(self.granularity)}
        if self.start and self.end:
            params["start"] = _as_utc(self.start).isoformat()
            params["end"] = _as_utc(self.end).isoformat()
        return params


@dataclass(frozen=True, slots=True)
class TradesQuery:
    """Represents one page of the trades endpoint.

    ``before`` and ``after`` are trade id cursors as returned by the exchange.
    """

    product_id: str
    limit: int = DEFAULT_LIMIT
    before: int | None = None
    after: int | None = None

    def __post_init__(self) -> None:
        if not self.product_id:
            raise ValueError("product_id must be a non-empty string")
        if not 1 <= self.limit <= TRADES_MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {TRADES_MAX_LIMIT}")

    def params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"limit": self.limit}
        if self.before is not None:
            params["before"] = self.before
        if self.after is not None:
            params["after"] = self.after
        return params


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
