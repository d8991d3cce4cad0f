"""Validated market data records built from the public REST endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import TypeAlias
from uuid import UUID

from .shared import Currency, TradeSide


@dataclass(frozen=True, slots=True)
class Product:
    """A tradable ``BASE-QUOTE`` pair with its size constraints."""

    base: Currency
    quote: Currency
    base_min_size: Decimal
    base_max_size: Decimal
    quote_increment: Decimal

    @property
    def id(self) -> tuple[str, str]:
        """Return the ordered ``(base, quote)`` currency ids."""

        return (self.base.id, self.quote.id)

    @property
    def display_id(self) -> str:
        """Return the exchange product id (e.g., ``BTC-USD``)."""

        return f"{self.base.id}-{self.quote.id}"


@dataclass(frozen=True, slots=True)
class OrderSummary:
    """Aggregated price level (book levels 1 and 2)."""

    num_orders: int


@dataclass(frozen=True, slots=True)
class OrderIdentity:
    """Single resting order (book level 3)."""

    order_id: UUID


OrderDetail: TypeAlias = OrderSummary | OrderIdentity


@dataclass(frozen=True, slots=True)
class Order:
    """One order book entry; ``detail`` depends on the book level."""

    price: Decimal
    size: Decimal
    detail: OrderDetail

    def __post_init__(self) -> None:
        if not isinstance(self.detail, (OrderSummary, OrderIdentity)):
            raise TypeError("Order detail must be an OrderSummary or an OrderIdentity.")

    @property
    def num_orders(self) -> int | None:
        if isinstance(self.detail, OrderSummary):
            return self.detail.num_orders
        return None

    @property
    def id(self) -> UUID | None:
        if isinstance(self.detail, OrderIdentity):
            return self.detail.order_id
        return None


@dataclass(frozen=True, slots=True)
class OrderBook:
    """Bids and asks in exchange priority order (best price first)."""

    bids: tuple[Order, ...]
    asks: tuple[Order, ...]
    sequence: int | None = None


@dataclass(frozen=True, slots=True)
class Ticker:
    """Snapshot of the last trade for a product."""

    trade_id: int
    price: Decimal
    size: Decimal
    time: datetime


@dataclass(frozen=True, slots=True)
class Trade:
    time: datetime
    trade_id: int
    price: Decimal
    size: Decimal
    side: TradeSide


@dataclass(frozen=True, slots=True)
class HistoricRate:
    """One OHLCV candle."""

    time: datetime
    low: Decimal
    high: Decimal
    open: Decimal
    close: Decimal
    volume: Decimal


@dataclass(frozen=True, slots=True)
class DayStat:
    """Rolling 24 hour statistics for a product."""

    open: Decimal
    high: Decimal
    low: Decimal
    volume: Decimal
