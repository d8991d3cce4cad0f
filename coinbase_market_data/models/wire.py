"""Wire layouts of the public REST payloads, prior to validation.

These mirror the JSON exactly: dates and product ids stay strings and
numeric fields keep whatever representation the exchange sent (a string or
a JSON number decoded as ``int``/``Decimal``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import NotRequired, TypeAlias, TypedDict

# Numeric fields arrive either as quoted strings or as plain JSON numbers.
WireNumber: TypeAlias = str | int | Decimal


class CurrencyWire(TypedDict):
    id: str
    name: str
    min_size: WireNumber


class ProductWire(TypedDict):
    id: str
    base_currency: NotRequired[str]
    quote_currency: NotRequired[str]
    base_min_size: WireNumber
    base_max_size: WireNumber
    quote_increment: WireNumber


# ``(price, size, num_orders)`` for levels 1/2, ``(price, size, order_id)`` for level 3
OrderWire: TypeAlias = tuple[WireNumber, WireNumber, int | str]


class OrderBookWire(TypedDict):
    sequence: NotRequired[int]
    bids: list[OrderWire]
    asks: list[OrderWire]


class TickerWire(TypedDict):
    trade_id: int
    price: WireNumber
    size: WireNumber
    time: str


class TradeWire(TypedDict):
    time: str
    trade_id: int
    price: WireNumber
    size: WireNumber
    side: str


# ``(time, low, high, open, close, volume)``; time is epoch seconds or ISO-8601
HistoricRateWire: TypeAlias = tuple[int | str, WireNumber, WireNumber, WireNumber, WireNumber, WireNumber]


class DayStatWire(TypedDict):
    open: WireNumber
    high: WireNumber
    low: WireNumber
    volume: WireNumber
