"""Resolve decoded wire shapes into validated domain records.

Every resolver is a pure function. The only cross-referencing resolver,
:func:`resolve_product`, receives the :class:`ReferenceSet` as an argument.
Order books are resolved fail-fast: the first bad entry (bids before asks)
is raised and no partial book is returned.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any
from uuid import UUID

from ..models.market import (
    DayStat,
    HistoricRate,
    Order,
    OrderBook,
    OrderDetail,
    OrderIdentity,
    OrderSummary,
    Product,
    Ticker,
    Trade,
)
from ..models.shared import BookLevel, Currency, TradeSide
from ..models.wire import (
    CurrencyWire,
    DayStatWire,
    HistoricRateWire,
    OrderBookWire,
    OrderWire,
    ProductWire,
    TickerWire,
    TradeWire,
)
from .errors import (
    BadCurrencyError,
    BadDecimalError,
    BadTradeSideError,
    InconsistentProductError,
    MalformedOrderError,
    MalformedProductIdError,
    MalformedTimestampError,
    MalformedUUIDError,
)
from .reference import ReferenceSet

PRODUCT_ID_SEPARATOR = "-"

_UUID_PATTERN = re.compile(r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_TIMESTAMP_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")
# datetime.fromisoformat stops at microseconds; the exchange may send nanoseconds.
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


# Field parsers --------------------------------------------------------
def parse_decimal(value: Any, field: str) -> Decimal:
    """Parse a string or JSON number into a finite :class:`Decimal`."""

    if isinstance(value, bool):
        raise BadDecimalError(field, value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int) or (isinstance(value, str) and _DECIMAL_PATTERN.fullmatch(value)):
        try:
            result = Decimal(value)
        except InvalidOperation as exc:
            raise BadDecimalError(field, value) from exc
    else:
        raise BadDecimalError(field, value)
    if not result.is_finite():
        raise BadDecimalError(field, value)
    return result


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string or epoch seconds into an aware UTC datetime.

    Naive timestamps are taken to be UTC.
    """

    if isinstance(value, bool):
        raise MalformedTimestampError(value)
    if isinstance(value, int):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise MalformedTimestampError(value) from exc
    if not isinstance(value, str) or not _TIMESTAMP_PREFIX.match(value):
        raise MalformedTimestampError(value)
    try:
        parsed = datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", value))
    except ValueError as exc:
        raise MalformedTimestampError(value) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_uuid(value: str) -> UUID:
    """Parse the canonical 8-4-4-4-12 form only (no braces, urn or bare hex)."""

    if not _UUID_PATTERN.fullmatch(value):
        raise MalformedUUIDError(value)
    try:
        return UUID(value)
    except ValueError as exc:
        raise MalformedUUIDError(value) from exc


def split_product_id(product_id: str) -> tuple[str, str]:
    """Split ``BASE-QUOTE`` into its two non-empty currency tokens."""

    parts = product_id.split(PRODUCT_ID_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise MalformedProductIdError(product_id)
    return parts[0], parts[1]


# Resolvers ------------------------------------------------------------
def resolve_currency(wire: CurrencyWire) -> Currency:
    if not wire["id"]:
        raise BadCurrencyError(wire["id"])
    return Currency(
        id=wire["id"],
        name=wire["name"],
        min_size=parse_decimal(wire["min_size"], "min_size"),
    )


def resolve_product(wire: ProductWire, references: ReferenceSet) -> Product:
    """Resolve a product against previously fetched currencies.

    Raises:
        MalformedProductIdError: ``id`` is not exactly two non-empty tokens.
        InconsistentProductError: ``base_currency``/``quote_currency`` contradict ``id``.
        BadCurrencyError: a token is not in ``references`` (base is checked first).
        BadDecimalError: a size field is not numeric.
    """

    base_id, quote_id = split_product_id(wire["id"])
    for key, expected in (("base_currency", base_id), ("quote_currency", quote_id)):
        actual = wire.get(key)
        if actual is not None and actual != expected:
            raise InconsistentProductError(key, expected, actual)
    return Product(
        base=references.require(base_id),
        quote=references.require(quote_id),
        base_min_size=parse_decimal(wire["base_min_size"], "base_min_size"),
        base_max_size=parse_decimal(wire["base_max_size"], "base_max_size"),
        quote_increment=parse_decimal(wire["quote_increment"], "quote_increment"),
    )


def resolve_order(entry: OrderWire, level: BookLevel | int) -> Order:
    price, size, raw_detail = entry
    detail: OrderDetail
    if BookLevel(level) is BookLevel.LEVEL_3:
        if not isinstance(raw_detail, str):
            raise MalformedOrderError(entry, "level 3 entries carry an order id string")
        detail = OrderIdentity(order_id=parse_uuid(raw_detail))
    else:
        if isinstance(raw_detail, bool) or not isinstance(raw_detail, int) or raw_detail < 0:
            raise MalformedOrderError(entry, "level 1 and 2 entries carry an order count")
        detail = OrderSummary(num_orders=raw_detail)
    return Order(
        price=parse_decimal(price, "price"),
        size=parse_decimal(size, "size"),
        detail=detail,
    )


def resolve_order_book(wire: OrderBookWire, level: BookLevel | int) -> OrderBook:
    bids = tuple(resolve_order(entry, level) for entry in wire["bids"])
    asks = tuple(resolve_order(entry, level) for entry in wire["asks"])
    return OrderBook(bids=bids, asks=asks, sequence=wire.get("sequence"))


def resolve_ticker(wire: TickerWire) -> Ticker:
    return Ticker(
        trade_id=wire["trade_id"],
        price=parse_decimal(wire["price"], "price"),
        size=parse_decimal(wire["size"], "size"),
        time=parse_timestamp(wire["time"]),
    )


def resolve_trade(wire: TradeWire) -> Trade:
    try:
        side = TradeSide(wire["side"])
    except ValueError as exc:
        raise BadTradeSideError(wire["side"]) from exc
    return Trade(
        time=parse_timestamp(wire["time"]),
        trade_id=wire["trade_id"],
        price=parse_decimal(wire["price"], "price"),
        size=parse_decimal(wire["size"], "size"),
        side=side,
    )


def resolve_historic_rate(wire: HistoricRateWire) -> HistoricRate:
    time_value, low, high, open_, close, volume = wire
    return HistoricRate(
        time=parse_timestamp(time_value),
        low=parse_decimal(low, "low"),
        high=parse_decimal(high, "high"),
        open=parse_decimal(open_, "open"),
        close=parse_decimal(close, "close"),
        volume=parse_decimal(volume, "volume"),
    )


def resolve_day_stat(wire: DayStatWire) -> DayStat:
    return DayStat(
        open=parse_decimal(wire["open"], "open"),
        high=parse_decimal(wire["high"], "high"),
        low=parse_decimal(wire["low"], "low"),
        volume=parse_decimal(wire["volume"], "volume"),
    )
