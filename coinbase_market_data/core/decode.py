"""Decode raw JSON bodies into wire shapes.

Decoders only check structure and primitive types; semantic checks such as
currency resolution or timestamp parsing happen in :mod:`.validator`.
Floats are decoded as :class:`~decimal.Decimal` so that numeric literals keep
the exact digits the exchange sent.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

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
from .errors import DecodeError

HISTORIC_RATE_FIELDS = 6
ORDER_FIELDS = 3


def decode_json(text: str) -> Any:
    try:
        return json.loads(text, parse_float=Decimal, parse_constant=Decimal)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"Payload is not valid JSON: {exc}") from exc


def decode_currencies(text: str) -> list[CurrencyWire]:
    payload = _expect_list(decode_json(text), "currencies")
    return [_currency(entry, f"currencies[{index}]") for index, entry in enumerate(payload)]


def decode_currency(text: str) -> CurrencyWire:
    return _currency(decode_json(text), "currency")


def decode_products(text: str) -> list[ProductWire]:
    payload = _expect_list(decode_json(text), "products")
    return [_product(entry, f"products[{index}]") for index, entry in enumerate(payload)]


def decode_product(text: str) -> ProductWire:
    return _product(decode_json(text), "product")


def decode_order_book(text: str) -> OrderBookWire:
    record = _expect_object(decode_json(text), "book")
    book: OrderBookWire = {
        "bids": _orders(record, "bids"),
        "asks": _orders(record, "asks"),
    }
    if record.get("sequence") is not None:
        book["sequence"] = _integer(record["sequence"], "book.sequence")
    return book


def decode_ticker(text: str) -> TickerWire:
    record = _expect_object(decode_json(text), "ticker")
    return {
        "trade_id": _integer(_require(record, "trade_id", "ticker"), "ticker.trade_id"),
        "price": _number(_require(record, "price", "ticker"), "ticker.price"),
        "size": _number(_require(record, "size", "ticker"), "ticker.size"),
        "time": _string(_require(record, "time", "ticker"), "ticker.time"),
    }


def decode_trades(text: str) -> list[TradeWire]:
    payload = _expect_list(decode_json(text), "trades")
    return [_trade(entry, f"trades[{index}]") for index, entry in enumerate(payload)]


def decode_historic_rates(text: str) -> list[HistoricRateWire]:
    payload = _expect_list(decode_json(text), "candles")
    return [_historic_rate(entry, f"candles[{index}]") for index, entry in enumerate(payload)]


def decode_day_stat(text: str) -> DayStatWire:
    record = _expect_object(decode_json(text), "stats")
    return {
        "open": _number(_require(record, "open", "stats"), "stats.open"),
        "high": _number(_require(record, "high", "stats"), "stats.high"),
        "low": _number(_require(record, "low", "stats"), "stats.low"),
        "volume": _number(_require(record, "volume", "stats"), "stats.volume"),
    }


# Per-record helpers ---------------------------------------------------
def _currency(value: Any, where: str) -> CurrencyWire:
    record = _expect_object(value, where)
    return {
        "id": _string(_require(record, "id", where), f"{where}.id"),
        "name": _string(_require(record, "name", where), f"{where}.name"),
        "min_size": _number(_require(record, "min_size", where), f"{where}.min_size"),
    }


def _product(value: Any, where: str) -> ProductWire:
    record = _expect_object(value, where)
    product: ProductWire = {
        "id": _string(_require(record, "id", where), f"{where}.id"),
        "base_min_size": _number(_require(record, "base_min_size", where), f"{where}.base_min_size"),
        "base_max_size": _number(_require(record, "base_max_size", where), f"{where}.base_max_size"),
        "quote_increment": _number(_require(record, "quote_increment", where), f"{where}.quote_increment"),
    }
    for key in ("base_currency", "quote_currency"):
        if record.get(key) is not None:
            product[key] = _string(record[key], f"{where}.{key}")
    return product


def _orders(record: dict[str, Any], side: str) -> list[OrderWire]:
    entries = _expect_list(_require(record, side, "book"), f"book.{side}")
    orders: list[OrderWire] = []
    for index, entry in enumerate(entries):
        where = f"book.{side}[{index}]"
        if not isinstance(entry, list) or len(entry) != ORDER_FIELDS:
            raise DecodeError(f"{where} must be a [price, size, count_or_id] array")
        price, size, detail = entry
        if isinstance(detail, bool) or not isinstance(detail, (int, str)):
            raise DecodeError(f"{where}[2] must be an integer or a string")
        orders.append((_number(price, f"{where}[0]"), _number(size, f"{where}[1]"), detail))
    return orders


def _trade(value: Any, where: str) -> TradeWire:
    record = _expect_object(value, where)
    return {
        "time": _string(_require(record, "time", where), f"{where}.time"),
        "trade_id": _integer(_require(record, "trade_id", where), f"{where}.trade_id"),
        "price": _number(_require(record, "price", where), f"{where}.price"),
        "size": _number(_require(record, "size", where), f"{where}.size"),
        "side": _string(_require(record, "side", where), f"{where}.side"),
    }


def _historic_rate(value: Any, where: str) -> HistoricRateWire:
    if not isinstance(value, list) or len(value) != HISTORIC_RATE_FIELDS:
        raise DecodeError(f"{where} must be a [time, low, high, open, close, volume] array")
    time_value = value[0]
    if isinstance(time_value, bool) or not isinstance(time_value, (int, str)):
        raise DecodeError(f"{where}[0] must be epoch seconds or an ISO-8601 string")
    low, high, open_, close, volume = (
        _number(item, f"{where}[{index}]") for index, item in enumerate(value[1:], start=1)
    )
    return (time_value, low, high, open_, close, volume)


# Primitive checks -----------------------------------------------------
def _expect_object(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"{where} must be a JSON object, got {type(value).__name__}")
    return value


def _expect_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise DecodeError(f"{where} must be a JSON array, got {type(value).__name__}")
    return value


def _require(record: dict[str, Any], key: str, where: str) -> Any:
    try:
        return record[key]
    except KeyError as exc:
        raise DecodeError(f"{where} is missing field {key!r}") from exc


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"{where} must be a string, got {type(value).__name__}")
    return value


def _integer(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{where} must be an integer, got {type(value).__name__}")
    return value


def _number(value: Any, where: str) -> str | int | Decimal:
    if isinstance(value, bool) or not isinstance(value, (str, int, Decimal)):
        raise DecodeError(f"{where} must be a number or a numeric string, got {type(value).__name__}")
    return value
