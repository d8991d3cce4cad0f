"""Core utilities for market data fetching."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "MarketDataClient",
    "CandleWindow",
    "TradesQuery",
    "ReferenceSet",
    "RequestsTransport",
    "http_get",
    "ClientSettings",
    "load_settings",
    "MarketDataError",
    "TransportError",
    "BadUrlError",
    "BadStatusError",
    "TransportIOError",
    "TransportInternalError",
    "DecodeError",
    "ValidationError",
    "BadCurrencyError",
    "BadDecimalError",
    "MalformedProductIdError",
    "MalformedUUIDError",
    "MalformedTimestampError",
]

_lazy_targets = {
    "MarketDataClient": ("client", "MarketDataClient"),
    "CandleWindow": ("queries", "CandleWindow"),
    "TradesQuery": ("queries", "TradesQuery"),
    "ReferenceSet": ("reference", "ReferenceSet"),
    "RequestsTransport": ("transport", "RequestsTransport"),
    "http_get": ("transport", "http_get"),
    "ClientSettings": ("settings", "ClientSettings"),
    "load_settings": ("settings", "load_settings"),
    "MarketDataError": ("errors", "MarketDataError"),
    "TransportError": ("errors", "TransportError"),
    "BadUrlError": ("errors", "BadUrlError"),
    "BadStatusError": ("errors", "BadStatusError"),
    "TransportIOError": ("errors", "TransportIOError"),
    "TransportInternalError": ("errors", "TransportInternalError"),
    "DecodeError": ("errors", "DecodeError"),
    "ValidationError": ("errors", "ValidationError"),
    "BadCurrencyError": ("errors", "BadCurrencyError"),
    "BadDecimalError": ("errors", "BadDecimalError"),
    "MalformedProductIdError": ("errors", "MalformedProductIdError"),
    "MalformedUUIDError": ("errors", "MalformedUUIDError"),
    "MalformedTimestampError": ("errors", "MalformedTimestampError"),
}


def __getattr__(name: str) -> Any:
    try:
        module_name, attr_name = _lazy_targets[name]
    except KeyError as exc:  # pragma: no cover - defensive
        raise AttributeError(f"module 'coinbase_market_data.core' has no attribute {name!r}") from exc
    module = import_module(f"{__name__}.{module_name}")
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
