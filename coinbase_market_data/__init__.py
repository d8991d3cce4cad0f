"""Client for the exchange's public market data REST API.

This module exposes the public API: the client, the currency reference set,
the domain models and the exception hierarchy.
"""

from .contracts.transport import Transport
from .core.client import MarketDataClient
from .core.errors import (
    BadCurrencyError,
    BadDecimalError,
    BadStatusError,
    BadTradeSideError,
    BadUrlError,
    DecodeError,
    InconsistentProductError,
    MalformedOrderError,
    MalformedProductIdError,
    MalformedTimestampError,
    MalformedUUIDError,
    MarketDataError,
    TransportError,
    TransportInternalError,
    TransportIOError,
    ValidationError,
)
from .core.queries import CandleWindow, TradesQuery
from .core.reference import ReferenceSet
from .core.settings import PRODUCTION_ENDPOINT, SANDBOX_ENDPOINT, ClientSettings, load_settings
from .core.transport import RequestsTransport, http_get
from .models.market import (
    DayStat,
    HistoricRate,
    Order,
    OrderBook,
    OrderIdentity,
    OrderSummary,
    Product,
    Ticker,
    Trade,
)
from .models.shared import BookLevel, Currency, Granularity, TradeSide

__all__ = [
    "Transport",
    "MarketDataClient",
    "RequestsTransport",
    "http_get",
    "CandleWindow",
    "TradesQuery",
    "ReferenceSet",
    "ClientSettings",
    "load_settings",
    "PRODUCTION_ENDPOINT",
    "SANDBOX_ENDPOINT",
    "BookLevel",
    "Currency",
    "Granularity",
    "TradeSide",
    "DayStat",
    "HistoricRate",
    "Order",
    "OrderBook",
    "OrderIdentity",
    "OrderSummary",
    "Product",
    "Ticker",
    "Trade",
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
    "BadTradeSideError",
    "InconsistentProductError",
    "MalformedOrderError",
    "MalformedProductIdError",
    "MalformedTimestampError",
    "MalformedUUIDError",
]
