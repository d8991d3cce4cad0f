"""Domain models for market data fetching."""

from .market import (
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
from .shared import BookLevel, Currency, Granularity, TradeSide

__all__ = [
    "BookLevel",
    "Currency",
    "Granularity",
    "TradeSide",
    "DayStat",
    "HistoricRate",
    "Order",
    "OrderBook",
    "OrderDetail",
    "OrderIdentity",
    "OrderSummary",
    "Product",
    "Ticker",
    "Trade",
]
