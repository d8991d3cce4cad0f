"""Shared domain models used across multiple resources."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum, StrEnum

from .wire import CurrencyWire


class TradeSide(StrEnum):
    """Taker side of a trade as reported by the exchange."""

    BUY = "buy"
    SELL = "sell"


class BookLevel(IntEnum):
    """Order book verbosity levels.

    Levels 1 and 2 aggregate resting orders per price and report how many
    orders sit at that price. Level 3 lists individual orders by id.
    """

    LEVEL_1 = 1
    LEVEL_2 = 2
    LEVEL_3 = 3


class Granularity(IntEnum):
    """Candle widths accepted by the historic rates endpoint, in seconds."""

    MINUTE_1 = 60
    MINUTE_5 = 300
    MINUTE_15 = 900
    HOUR_1 = 3600
    HOUR_6 = 21600
    DAY_1 = 86400


@dataclass(frozen=True, slots=True)
class Currency:
    """A currency listed by the exchange. Identity is the short ``id`` code."""

    id: str
    name: str
    min_size: Decimal

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Currency id must be a non-empty string.")

    def to_wire(self) -> CurrencyWire:
        """Re-encode the currency in its wire layout."""

        return {"id": self.id, "name": self.name, "min_size": format(self.min_size, "f")}
