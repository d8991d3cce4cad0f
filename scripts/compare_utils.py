"""Shared helpers for manual client-vs-CCXT comparisons."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Callable, Iterable, Sequence

import ccxt  # type: ignore

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from coinbase_market_data.core.client import MarketDataClient
from coinbase_market_data.core.settings import PRODUCTION_ENDPOINT, SANDBOX_ENDPOINT

USER_AGENT = "coinbase-market-data-compare/0.1"


@dataclass(slots=True)
class EndpointCase:
    name: str
    client_factory: Callable[[], MarketDataClient]
    ccxt_factory: Callable[[dict[str, object]], ccxt.Exchange]
    sandbox: bool = False


CASES: Sequence[EndpointCase] = (
    EndpointCase(
        name="production",
        client_factory=lambda: MarketDataClient(user_agent=USER_AGENT, base_url=PRODUCTION_ENDPOINT),
        ccxt_factory=ccxt.coinbaseexchange,
    ),
    EndpointCase(
        name="sandbox",
        client_factory=lambda: MarketDataClient(user_agent=USER_AGENT, base_url=SANDBOX_ENDPOINT),
        ccxt_factory=ccxt.coinbaseexchange,
        sandbox=True,
    ),
)


def iter_cases(targets: Iterable[str] | None = None) -> Iterable[EndpointCase]:
    if not targets:
        yield from CASES
        return
    selected = {t.lower() for t in targets}
    for case in CASES:
        if case.name.lower() in selected:
            yield case


def make_ccxt(case: EndpointCase) -> ccxt.Exchange:
    exchange = case.ccxt_factory({"enableRateLimit": True})
    if case.sandbox:
        exchange.set_sandbox_mode(True)
    return exchange


PRODUCT_ID = "BTC-USD"
CCXT_SYMBOL = "BTC/USD"
