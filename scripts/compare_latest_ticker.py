"""Compare latest ticker snapshots against CCXT tickers."""
from __future__ import annotations

from typing import Iterable

import sys

import ccxt  # type: ignore

from compare_utils import CCXT_SYMBOL, PRODUCT_ID, iter_cases, make_ccxt

from coinbase_market_data.core.errors import MarketDataError


def main(targets: Iterable[str] | None = None) -> None:
    for case in iter_cases(targets):
        print(f"\n=== {case.name} latest ticker ===")
        client = case.client_factory()
        try:
            ticker = client.get_ticker(PRODUCT_ID)
            print(
                "client",
                f"ts={ticker.time.isoformat()}",
                f"trade_id={ticker.trade_id}",
                f"price={ticker.price}",
                f"size={ticker.size}",
            )
        except MarketDataError as exc:
            print(f"client error: {exc}")
        finally:
            client.close()

        exchange = make_ccxt(case)
        try:
            exchange.load_markets()
            ccxt_ticker = exchange.fetch_ticker(CCXT_SYMBOL)
            print(
                "ccxt",
                f"ts={ccxt_ticker.get('datetime')}",
                f"trade_id={ccxt_ticker.get('info', {}).get('trade_id')}",
                f"price={ccxt_ticker.get('last')}",
                f"size={ccxt_ticker.get('info', {}).get('size')}",
            )
        except ccxt.BaseError as exc:
            print(f"ccxt error: {exc}")
        finally:
            if hasattr(exchange, "close"):
                exchange.close()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
