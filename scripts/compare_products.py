"""Compare currencies and products against CCXT markets."""
from __future__ import annotations

from typing import Iterable

import sys

import ccxt  # type: ignore

from compare_utils import iter_cases, make_ccxt

from coinbase_market_data.core.errors import MarketDataError


def main(targets: Iterable[str] | None = None) -> None:
    for case in iter_cases(targets):
        print(f"\n=== {case.name} products ===")
        client = case.client_factory()
        client_ids: set[str] = set()
        try:
            references = client.get_reference_set()
            print("client", f"currencies={len(references)}")
            products = client.get_products(references)
            client_ids = {product.display_id for product in products}
            print("client", f"products={len(client_ids)}")
        except MarketDataError as exc:
            print(f"client error: {exc}")
        finally:
            client.close()

        exchange = make_ccxt(case)
        try:
            markets = exchange.load_markets()
            ccxt_ids = {market["id"] for market in markets.values()}
            print("ccxt", f"products={len(ccxt_ids)}")
            if client_ids:
                print("only client", sorted(client_ids - ccxt_ids)[:20])
                print("only ccxt", sorted(ccxt_ids - client_ids)[:20])
        except ccxt.BaseError as exc:
            print(f"ccxt error: {exc}")
        finally:
            if hasattr(exchange, "close"):
                exchange.close()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:] or None)
