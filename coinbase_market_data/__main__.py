"""Command line access to the public market data endpoints.

Example::

    python -m coinbase_market_data --user-agent "my-app/1.0" ticker BTC-USD
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

from .core.client import MarketDataClient
from .core.errors import MarketDataError
from .core.logs import setup_logging
from .core.queries import DEFAULT_LIMIT, CandleWindow, TradesQuery
from .core.settings import SANDBOX_ENDPOINT, ClientSettings, load_config, resolve_endpoint, settings_from_mapping
from .models.shared import BookLevel, Granularity

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="coinbase-market-data",
        description="Fetch public market data from the exchange REST API.",
    )
    parser.add_argument("--config", help="YAML file with user_agent, endpoint, timeout and log_level")
    parser.add_argument("--sandbox", action="store_true", help="use the public sandbox host")
    parser.add_argument("--base-url", help="explicit API base URL (or 'production'/'sandbox')")
    parser.add_argument("--user-agent", help="descriptive User-Agent sent with every request")
    parser.add_argument("--timeout", type=float, help="request timeout in seconds")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("currencies", help="list currencies")
    products = commands.add_parser("products", help="list products, or show one")
    products.add_argument("product_id", nargs="?")

    book = commands.add_parser("book", help="order book")
    book.add_argument("product_id")
    book.add_argument("--level", type=int, choices=[int(level) for level in BookLevel], default=1)

    ticker = commands.add_parser("ticker", help="last trade snapshot")
    ticker.add_argument("product_id")

    trades = commands.add_parser("trades", help="recent trades")
    trades.add_argument("product_id")
    trades.add_argument("--limit", type=int, default=DEFAULT_LIMIT)

    candles = commands.add_parser("candles", help="historic rates (OHLCV)")
    candles.add_argument("product_id")
    candles.add_argument(
        "--granularity",
        type=int,
        choices=[int(value) for value in Granularity],
        default=int(Granularity.HOUR_1),
    )
    candles.add_argument("--start", type=datetime.fromisoformat)
    candles.add_argument("--end", type=datetime.fromisoformat)

    stats = commands.add_parser("stats", help="24 hour statistics")
    stats.add_argument("product_id")
    return parser


def resolve_settings(args: argparse.Namespace) -> tuple[dict[str, Any], ClientSettings]:
    """Merge the optional config file with command line overrides."""

    config: dict[str, Any] = load_config(args.config) if args.config else {}
    if args.sandbox:
        config["endpoint"] = SANDBOX_ENDPOINT
    if args.base_url:
        config["endpoint"] = resolve_endpoint(args.base_url)
    if args.user_agent:
        config["user_agent"] = args.user_agent
    if args.timeout is not None:
        config["timeout"] = args.timeout
    if args.log_level:
        config["log_level"] = args.log_level
    return config, settings_from_mapping(config)


def run(client: MarketDataClient, args: argparse.Namespace) -> Iterable[Any]:
    command = args.command
    if command == "currencies":
        return client.get_currencies()
    if command == "products":
        references = client.get_reference_set()
        if args.product_id:
            return [client.get_product(args.product_id, references)]
        return client.get_products(references)
    if command == "book":
        book = client.get_order_book(args.product_id, args.level)
        return [*(f"bid {order}" for order in book.bids), *(f"ask {order}" for order in book.asks)]
    if command == "ticker":
        return [client.get_ticker(args.product_id)]
    if command == "trades":
        return client.get_trades(TradesQuery(product_id=args.product_id, limit=args.limit))
    if command == "candles":
        window = CandleWindow(
            product_id=args.product_id,
            granularity=Granularity(args.granularity),
            start=args.start,
            end=args.end,
        )
        return client.get_historic_rates(window)
    if command == "stats":
        return [client.get_day_stats(args.product_id)]
    raise ValueError(f"Unknown command {command!r}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config, settings = resolve_settings(args)
        setup_logging(config.get("log_level") or logging.WARNING)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    try:
        with MarketDataClient.from_settings(settings) as client:
            for record in run(client, args):
                print(record)
    except MarketDataError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
