"""High-level client for the exchange's public market data endpoints."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote, urlencode

import requests

from ..contracts.transport import Transport
from ..models.market import DayStat, HistoricRate, OrderBook, Product, Ticker, Trade
from ..models.shared import BookLevel, Currency
from . import decode, validator
from .queries import CandleWindow, TradesQuery
from .reference import ReferenceSet
from .settings import DEFAULT_TIMEOUT, PRODUCTION_ENDPOINT, ClientSettings
from .transport import RequestsTransport

logger = logging.getLogger(__name__)

CURRENCIES_ENDPOINT = "/currencies"
PRODUCTS_ENDPOINT = "/products"
PRODUCT_ENDPOINT = "/products/{product_id}"
BOOK_ENDPOINT = "/products/{product_id}/book"
TICKER_ENDPOINT = "/products/{product_id}/ticker"
TRADES_ENDPOINT = "/products/{product_id}/trades"
CANDLES_ENDPOINT = "/products/{product_id}/candles"
STATS_ENDPOINT = "/products/{product_id}/stats"


class MarketDataClient:
    """Entry point consumed by SDK/CLI callers.

    Each ``get_*`` call issues exactly one GET, decodes the body into its wire
    shape and resolves it into domain records. Products need the currencies
    fetched beforehand::

        with MarketDataClient(user_agent="my-app/1.0") as client:
            references = client.get_reference_set()
            products = client.get_products(references)
    """

    def __init__(
        self,
        *,
        user_agent: str,
        base_url: str = PRODUCTION_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        transport: Transport | None = None,
    ) -> None:
        if not user_agent or not user_agent.strip():
            raise ValueError("user_agent must be a non-empty string")
        self._user_agent = user_agent
        self._base_url = base_url.rstrip("/")
        self._transport = transport or RequestsTransport(session=session, timeout=timeout)
        self._owns_transport = transport is None

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        *,
        session: requests.Session | None = None,
        transport: Transport | None = None,
    ) -> MarketDataClient:
        return cls(
            user_agent=settings.user_agent,
            base_url=settings.base_url,
            timeout=settings.timeout,
            session=session,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    # Reference data ----------------------------------------------------
    def get_currencies(self) -> list[Currency]:
        """Return every currency listed by the exchange."""

        payload = decode.decode_currencies(self._fetch(CURRENCIES_ENDPOINT))
        return [validator.resolve_currency(entry) for entry in payload]

    def get_reference_set(self) -> ReferenceSet:
        """Fetch currencies and index them for product resolution."""

        references = ReferenceSet.build(self.get_currencies())
        logger.debug("Loaded %d currencies", len(references))
        return references

    # Products ----------------------------------------------------------
    def get_products(self, references: ReferenceSet) -> list[Product]:
        """Return all products, resolving their currencies against ``references``."""

        payload = decode.decode_products(self._fetch(PRODUCTS_ENDPOINT))
        return [validator.resolve_product(entry, references) for entry in payload]

    def get_product(self, product_id: str, references: ReferenceSet) -> Product:
        """Return a single product by its ``BASE-QUOTE`` id."""

        payload = decode.decode_product(self._fetch(self._product_path(PRODUCT_ENDPOINT, product_id)))
        return validator.resolve_product(payload, references)

    # Market data -------------------------------------------------------
    def get_order_book(self, product_id: str, level: BookLevel | int = BookLevel.LEVEL_1) -> OrderBook:
        """Return the order book at the requested verbosity level."""

        level = BookLevel(level)
        body = self._fetch(self._product_path(BOOK_ENDPOINT, product_id), {"level": int(level)})
        return validator.resolve_order_book(decode.decode_order_book(body), level)

    def get_ticker(self, product_id: str) -> Ticker:
        """Return the last trade snapshot for a product."""

        body = self._fetch(self._product_path(TICKER_ENDPOINT, product_id))
        return validator.resolve_ticker(decode.decode_ticker(body))

    def get_trades(self, query: TradesQuery | str) -> Sequence[Trade]:
        """Return recent trades, newest first as served by the exchange."""

        if isinstance(query, str):
            query = TradesQuery(product_id=query)
        body = self._fetch(self._product_path(TRADES_ENDPOINT, query.product_id), query.params())
        return [validator.resolve_trade(entry) for entry in decode.decode_trades(body)]

    def get_historic_rates(self, window: CandleWindow) -> Sequence[HistoricRate]:
        """Return OHLCV candles for the requested window."""

        body = self._fetch(self._product_path(CANDLES_ENDPOINT, window.product_id), window.params())
        return [validator.resolve_historic_rate(entry) for entry in decode.decode_historic_rates(body)]

    def get_day_stats(self, product_id: str) -> DayStat:
        """Return the rolling 24 hour statistics for a product."""

        body = self._fetch(self._product_path(STATS_ENDPOINT, product_id))
        return validator.resolve_day_stat(decode.decode_day_stat(body))

    # Lifecycle ---------------------------------------------------------
    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    def __enter__(self) -> MarketDataClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # Internal ----------------------------------------------------------
    def _product_path(self, template: str, product_id: str) -> str:
        if not product_id:
            raise ValueError("product_id must be a non-empty string")
        return template.format(product_id=quote(product_id, safe=""))

    def _url(self, path: str, params: dict[str, Any] | None = None) -> str:
        url = f"{self._base_url}{path}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _fetch(self, path: str, params: dict[str, Any] | None = None) -> str:
        return self._transport.get(self._url(path, params), self._user_agent)
