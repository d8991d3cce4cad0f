from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from urllib.parse import parse_qs, urlsplit
from uuid import UUID

import pytest

from coinbase_market_data.core import client as client_module
from coinbase_market_data.core import transport as transport_module
from coinbase_market_data.core.client import MarketDataClient
from coinbase_market_data.core.errors import BadCurrencyError, BadStatusError, DecodeError
from coinbase_market_data.core.queries import CandleWindow, TradesQuery
from coinbase_market_data.core.reference import ReferenceSet
from coinbase_market_data.core.settings import SANDBOX_ENDPOINT, ClientSettings
from coinbase_market_data.models.shared import BookLevel, Granularity, TradeSide
from tests.stubs import RecordingTransport, StubSession

AGENT = "market-data-tests/1.0"
BASE_URL = "https://api.exchange.coinbase.com"

CURRENCIES = [
    {"id": "BTC", "name": "Bitcoin", "min_size": "0.00000001"},
    {"id": "USD", "name": "United States Dollar", "min_size": "0.01"},
]
PRODUCTS = [
    {
        "id": "BTC-USD",
        "base_currency": "BTC",
        "quote_currency": "USD",
        "base_min_size": "0.0001",
        "base_max_size": "280",
        "quote_increment": "0.01",
    }
]


@pytest.fixture()
def session_and_client():
    session = StubSession()
    client = MarketDataClient(user_agent=AGENT, session=session)
    return session, client


def _query(call: dict) -> dict[str, list[str]]:
    return parse_qs(urlsplit(call["url"]).query)


def test_get_currencies(session_and_client):
    session, client = session_and_client
    session.queue(json.dumps(CURRENCIES))

    currencies = client.get_currencies()

    assert [currency.id for currency in currencies] == ["BTC", "USD"]
    assert currencies[0].min_size == Decimal("0.00000001")
    assert session.calls[0]["url"] == BASE_URL + client_module.CURRENCIES_ENDPOINT
    assert session.calls[0]["headers"]["User-Agent"] == AGENT


def test_products_resolve_against_fetched_currencies(session_and_client):
    session, client = session_and_client
    session.queue(json.dumps(CURRENCIES))
    session.queue(json.dumps(PRODUCTS))

    references = client.get_reference_set()
    (product,) = client.get_products(references)

    assert product.id == ("BTC", "USD")
    assert product.base is references["BTC"]
    assert product.base_max_size == Decimal("280")
    assert session.calls[1]["url"] == BASE_URL + client_module.PRODUCTS_ENDPOINT


def test_products_with_stale_reference_set(session_and_client):
    session, client = session_and_client
    session.queue(json.dumps(PRODUCTS))
    stale = ReferenceSet.build([])

    with pytest.raises(BadCurrencyError) as excinfo:
        client.get_products(stale)

    assert excinfo.value.token == "BTC"


def test_get_product_quotes_the_id(session_and_client):
    session, client = session_and_client
    session.queue(json.dumps(PRODUCTS[0]))
    references = ReferenceSet.build([])

    with pytest.raises(BadCurrencyError):
        client.get_product("BTC/USD", references)

    assert session.calls[0]["url"] == f"{BASE_URL}/products/BTC%2FUSD"


def test_get_order_book_level_3(session_and_client):
    session, client = session_and_client
    session.queue(
        json.dumps(
            {
                "sequence": 3,
                "bids": [["295.96", "0.05088265", "3b0f1225-7f84-490b-a29f-0faef9de823a"]],
                "asks": [["295.97", "5.72036512", "da863862-25f4-4868-ac41-005d11ab0a5f"]],
            }
        )
    )

    book = client.get_order_book("BTC-USD", BookLevel.LEVEL_3)

    assert book.bids[0].id == UUID("3b0f1225-7f84-490b-a29f-0faef9de823a")
    assert book.asks[0].price == Decimal("295.97")
    call = session.calls[0]
    assert call["url"].startswith(f"{BASE_URL}/products/BTC-USD/book?")
    assert _query(call) == {"level": ["3"]}


def test_get_order_book_defaults_to_level_1(session_and_client):
    session, client = session_and_client
    session.queue('{"sequence": 1, "bids": [["100", "1", 2]], "asks": [["101", "1", 1]]}')

    book = client.get_order_book("BTC-USD")

    assert book.bids[0].num_orders == 2
    assert _query(session.calls[0]) == {"level": ["1"]}


def test_get_order_book_rejects_unknown_level(session_and_client):
    _, client = session_and_client

    with pytest.raises(ValueError):
        client.get_order_book("BTC-USD", 4)


def test_get_ticker(session_and_client):
    session, client = session_and_client
    session.queue('{"trade_id": 4729088, "price": "333.99", "size": "0.193", "time": "2015-11-14T20:46:03.511254Z"}')

    ticker = client.get_ticker("BTC-USD")

    assert ticker.trade_id == 4729088
    assert session.calls[0]["url"] == f"{BASE_URL}/products/BTC-USD/ticker"


def test_get_trades_with_query(session_and_client):
    session, client = session_and_client
    session.queue(
        json.dumps(
            [{"time": "2014-11-07T22:19:28.578544Z", "trade_id": 74, "price": "10.00", "size": "0.01", "side": "buy"}]
        )
    )

    trades = client.get_trades(TradesQuery(product_id="BTC-USD", limit=5, after=80))

    assert trades[0].side is TradeSide.BUY
    assert _query(session.calls[0]) == {"limit": ["5"], "after": ["80"]}


def test_get_trades_with_product_id(session_and_client):
    session, client = session_and_client
    session.queue("[]")

    assert client.get_trades("ETH-USD") == []
    assert session.calls[0]["url"].startswith(f"{BASE_URL}/products/ETH-USD/trades?")


def test_get_historic_rates(session_and_client):
    session, client = session_and_client
    session.queue("[[1415398768, 0.32, 4.2, 0.35, 4.2, 12.3], [1415398708, 0.31, 4.1, 0.33, 4.0, 11.0]]")
    window = CandleWindow(
        product_id="BTC-USD",
        granularity=Granularity.MINUTE_1,
        start=datetime(2014, 11, 7, 22, 0),
        end=datetime(2014, 11, 7, 23, 0, tzinfo=timezone.utc),
    )

    candles = client.get_historic_rates(window)

    assert [candle.close for candle in candles] == [Decimal("4.2"), Decimal("4.0")]
    assert _query(session.calls[0]) == {
        "granularity": ["60"],
        "start": ["2014-11-07T22:00:00+00:00"],
        "end": ["2014-11-07T23:00:00+00:00"],
    }


def test_get_day_stats(session_and_client):
    session, client = session_and_client
    session.queue('{"open": "34.19", "high": "95.70", "low": "7.06", "volume": "2.41"}')

    stat = client.get_day_stats("BTC-USD")

    assert stat.high == Decimal("95.70")
    assert session.calls[0]["url"] == f"{BASE_URL}/products/BTC-USD/stats"


def test_http_errors_propagate_verbatim(session_and_client):
    session, client = session_and_client
    session.queue('{"message":"NotFound"}', status_code=404)

    with pytest.raises(BadStatusError) as excinfo:
        client.get_ticker("NOPE-USD")

    assert excinfo.value.body == '{"message":"NotFound"}'


def test_bad_json_is_a_decode_error(session_and_client):
    session, client = session_and_client
    session.queue("<html>maintenance</html>")

    with pytest.raises(DecodeError):
        client.get_currencies()


def test_empty_product_id_is_rejected(session_and_client):
    session, client = session_and_client

    with pytest.raises(ValueError):
        client.get_ticker("")

    assert session.calls == []


def test_custom_transport_and_settings():
    transport = RecordingTransport({"/currencies": json.dumps(CURRENCIES)})
    settings = ClientSettings(user_agent=AGENT, base_url=SANDBOX_ENDPOINT + "/")

    with MarketDataClient.from_settings(settings, transport=transport) as client:
        references = client.get_reference_set()

    assert set(references) == {"BTC", "USD"}
    assert transport.requests == [(f"{SANDBOX_ENDPOINT}/currencies", AGENT)]
    assert client.base_url == SANDBOX_ENDPOINT
    # injected transports belong to the caller
    assert not transport.closed


def test_client_closes_owned_transport(monkeypatch):
    session = StubSession()
    monkeypatch.setattr(transport_module.requests, "Session", lambda: session)

    with MarketDataClient(user_agent=AGENT):
        pass

    assert session.closed


@pytest.mark.parametrize("agent", ["", "   "])
def test_user_agent_is_required(agent):
    with pytest.raises(ValueError):
        MarketDataClient(user_agent=agent, transport=RecordingTransport())
