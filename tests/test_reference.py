from __future__ import annotations

from decimal import Decimal

import pytest

from coinbase_market_data.core.errors import BadCurrencyError
from coinbase_market_data.core.reference import ReferenceSet
from coinbase_market_data.models.shared import Currency

BTC = Currency("BTC", "Bitcoin", Decimal("0.00000001"))
USD = Currency("USD", "United States Dollar", Decimal("0.01"))


def test_build_indexes_by_id():
    references = ReferenceSet.build([BTC, USD])

    assert len(references) == 2
    assert set(references) == {"BTC", "USD"}
    assert references["USD"] is USD
    assert references.lookup("BTC") is BTC


def test_duplicate_ids_keep_the_last_entry(caplog):
    renamed = Currency("BTC", "Bitcoin (renamed)", Decimal("0.0001"))

    with caplog.at_level("WARNING"):
        references = ReferenceSet.build([BTC, USD, renamed])

    assert len(references) == 2
    assert references["BTC"] == renamed
    assert "Duplicate currency id 'BTC'" in caplog.text


@pytest.mark.parametrize("key", ["btc", "BTC ", " BTC", "XBT", ""])
def test_lookup_is_exact_match(key):
    references = ReferenceSet.build([BTC])

    assert references.lookup(key) is None
    assert key not in references


def test_require_names_the_missing_id():
    references = ReferenceSet.build([BTC])

    with pytest.raises(BadCurrencyError) as excinfo:
        references.require("ETH")

    assert excinfo.value.token == "ETH"
    assert references.require("BTC") is BTC


def test_reference_set_is_read_only():
    source = {"BTC": BTC}
    references = ReferenceSet(source)
    source["USD"] = USD

    assert "USD" not in references
    with pytest.raises(TypeError):
        references["USD"] = USD  # type: ignore[index]
    with pytest.raises(AttributeError):
        references.extra = 1  # type: ignore[attr-defined]


def test_empty_reference_set():
    references = ReferenceSet.build([])

    assert len(references) == 0
    assert references.lookup("BTC") is None
