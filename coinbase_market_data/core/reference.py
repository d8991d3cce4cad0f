"""Read-only lookup table of known currencies."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ..models.shared import Currency
from .errors import BadCurrencyError

logger = logging.getLogger(__name__)


class ReferenceSet(Mapping[str, Currency]):
    """Currencies keyed by id, used to resolve product currency tokens.

    Built once from a currencies fetch and never mutated afterwards, so a
    single instance can be shared between threads without locking.
    Lookups are exact: no case folding and no trimming.
    """

    __slots__ = ("_currencies",)

    def __init__(self, currencies: Mapping[str, Currency] | None = None) -> None:
        self._currencies: Mapping[str, Currency] = MappingProxyType(dict(currencies or {}))

    @classmethod
    def build(cls, currencies: Iterable[Currency]) -> ReferenceSet:
        """Index ``currencies`` by id. On duplicate ids the last entry wins."""

        table: dict[str, Currency] = {}
        for currency in currencies:
            if currency.id in table:
                logger.warning("Duplicate currency id %r, keeping the last entry", currency.id)
            table[currency.id] = currency
        return cls(table)

    def lookup(self, currency_id: str) -> Currency | None:
        return self._currencies.get(currency_id)

    def require(self, currency_id: str) -> Currency:
        """Return the currency or raise :class:`BadCurrencyError` naming ``currency_id``."""

        currency = self._currencies.get(currency_id)
        if currency is None:
            raise BadCurrencyError(currency_id)
        return currency

    def __getitem__(self, currency_id: str) -> Currency:
        return self._currencies[currency_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._currencies)

    def __len__(self) -> int:
        return len(self._currencies)

    def __repr__(self) -> str:
        return f"ReferenceSet({sorted(self._currencies)!r})"
