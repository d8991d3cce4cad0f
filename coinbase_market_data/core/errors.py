"""Custom exception hierarchy for market data fetching."""

from __future__ import annotations

from typing import Any


class MarketDataError(RuntimeError):
    """Base class for all domain-specific exceptions."""


# Transport ------------------------------------------------------------
class TransportError(MarketDataError):
    """Failures raised while talking HTTP to the exchange."""


class BadUrlError(TransportError):
    """Raised when a request URL is not absolute or cannot be parsed."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Bad URL: {detail}")
        self.detail = detail


class BadStatusError(TransportError):
    """Raised on a non-2xx response. The body is kept verbatim for diagnostics."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body}" if body else f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class TransportIOError(TransportError):
    """Raised when the response body cannot be read."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to read response body: {detail}")
        self.detail = detail


class TransportInternalError(TransportError):
    """Connection, DNS, TLS or timeout failures reported by the HTTP stack."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Request failed: {detail}")
        self.detail = detail


# Decoding -------------------------------------------------------------
class DecodeError(MarketDataError):
    """Raised when a payload is not valid JSON or does not match the wire shape."""


# Validation -----------------------------------------------------------
class ValidationError(MarketDataError):
    """A wire record decoded fine but cannot be resolved into a domain record."""


class BadCurrencyError(ValidationError):
    """A product references a currency missing from the reference set."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown currency {token!r}")
        self.token = token


class BadDecimalError(ValidationError):
    """A numeric field holds something that is not a finite decimal."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Field {field!r} is not a decimal: {value!r}")
        self.field = field
        self.value = value


class MalformedProductIdError(ValidationError):
    """A product id is not of the form ``BASE-QUOTE``."""

    def __init__(self, product_id: str) -> None:
        super().__init__(f"Malformed product id {product_id!r}, expected BASE-QUOTE")
        self.product_id = product_id


class InconsistentProductError(ValidationError):
    """A denormalized product field disagrees with the product id."""

    def __init__(self, field: str, expected: str, actual: str) -> None:
        super().__init__(f"Product field {field!r} is {actual!r} but the id says {expected!r}")
        self.field = field
        self.expected = expected
        self.actual = actual


class MalformedUUIDError(ValidationError):
    """A level 3 order id is not a canonical UUID string."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Malformed order id {value!r}")
        self.value = value


class MalformedTimestampError(ValidationError):
    """A time field is not an ISO-8601 timestamp."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Malformed timestamp {value!r}")
        self.value = value


class BadTradeSideError(ValidationError):
    """A trade side is neither ``buy`` nor ``sell``."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown trade side {value!r}")
        self.value = value


class MalformedOrderError(ValidationError):
    """An order book entry does not match the requested book level."""

    def __init__(self, entry: Any, reason: str) -> None:
        super().__init__(f"Malformed order {entry!r}: {reason}")
        self.entry = entry
        self.reason = reason
