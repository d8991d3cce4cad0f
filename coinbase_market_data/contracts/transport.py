"""Protocol describing the HTTP transport used by the client."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Performs one blocking HTTP GET and returns the raw response body."""

    def get(self, url: str, user_agent: str) -> str:
        """Fetch ``url`` identifying as ``user_agent``.

        Implementations raise :class:`~coinbase_market_data.core.errors.TransportError`
        subclasses on failure and never retry.
        """

    def close(self) -> None:
        """Release any pooled connections."""
