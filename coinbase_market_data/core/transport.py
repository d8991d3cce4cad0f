"""Requests-backed HTTP transport."""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

import requests

from ..contracts.transport import Transport
from .errors import BadStatusError, BadUrlError, TransportInternalError, TransportIOError
from .settings import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

_URL_ERRORS = (
    requests.exceptions.InvalidURL,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.URLRequired,
)


class RequestsTransport(Transport):
    """Requests-backed implementation of :class:`Transport`."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._timeout = timeout

    def get(self, url: str, user_agent: str) -> str:
        _check_url(url)
        logger.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers={"User-Agent": user_agent},
                timeout=self._timeout,
                stream=True,
            )
        except _URL_ERRORS as exc:
            raise BadUrlError(str(exc)) from exc
        except requests.RequestException as exc:
            raise TransportInternalError(str(exc)) from exc

        try:
            if response.encoding is None:
                response.encoding = "utf-8"
            body = response.text
        except (requests.RequestException, OSError) as exc:
            raise TransportIOError(str(exc)) from exc
        finally:
            response.close()

        if not 200 <= response.status_code < 300:
            logger.debug("GET %s returned HTTP %s", url, response.status_code)
            raise BadStatusError(response.status_code, body)
        return body

    def close(self) -> None:
        if self._owns_session:
            self._session.close()


def http_get(url: str, user_agent: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch a single URL with a throwaway session and return the body."""

    transport = RequestsTransport(timeout=timeout)
    try:
        return transport.get(url, user_agent)
    finally:
        transport.close()


def _check_url(url: str) -> None:
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise BadUrlError(f"{url!r}: {exc}") from exc
    if parts.scheme not in ("http", "https"):
        raise BadUrlError(f"{url!r} is not an absolute http(s) URL")
    if not parts.hostname:
        raise BadUrlError(f"{url!r} has no host")
