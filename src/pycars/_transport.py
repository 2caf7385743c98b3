"""JSON-over-HTTP transport for the cars API."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pycars.config import CarsConfig
from pycars.exceptions import CarsNotFoundError, CarsTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Sends one JSON request to the cars API.

    ``request(method, endpoint, payload)`` resolves *endpoint* against the
    configured base URL and returns the decoded JSON body, or ``None`` when
    the body is empty.  Every failure is raised as a
    :class:`~pycars.exceptions.CarsTransportError`.
    """

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        ...


def _decode_body(text: str) -> Any:
    """Decode a JSON body; an empty body decodes to ``None``."""
    if not text.strip():
        return None
    return json.loads(text)


class HttpTransport:
    """aiohttp-backed transport that sends and receives JSON."""

    def __init__(self, config: CarsConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session

    async def request(
        self,
        method: str,
        endpoint: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON response body.

        Raises
        ------
        CarsNotFoundError
            The server answered 404.
        CarsTransportError
            Network failure, any other non-2xx status, or a 2xx body
            that is not JSON.
        """
        url = f"{self._config.base_url}{endpoint}"
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        kwargs: dict[str, Any] = {}
        if payload is not None:
            kwargs["json"] = dict(payload)
        if self._config.request_timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=self._config.request_timeout)

        _logger.debug("%s %s", method, url)

        try:
            async with self._http.request(method, url, headers=headers, **kwargs) as resp:
                status = resp.status
                charset = resp.charset or "utf-8"
                raw = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise CarsTransportError(
                f"{method} {endpoint} failed: {exc or type(exc).__name__}",
                endpoint=endpoint,
            ) from exc

        if not 200 <= status < 300:
            try:
                text = raw.decode(charset, errors="replace")
            except LookupError:
                text = raw.decode("utf-8", errors="replace")
            try:
                body: Any = _decode_body(text)
            except json.JSONDecodeError:
                body = text
            error_cls = CarsNotFoundError if status == 404 else CarsTransportError
            raise error_cls(
                f"HTTP {status} from {method} {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
                body=body,
            )

        try:
            text = raw.decode(charset)
        except (UnicodeDecodeError, LookupError) as exc:
            raise CarsTransportError(
                f"Undecodable {charset} body from {method} {endpoint}",
                status_code=status,
                endpoint=endpoint,
                body=raw,
            ) from exc

        try:
            return _decode_body(text)
        except json.JSONDecodeError as exc:
            raise CarsTransportError(
                f"Invalid JSON from {method} {endpoint}: {text[:200]}",
                status_code=status,
                endpoint=endpoint,
                body=text,
            ) from exc
