"""
Endpoint source that fetches a JSON document over HTTP
"""

import logging
from typing import Optional

import httpx

from ..context import Context
from ..errors import SourceError
from ..models import Endpoint
from .base import EventHandler, Source
from .file import parse_endpoints


log = logging.getLogger(__name__)


class HTTPSource(Source):
    """
    Fetches endpoints from a URL on every call.

    The response must be a JSON list of endpoints or an object
    with an "endpoints" list.
    """

    def __init__(self, url: str, timeout: float = 5.0,
                 client: Optional[httpx.Client] = None):
        self.url = url
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def _request_timeout(self, ctx: Context) -> float:
        remaining = ctx.remaining()
        if remaining is None:
            return self.timeout
        return min(self.timeout, remaining)

    def endpoints(self, ctx: Context) -> list[Endpoint]:
        ctx.check()
        try:
            response = self._get_client().get(self.url, timeout=self._request_timeout(ctx))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SourceError(f"{self.url} returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise SourceError(f"cannot fetch {self.url}: {e}") from e

        try:
            document = response.json()
        except ValueError as e:
            raise SourceError(f"invalid JSON from {self.url}: {e}") from e

        endpoints = parse_endpoints(document)
        log.debug("Fetched %d endpoints from %s", len(endpoints), self.url)
        return endpoints

    def add_event_handler(self, ctx: Context, handler: EventHandler):
        # No push channel; callers poll
        log.debug("Ignoring event handler for HTTP source %s", self.url)

    def close(self):
        """Close the HTTP client if this source created it"""
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
