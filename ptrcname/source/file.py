"""
Endpoint source backed by a JSON file
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..context import Context
from ..errors import EndpointFormatError, SourceError
from ..models import Endpoint
from .base import EventHandler, Source


log = logging.getLogger(__name__)


def parse_endpoints(document: Any) -> list[Endpoint]:
    """
    Parse an endpoint document.

    Accepts either a list of endpoint objects or an object with an
    "endpoints" list.
    """
    if isinstance(document, dict):
        document = document.get('endpoints')
    if not isinstance(document, list):
        raise EndpointFormatError("expected a list of endpoints")
    return [Endpoint.from_dict(item) for item in document]


class FileSource(Source):
    """
    Reads endpoints from a JSON file.

    The file is re-read on every call, so each call returns new
    Endpoint objects.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._handlers: list[EventHandler] = []

    def endpoints(self, ctx: Context) -> list[Endpoint]:
        ctx.check()
        try:
            content = self.path.read_text(encoding='utf-8')
        except OSError as e:
            raise SourceError(f"cannot read {self.path}: {e}") from e

        try:
            document = json.loads(content)
        except json.JSONDecodeError as e:
            raise SourceError(f"invalid JSON in {self.path}: {e}") from e

        endpoints = parse_endpoints(document)
        log.debug("Read %d endpoints from %s", len(endpoints), self.path)
        return endpoints

    def add_event_handler(self, ctx: Context, handler: EventHandler):
        log.debug("Adding event handler for file source %s", self.path)
        self._handlers.append(handler)

    def notify(self):
        """Invoke registered handlers, e.g. after the file was rewritten"""
        for handler in list(self._handlers):
            handler()
