"""
Brief: Shared fixtures and fakes for ptrcname tests.

Inputs:
  - None

Outputs:
  - None
"""

import pytest

from ptrcname.context import Context
from ptrcname.errors import PTRLookupError
from ptrcname.models import Endpoint, RecordType
from ptrcname.source import Source


class FakeSource(Source):
    """
    Brief: Source returning a fixed list, or raising a fixed error.

    Inputs:
      - endpoints: list of Endpoint to return
      - error: exception to raise instead

    Outputs:
      - None
    """

    def __init__(self, endpoints=None, error=None):
        self._endpoints = endpoints or []
        self.error = error
        self.calls = []
        self.handlers = []

    def endpoints(self, ctx):
        self.calls.append(ctx)
        if self.error is not None:
            raise self.error
        return self._endpoints

    def add_event_handler(self, ctx, handler):
        self.handlers.append((ctx, handler))


class FakeResolver:
    """
    Brief: Resolver answering from a dict; missing addresses fail.

    Inputs:
      - answers: mapping of address -> list of names

    Outputs:
      - None
    """

    def __init__(self, answers=None):
        self.answers = answers or {}
        self.lookups = []

    def lookup_addr(self, address):
        self.lookups.append(address)
        if address not in self.answers:
            raise PTRLookupError(address, "no PTR record")
        return self.answers[address]


@pytest.fixture
def ctx():
    return Context()


@pytest.fixture
def make_endpoint():
    def _make(name="svc.example.com", target="203.0.113.9", record_type=RecordType.A, **kwargs):
        return Endpoint(dns_name=name, targets=[target], record_type=record_type, **kwargs)
    return _make
