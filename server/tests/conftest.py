"""
Pytest fixtures for the currency proxy tests.

Provides a controllable clock, a cache that honours absolute expiry times
against that clock, and a mocked requests session.
"""

import json
import pytest
import requests
from unittest import mock

from currency_proxy.config import UpstreamConfig
from currency_proxy.services import ConversionProxy


class FakeClock:
    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ExpiringCache:
    """In-memory stand-in for QuotesCache: get/set(key, value, expires_at)."""

    def __init__(self, clock):
        self.clock = clock
        self.entries = {}
        self.writes = []

    def get(self, key):
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            return None
        return value

    def set(self, key, value, expires_at):
        self.writes.append((key, value, expires_at))
        self.entries[key] = (value, expires_at)


def make_response(status_code=200, body=b'', reason='OK'):
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp._content = body if isinstance(body, bytes) else body.encode('utf-8')
    resp.url = 'https://api.currencylayer.test/live'
    return resp


def json_response(payload, status_code=200, reason='OK'):
    return make_response(status_code, json.dumps(payload), reason)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def quotes_cache(clock):
    return ExpiringCache(clock)


@pytest.fixture
def session():
    """A mocked requests.Session; set `session.get.return_value` or `side_effect`."""
    fake = mock.MagicMock(spec=requests.Session)
    fake.get.return_value = json_response({"success": True, "quotes": {"USDEUR": 0.91}})
    return fake


@pytest.fixture
def upstream_config():
    return UpstreamConfig(
        api_url='https://api.currencylayer.test/live',
        api_token='test-token',
    )


@pytest.fixture
def proxy(upstream_config, quotes_cache, session, clock):
    return ConversionProxy(
        upstream_config,
        cache=quotes_cache,
        session_factory=lambda: session,
        clock=clock,
    )
