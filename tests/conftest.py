"""
Shared test configuration and fixtures.
"""

import json

import httpx
import pytest

from fixerio.config.settings import get_settings
from fixerio.infrastructure.providers.fixerio import AsyncApi

EXCHANGE_PAYLOAD = {
    'base': 'EUR',
    'date': '2000-01-03',
    'rates': {
        'AUD': 1.5346,
        'CAD': 1.4676,
        'GBP': 0.6275,
        'JPY': 102.75,
        'USD': 1.009,
    },
}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def exchange_payload():
    return json.loads(json.dumps(EXCHANGE_PAYLOAD))


@pytest.fixture
def make_client():
    """Build an httpx.AsyncClient whose transport is served by ``handler``"""
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def make_api(make_client):
    def _make(handler, base_url=None):
        return AsyncApi(client=make_client(handler), base_url=base_url)

    return _make
