"""fixer.io exchange-rate API wrapper.

Synchronous usage::

	from fixerio import Config, Currency, SyncApi

	with SyncApi() as api:
		rates = api.get(Config.new(Currency.USD))

Asynchronous usage::

	async with AsyncApi() as api:
		rates = await api.get_timeout(Config.new(Currency.USD), 5)
"""

import logging

from fixerio.application.services.sync_api import SyncApi
from fixerio.domain.exceptions.fixerio import (
	FixerioError,
	ParseError,
	SetupError,
	TimerError,
	TransportError,
)
from fixerio.domain.models.config import Config
from fixerio.domain.models.currency import Currency
from fixerio.domain.models.exchange import Exchange, Rates
from fixerio.infrastructure.providers.fixerio import AsyncApi
from fixerio.infrastructure.providers.url_builder import build_url

__all__ = [
	'AsyncApi',
	'Config',
	'Currency',
	'Exchange',
	'FixerioError',
	'ParseError',
	'Rates',
	'SetupError',
	'SyncApi',
	'TimerError',
	'TransportError',
	'build_url',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
