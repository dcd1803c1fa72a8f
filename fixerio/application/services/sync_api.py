import asyncio
import logging
import threading
from collections.abc import Coroutine
from typing import Any, TypeVar

import httpx

from fixerio.domain.exceptions.fixerio import SetupError
from fixerio.domain.models.config import Config
from fixerio.domain.models.exchange import Exchange
from fixerio.infrastructure.providers.fixerio import AsyncApi, Duration

logger = logging.getLogger(__name__)

T = TypeVar('T')


class SyncApi:
	"""Blocking API driving AsyncApi on a private event loop.

	The loop is created once and reused for every call. A lock serializes
	access to it, so overlapping calls from several threads run one at a time.
	"""

	def __init__(self, client: httpx.AsyncClient | None = None, base_url: str | None = None):
		try:
			self._loop = asyncio.new_event_loop()
		except (OSError, RuntimeError) as e:
			logger.error(f'Failed to create event loop: {e}')
			raise SetupError(f'Failed to create event loop: {e}', e) from e

		self._lock = threading.Lock()
		self._closed = False
		try:
			self.api = AsyncApi(client=client, base_url=base_url)
		except SetupError:
			self._loop.close()
			raise

	def get(self, config: Config) -> Exchange:
		return self._run(self.api.get(config))

	def get_timeout(self, config: Config, duration: Duration) -> Exchange | None:
		return self._run(self.api.get_timeout(config, duration))

	def _run(self, work: Coroutine[Any, Any, T]) -> T:
		with self._lock:
			if self._closed:
				work.close()
				raise SetupError('SyncApi is closed')
			return self._loop.run_until_complete(work)

	def close(self) -> None:
		with self._lock:
			if self._closed:
				return
			self._closed = True
			try:
				self._loop.run_until_complete(self.api.close())
			finally:
				self._loop.close()

	def __enter__(self) -> 'SyncApi':
		return self

	def __exit__(self, *exc_info) -> None:
		self.close()
