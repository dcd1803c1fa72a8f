import asyncio
import logging
from datetime import datetime, timedelta

import httpx
from pydantic import ValidationError

from fixerio.config.settings import get_settings
from fixerio.domain.exceptions.fixerio import ParseError, SetupError, TimerError, TransportError
from fixerio.domain.models.config import Config
from fixerio.domain.models.exchange import Exchange

from .url_builder import build_url

logger = logging.getLogger(__name__)

Duration = int | float | timedelta


class AsyncApi:
	"""Asynchronous API for fixer.io.

	Coroutines run on whichever event loop awaits them. Each call builds its own
	request; no state is shared between calls besides the HTTP client.
	"""

	def __init__(self, client: httpx.AsyncClient | None = None, base_url: str | None = None):
		try:
			settings = get_settings()
		except ValidationError as e:
			logger.error(f'Invalid fixerio settings: {e}')
			raise SetupError(f'Invalid fixerio settings: {e.error_count()} error(s): {e}', e) from e

		self.base_url = (base_url or settings.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(settings.HTTP_TIMEOUT))

	@property
	def name(self) -> str:
		return 'fixerio'

	async def get(self, config: Config) -> Exchange:
		"""Fetch the rates described by ``config``."""
		url = build_url(config, self.base_url)
		start_time = datetime.now()
		body = bytearray()
		logger.debug(f'Requesting {url}')

		try:
			async with self._client.stream('GET', url) as response:
				# The body may arrive in several chunks
				async for chunk in response.aiter_bytes():
					body.extend(chunk)
				response.raise_for_status()

		except httpx.HTTPStatusError as e:
			status_code = e.response.status_code
			logger.error(
				f'fixer.io returned HTTP {status_code} for {url}',
				extra={'extra_data': self._event(url, start_time, success=False, status_code=status_code)},
			)
			raise TransportError(
				f'fixer.io HTTP error {status_code}: {bytes(body[:200]).decode(errors="replace")}',
				e,
				status_code=status_code,
			) from e

		except httpx.HTTPError as e:
			logger.error(
				f'fixer.io request to {url} failed: {e.__class__.__name__}',
				extra={'extra_data': self._event(url, start_time, success=False)},
			)
			raise TransportError(f'fixer.io request failed: {e.__class__.__name__}: {e}', e) from e

		try:
			exchange = Exchange.from_json(bytes(body))
		except ParseError:
			logger.error(
				f'Failed to parse fixer.io response from {url}',
				extra={'extra_data': self._event(url, start_time, success=False, status_code=response.status_code)},
			)
			raise

		logger.debug(
			f'Received {exchange.base} rates for {exchange.date}',
			extra={'extra_data': self._event(url, start_time, success=True, status_code=response.status_code)},
		)
		return exchange

	async def get_timeout(self, config: Config, duration: Duration) -> Exchange | None:
		"""Race the fetch against a timer of ``duration`` seconds (or a timedelta).

		Returns None when the timer fires first. The losing branch is cancelled
		cooperatively; the underlying connection is not guaranteed to close at once.
		"""
		fetch_task = asyncio.ensure_future(self.get(config))
		timer_task = asyncio.ensure_future(self._timer(duration))

		try:
			await asyncio.wait((fetch_task, timer_task), return_when=asyncio.FIRST_COMPLETED)
		except asyncio.CancelledError:
			fetch_task.cancel()
			timer_task.cancel()
			raise

		fetch_won = fetch_task.done()
		for task in (fetch_task, timer_task):
			task.cancel()
		await asyncio.gather(fetch_task, timer_task, return_exceptions=True)

		if fetch_won:
			return fetch_task.result()

		error = timer_task.exception()
		if error is not None:
			raise TimerError(f'Timeout timer failed: {error}', error) from error

		logger.warning(f'Request to fixer.io timed out after {duration}')
		return None

	@staticmethod
	async def _timer(duration: Duration) -> None:
		if isinstance(duration, timedelta):
			seconds = duration.total_seconds()
		else:
			seconds = float(duration)
		if seconds < 0:
			raise ValueError(f'Timeout must not be negative, got {duration!r}')
		await asyncio.sleep(seconds)

	def _event(self, url: httpx.URL, start_time: datetime, success: bool, status_code: int | None = None) -> dict:
		return {
			'provider': self.name,
			'url': str(url),
			'success': success,
			'http_status_code': status_code,
			'response_time_ms': int((datetime.now() - start_time).total_seconds() * 1000),
		}

	async def close(self) -> None:
		await self._client.aclose()

	async def __aenter__(self) -> 'AsyncApi':
		return self

	async def __aexit__(self, *exc_info) -> None:
		await self.close()
