import httpx

from fixerio.domain.models.config import Config

DEFAULT_BASE_URL = 'http://api.fixer.io'


def build_url(config: Config, base_url: str = DEFAULT_BASE_URL) -> httpx.URL:
	"""Build the request target for ``config``.

	The date is passed through verbatim as the path segment. Symbols keep their
	input order and an empty list still emits ``symbols=``. Malformed input is
	not validated here; httpx.InvalidURL propagates from the URL constructor.
	A date containing ``?`` or ``#`` is not rejected either: everything after a
	``#`` becomes the URL fragment, so the query (``base`` included) is never sent.
	"""
	segment = config.date if config.date is not None else 'latest'
	url = f"{base_url.rstrip('/')}/{segment}?base={config.base.string()}"

	if config.symbols is not None:
		url += '&symbols=' + ','.join(symbol.string() for symbol in config.symbols)

	return httpx.URL(url)
