class FixerioError(Exception):
	"""Base class for every failure surfaced by the client."""

	def __init__(self, message: str, cause: BaseException | None = None):
		super().__init__(message)
		self.cause = cause


class TransportError(FixerioError):
	"""The HTTP layer failed: connection, protocol or status error."""

	def __init__(
		self, message: str, cause: BaseException | None = None, status_code: int | None = None
	):
		super().__init__(message, cause)
		self.status_code = status_code


class ParseError(FixerioError):
	"""The response body could not be decoded into an Exchange."""


class SetupError(FixerioError):
	"""The execution context backing the blocking API could not be created."""


class TimerError(FixerioError):
	"""The timeout timer could not be scheduled or fired."""
