from collections.abc import Iterable
from dataclasses import dataclass, replace

from fixerio.domain.models.currency import Currency


@dataclass(frozen=True)
class Config:
	"""Parameters of a single rates request.

	``symbols`` restricts the returned rates (all rates when None) and ``date``
	requests historical rates (latest when None). Setters return a new Config.
	"""

	base: Currency
	symbols: tuple[Currency, ...] | None = None
	date: str | None = None

	def __post_init__(self):
		object.__setattr__(self, 'base', Currency(self.base))
		if self.symbols is not None:
			object.__setattr__(self, 'symbols', tuple(Currency(s) for s in self.symbols))

	@classmethod
	def new(cls, base: Currency) -> 'Config':
		return cls(base=base)

	def set_symbols(self, symbols: Iterable[Currency]) -> 'Config':
		return replace(self, symbols=tuple(symbols))

	def set_date(self, date: str) -> 'Config':
		return replace(self, date=str(date))
