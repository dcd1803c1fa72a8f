from enum import Enum


class Currency(str, Enum):
	AUD = 'AUD'
	BGN = 'BGN'
	BRL = 'BRL'
	CAD = 'CAD'
	CHF = 'CHF'
	CNY = 'CNY'
	CZK = 'CZK'
	DKK = 'DKK'
	EUR = 'EUR'
	GBP = 'GBP'
	HKD = 'HKD'
	HRK = 'HRK'
	HUF = 'HUF'
	IDR = 'IDR'
	ILS = 'ILS'
	INR = 'INR'
	JPY = 'JPY'
	KRW = 'KRW'
	MXN = 'MXN'
	MYR = 'MYR'
	NOK = 'NOK'
	NZD = 'NZD'
	PHP = 'PHP'
	PLN = 'PLN'
	RON = 'RON'
	RUB = 'RUB'
	SEK = 'SEK'
	SGD = 'SGD'
	THB = 'THB'
	TRY = 'TRY'
	USD = 'USD'
	ZAR = 'ZAR'

	def string(self) -> str:
		"""Return the 3-letter code sent over the wire."""
		return self.value

	@property
	def description(self) -> str:
		return _DESCRIPTIONS[self]

	def __str__(self) -> str:
		return self.value


_DESCRIPTIONS: dict[Currency, str] = {
	Currency.AUD: 'Australian dollar',
	Currency.BGN: 'Bulgarian lev',
	Currency.BRL: 'Brazilian real',
	Currency.CAD: 'Canadian dollar',
	Currency.CHF: 'Swiss franc',
	Currency.CNY: 'Chinese yuan',
	Currency.CZK: 'Czech koruna',
	Currency.DKK: 'Danish krone',
	Currency.EUR: 'Euro',
	Currency.GBP: 'Pound sterling',
	Currency.HKD: 'Hong Kong dollar',
	Currency.HRK: 'Croatian kuna',
	Currency.HUF: 'Hungarian forint',
	Currency.IDR: 'Indonesian rupiah',
	Currency.ILS: 'Israeli new shekel',
	Currency.INR: 'Indian rupee',
	Currency.JPY: 'Japanese yen',
	Currency.KRW: 'South Korean won',
	Currency.MXN: 'Mexican peso',
	Currency.MYR: 'Malaysian ringgit',
	Currency.NOK: 'Norwegian krone',
	Currency.NZD: 'New Zealand dollar',
	Currency.PHP: 'Philippine peso',
	Currency.PLN: 'Polish złoty',
	Currency.RON: 'Romanian leu',
	Currency.RUB: 'Russian ruble',
	Currency.SEK: 'Swedish krona',
	Currency.SGD: 'Singapore dollar',
	Currency.THB: 'Thai baht',
	Currency.TRY: 'Turkish lira',
	Currency.USD: 'United States dollar',
	Currency.ZAR: 'South African rand',
}
