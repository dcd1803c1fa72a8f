from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fixerio.domain.exceptions.fixerio import ParseError
from fixerio.domain.models.currency import Currency


class Rates(BaseModel):
	"""Exchange rates for the base currency. Codes missing from the payload default to 0.0"""

	model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore', strict=True)

	aud: float = Field(0.0, alias='AUD')
	bgn: float = Field(0.0, alias='BGN')
	brl: float = Field(0.0, alias='BRL')
	cad: float = Field(0.0, alias='CAD')
	chf: float = Field(0.0, alias='CHF')
	cny: float = Field(0.0, alias='CNY')
	czk: float = Field(0.0, alias='CZK')
	dkk: float = Field(0.0, alias='DKK')
	eur: float = Field(0.0, alias='EUR')
	gbp: float = Field(0.0, alias='GBP')
	hkd: float = Field(0.0, alias='HKD')
	hrk: float = Field(0.0, alias='HRK')
	huf: float = Field(0.0, alias='HUF')
	idr: float = Field(0.0, alias='IDR')
	ils: float = Field(0.0, alias='ILS')
	inr: float = Field(0.0, alias='INR')
	jpy: float = Field(0.0, alias='JPY')
	krw: float = Field(0.0, alias='KRW')
	mxn: float = Field(0.0, alias='MXN')
	myr: float = Field(0.0, alias='MYR')
	nok: float = Field(0.0, alias='NOK')
	nzd: float = Field(0.0, alias='NZD')
	php: float = Field(0.0, alias='PHP')
	pln: float = Field(0.0, alias='PLN')
	ron: float = Field(0.0, alias='RON')
	rub: float = Field(0.0, alias='RUB')
	sek: float = Field(0.0, alias='SEK')
	sgd: float = Field(0.0, alias='SGD')
	thb: float = Field(0.0, alias='THB')
	try_: float = Field(0.0, alias='TRY')
	usd: float = Field(0.0, alias='USD')
	zar: float = Field(0.0, alias='ZAR')

	def get(self, currency: Currency | str, default: float = 0.0) -> float:
		field_name = _FIELD_BY_CODE.get(str(currency).upper())
		if field_name is None:
			return default
		return getattr(self, field_name)

	def __getitem__(self, currency: Currency | str) -> float:
		field_name = _FIELD_BY_CODE.get(str(currency).upper())
		if field_name is None:
			raise KeyError(currency)
		return getattr(self, field_name)

	def as_dict(self) -> dict[str, float]:
		return self.model_dump(by_alias=True)


_FIELD_BY_CODE: dict[str, str] = {info.alias: name for name, info in Rates.model_fields.items()}


class Exchange(BaseModel):
	"""The response from fixer.io"""

	model_config = ConfigDict(frozen=True)

	base: str = Field(..., description='Base currency echoed by the server')
	date: str = Field(..., description='Date the rates apply to')
	rates: Rates = Field(..., description='Rates relative to the base currency')

	@classmethod
	def from_json(cls, payload: bytes | str) -> 'Exchange':
		try:
			return cls.model_validate_json(payload)
		except ValidationError as e:
			raise ParseError(f'Failed to decode exchange response: {e.error_count()} error(s): {e}', e) from e
