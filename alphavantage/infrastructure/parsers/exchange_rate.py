import logging
from typing import IO

from pydantic import BaseModel, ConfigDict, Field

from alphavantage.domain.exceptions.api import ValidationError
from alphavantage.domain.models.currency import Currency, ExchangeRate

from .conversions import to_datetime, to_float
from .document import load_document, validate

logger = logging.getLogger(__name__)


class RealtimeExchangeRate(BaseModel):
	model_config = ConfigDict(frozen=True)

	from_code: str = Field(alias='1. From_Currency Code')
	from_name: str = Field(alias='2. From_Currency Name')
	to_code: str = Field(alias='3. To_Currency Code')
	to_name: str = Field(alias='4. To_Currency Name')
	rate: str = Field(alias='5. Exchange Rate')
	last_refreshed: str = Field(alias='6. Last Refreshed')
	time_zone: str = Field(alias='7. Time Zone')
	bid_price: str | None = Field(default=None, alias='8. Bid Price')
	ask_price: str | None = Field(default=None, alias='9. Ask Price')


class ExchangeRateEnvelope(BaseModel):
	data: RealtimeExchangeRate = Field(alias='Realtime Currency Exchange Rate')


def parse(stream: IO[bytes]) -> ExchangeRate:
	envelope = validate(ExchangeRateEnvelope, load_document(stream))
	data = envelope.data

	if data.time_zone != 'UTC':
		raise ValidationError(f'Unsupported time zone: {data.time_zone}')

	rate = to_float(data.rate, 'Exchange rate')
	if rate <= 0:
		raise ValidationError(f'Exchange rate must be positive, got {data.rate!r}')

	exchange_rate = ExchangeRate(
		from_currency=Currency(name=data.from_name, code=data.from_code),
		to_currency=Currency(name=data.to_name, code=data.to_code),
		rate=rate,
		date=to_datetime(data.last_refreshed),
		bid_price=_optional_price(data.bid_price, 'Bid price'),
		ask_price=_optional_price(data.ask_price, 'Ask price'),
	)
	logger.debug(f'Parsed exchange rate {data.from_code}->{data.to_code}: {rate}')
	return exchange_rate


def _optional_price(value: str | None, field: str) -> float | None:
	# Upstream sends '-' when it has no quote
	if value is None or value.strip() in ('', '-'):
		return None
	return to_float(value, field)
