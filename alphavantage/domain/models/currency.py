from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Currency:
	name: str
	code: str  # ISO 4217 or a cryptocurrency ticker


@dataclass(frozen=True)
class ExchangeRate:
	from_currency: Currency
	to_currency: Currency
	rate: float
	date: datetime  # always UTC
	bid_price: float | None = None
	ask_price: float | None = None
