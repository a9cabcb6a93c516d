from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class IntradayInterval(str, Enum):
	ONE_MINUTE = '1min'
	FIVE_MINUTES = '5min'
	FIFTEEN_MINUTES = '15min'
	THIRTY_MINUTES = '30min'
	SIXTY_MINUTES = '60min'

	def __str__(self) -> str:
		return self.value


class OutputSize(str, Enum):
	COMPACT = 'compact'
	FULL = 'full'

	def __str__(self) -> str:
		return self.value


class Function:
	"""Time series query kind.

	Each variant knows its upstream function token, the extra request
	parameters it needs and the key its data is wrapped under in the
	response document.
	"""

	token: str = ''
	envelope_key: str = ''
	has_output_size: bool = False

	def params(self) -> list[tuple[str, str]]:
		return []


@dataclass(frozen=True)
class IntraDay(Function):
	interval: IntradayInterval

	token = 'TIME_SERIES_INTRADAY'
	has_output_size = True

	@property
	def envelope_key(self) -> str:
		return f'Time Series ({self.interval})'

	def params(self) -> list[tuple[str, str]]:
		return [('interval', str(self.interval))]


@dataclass(frozen=True)
class Daily(Function):
	token = 'TIME_SERIES_DAILY'
	envelope_key = 'Time Series (Daily)'
	has_output_size = True


@dataclass(frozen=True)
class Weekly(Function):
	token = 'TIME_SERIES_WEEKLY'
	envelope_key = 'Weekly Time Series'


@dataclass(frozen=True)
class Monthly(Function):
	token = 'TIME_SERIES_MONTHLY'
	envelope_key = 'Monthly Time Series'


@dataclass(frozen=True)
class TimeSeriesEntry:
	timestamp: datetime
	open: float
	high: float
	low: float
	close: float
	volume: int


@dataclass(frozen=True)
class TimeSeries:
	function: Function
	information: str
	symbol: str
	last_refreshed: datetime
	time_zone: str
	entries: tuple[TimeSeriesEntry, ...]  # oldest first
	output_size: str | None = None

	def __len__(self) -> int:
		return len(self.entries)

	def __iter__(self) -> Iterator[TimeSeriesEntry]:
		return iter(self.entries)

	@property
	def latest(self) -> TimeSeriesEntry | None:
		return self.entries[-1] if self.entries else None
