"""
Asynchronous Alpha Vantage client.

Each public coroutine performs exactly one HTTP request: the request is
built, sent, and the body parsed into a domain object.  Errors from any
stage propagate unchanged; nothing is retried or cached.

Typical usage::

    async with Client(api_key='demo') as av:
        rate = await av.exchange_rate('EUR', 'USD')
        series = await av.intraday('MSFT', IntradayInterval.FIVE_MINUTES)
"""

import httpx

from alphavantage.config.settings import Settings, get_settings
from alphavantage.domain.models.currency import ExchangeRate
from alphavantage.domain.models.time_series import (
	Daily,
	Function,
	IntraDay,
	IntradayInterval,
	Monthly,
	OutputSize,
	TimeSeries,
	Weekly,
)
from alphavantage.infrastructure.http import DEFAULT_BASE_URL, APIRequestBuilder, Transport
from alphavantage.infrastructure.parsers import exchange_rate as exchange_rate_parser
from alphavantage.infrastructure.parsers import time_series as time_series_parser

EXCHANGE_RATE_FUNCTION = 'CURRENCY_EXCHANGE_RATE'


class Client:
	def __init__(
		self,
		api_key: str,
		*,
		client: httpx.AsyncClient | None = None,
		base_url: str = DEFAULT_BASE_URL,
		timeout: float = 10.0,
	):
		self._builder = APIRequestBuilder(api_key, base_url)
		self._owns_client = client is None
		self._client = client or httpx.AsyncClient(
			timeout=httpx.Timeout(timeout), headers={'accept': 'application/json'}
		)
		self._transport = Transport(self._client)

	@classmethod
	def from_settings(
		cls, settings: Settings | None = None, client: httpx.AsyncClient | None = None
	) -> 'Client':
		settings = settings or get_settings()
		return cls(
			settings.API_KEY, client=client, base_url=settings.BASE_URL, timeout=settings.TIMEOUT
		)

	async def intraday(
		self, symbol: str, interval: IntradayInterval, output_size: OutputSize | None = None
	) -> TimeSeries:
		"""Intraday time series for ``symbol``, updated in realtime."""
		return await self.time_series(IntraDay(interval), symbol, output_size)

	async def daily(self, symbol: str, output_size: OutputSize | None = None) -> TimeSeries:
		"""Daily time series for ``symbol``, up to 20 years of history."""
		return await self.time_series(Daily(), symbol, output_size)

	async def weekly(self, symbol: str) -> TimeSeries:
		return await self.time_series(Weekly(), symbol)

	async def monthly(self, symbol: str) -> TimeSeries:
		return await self.time_series(Monthly(), symbol)

	async def time_series(
		self, function: Function, symbol: str, output_size: OutputSize | None = None
	) -> TimeSeries:
		if type(function) not in time_series_parser.METADATA_MODELS:
			raise ValueError(f'Unsupported time series function: {function!r}')

		params = [('symbol', symbol), *function.params()]
		if output_size is not None:
			if not function.has_output_size:
				raise ValueError(f'{function.token} does not accept an output size')
			params.append(('outputsize', str(output_size)))

		body = await self._transport.invoke(self._builder.create(function.token, params))
		return time_series_parser.parse(function, body)

	async def exchange_rate(self, from_currency_code: str, to_currency_code: str) -> ExchangeRate:
		"""Exchange rate between two physical or digital currencies."""
		request = self._builder.create(
			EXCHANGE_RATE_FUNCTION,
			[('from_currency', from_currency_code), ('to_currency', to_currency_code)],
		)
		body = await self._transport.invoke(request)
		return exchange_rate_parser.parse(body)

	async def close(self) -> None:
		"""Close the HTTP client if this instance created it."""
		if self._owns_client:
			await self._client.aclose()

	async def __aenter__(self) -> 'Client':
		return self

	async def __aexit__(self, exc_type, exc, tb) -> None:
		await self.close()
