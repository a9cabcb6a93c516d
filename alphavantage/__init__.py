"""
Async client for the Alpha Vantage market-data API.

Supports intraday, daily, weekly and monthly stock time series and the
realtime currency exchange rate, parsed into typed, immutable records.
"""

from .application.client import Client
from .config.settings import Settings, get_settings
from .domain.exceptions.api import (
	AlphaVantageError,
	ApiError,
	DeserializationError,
	ServerError,
	ThrottleError,
	TransportError,
	ValidationError,
)
from .domain.models.currency import Currency, ExchangeRate
from .domain.models.time_series import (
	Daily,
	Function,
	IntraDay,
	IntradayInterval,
	Monthly,
	OutputSize,
	TimeSeries,
	TimeSeriesEntry,
	Weekly,
)
from .monitoring.logger import setup_logging

__all__ = [
	'Client',
	'Settings',
	'get_settings',
	'AlphaVantageError',
	'ApiError',
	'DeserializationError',
	'ServerError',
	'ThrottleError',
	'TransportError',
	'ValidationError',
	'Currency',
	'ExchangeRate',
	'Daily',
	'Function',
	'IntraDay',
	'IntradayInterval',
	'Monthly',
	'OutputSize',
	'TimeSeries',
	'TimeSeriesEntry',
	'Weekly',
	'setup_logging',
]
