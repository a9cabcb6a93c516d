"""
Time series response parsing.

The shape of a time series document depends on the function that was
queried: the metadata block numbers its fields differently and the points
are wrapped under a function specific key.  The parser is therefore always
handed the :class:`Function` used to build the request and picks the
matching wire model from ``METADATA_MODELS`` instead of guessing from the
payload.
"""

import logging
from datetime import datetime, tzinfo
from typing import IO

from pydantic import BaseModel, Field

from alphavantage.domain.exceptions.api import DeserializationError, ValidationError
from alphavantage.domain.models.time_series import (
	Daily,
	Function,
	IntraDay,
	Monthly,
	TimeSeries,
	TimeSeriesEntry,
	Weekly,
)

from .conversions import resolve_time_zone, to_date, to_datetime, to_float, to_int, to_timestamp
from .document import load_document, validate

logger = logging.getLogger(__name__)


class IntradayMetaData(BaseModel):
	information: str = Field(alias='1. Information')
	symbol: str = Field(alias='2. Symbol')
	last_refreshed: str = Field(alias='3. Last Refreshed')
	interval: str = Field(alias='4. Interval')
	output_size: str = Field(alias='5. Output Size')
	time_zone: str = Field(alias='6. Time Zone')


class DailyMetaData(BaseModel):
	information: str = Field(alias='1. Information')
	symbol: str = Field(alias='2. Symbol')
	last_refreshed: str = Field(alias='3. Last Refreshed')
	output_size: str = Field(alias='4. Output Size')
	time_zone: str = Field(alias='5. Time Zone')


class PeriodicMetaData(BaseModel):
	"""Weekly and monthly series carry no output size."""

	information: str = Field(alias='1. Information')
	symbol: str = Field(alias='2. Symbol')
	last_refreshed: str = Field(alias='3. Last Refreshed')
	time_zone: str = Field(alias='4. Time Zone')


class Point(BaseModel):
	open: str = Field(alias='1. open')
	high: str = Field(alias='2. high')
	low: str = Field(alias='3. low')
	close: str = Field(alias='4. close')
	volume: str = Field(alias='5. volume')


class TimeSeriesEnvelope(BaseModel):
	meta_data: dict = Field(alias='Meta Data')


METADATA_MODELS: dict[type[Function], type[BaseModel]] = {
	IntraDay: IntradayMetaData,
	Daily: DailyMetaData,
	Weekly: PeriodicMetaData,
	Monthly: PeriodicMetaData,
}


def parse(function: Function, stream: IO[bytes]) -> TimeSeries:
	document = load_document(stream)
	envelope = validate(TimeSeriesEnvelope, document)
	meta = validate(METADATA_MODELS[type(function)], envelope.meta_data)

	if isinstance(function, IntraDay) and meta.interval != str(function.interval):
		raise ValidationError(
			f'Requested {function.interval} interval but response reports {meta.interval}'
		)

	raw_points = document.get(function.envelope_key)
	if not isinstance(raw_points, dict):
		raise DeserializationError(f'Missing {function.envelope_key!r} in time series response')

	tz = resolve_time_zone(meta.time_zone)
	parse_key = to_datetime if isinstance(function, IntraDay) else to_date

	entries = sorted(
		(_to_entry(key, validate(Point, point), parse_key, tz) for key, point in raw_points.items()),
		key=lambda entry: entry.timestamp,
	)

	logger.debug(f'Parsed {len(entries)} {function.token} entries for {meta.symbol}')
	return TimeSeries(
		function=function,
		information=meta.information,
		symbol=meta.symbol,
		last_refreshed=to_timestamp(meta.last_refreshed, tz),
		time_zone=meta.time_zone,
		entries=tuple(entries),
		output_size=getattr(meta, 'output_size', None),
	)


def _to_entry(key: str, point: Point, parse_key, tz: tzinfo) -> TimeSeriesEntry:
	timestamp: datetime = parse_key(key, tz)
	return TimeSeriesEntry(
		timestamp=timestamp,
		open=to_float(point.open, f'{key} open'),
		high=to_float(point.high, f'{key} high'),
		low=to_float(point.low, f'{key} low'),
		close=to_float(point.close, f'{key} close'),
		volume=to_int(point.volume, f'{key} volume'),
	)
