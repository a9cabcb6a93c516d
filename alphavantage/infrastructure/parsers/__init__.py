from . import exchange_rate, time_series
from .conversions import resolve_time_zone, to_date, to_datetime, to_float, to_int, to_timestamp

__all__ = [
	'exchange_rate',
	'time_series',
	'resolve_time_zone',
	'to_date',
	'to_datetime',
	'to_float',
	'to_int',
	'to_timestamp',
]
