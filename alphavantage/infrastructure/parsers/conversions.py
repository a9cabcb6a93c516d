"""
String coercion shared by the response parsers.

Alpha Vantage encodes every number and timestamp as a JSON string.  The
helpers below turn those strings into Python values and raise
:class:`ValidationError` when a value does not have the expected shape, so
callers can tell a malformed document apart from a well-formed document
carrying bad data.
"""

import math
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from alphavantage.domain.exceptions.api import ValidationError

DATETIME_FORMAT = '%Y-%m-%d %H:%M:%S'
DATE_FORMAT = '%Y-%m-%d'


def to_float(value: str, field: str = 'value') -> float:
	try:
		_reject_digit_separators(value)
		result = float(value.strip())
	except (AttributeError, TypeError, ValueError) as e:
		raise ValidationError(f'{field} is not a number: {value!r}') from e
	if not math.isfinite(result):
		raise ValidationError(f'{field} is not finite: {value!r}')
	return result


def to_int(value: str, field: str = 'value') -> int:
	try:
		_reject_digit_separators(value)
		return int(value.strip())
	except (AttributeError, TypeError, ValueError) as e:
		raise ValidationError(f'{field} is not an integer: {value!r}') from e


def _reject_digit_separators(value: str) -> None:
	# float() and int() accept Python literals such as '1_000'
	if '_' in value:
		raise ValueError('digit separators are not allowed')


def to_datetime(value: str, tz: tzinfo = UTC) -> datetime:
	"""Parse ``YYYY-MM-DD HH:MM:SS`` as a wall-clock time in ``tz``."""
	try:
		naive = datetime.strptime(value, DATETIME_FORMAT)
	except ValueError as e:
		raise ValidationError(f'Invalid date-time {value!r}, expected YYYY-MM-DD HH:MM:SS') from e
	return naive.replace(tzinfo=tz)


def to_date(value: str, tz: tzinfo = UTC) -> datetime:
	"""Parse ``YYYY-MM-DD`` as midnight in ``tz``."""
	try:
		naive = datetime.strptime(value, DATE_FORMAT)
	except ValueError as e:
		raise ValidationError(f'Invalid date {value!r}, expected YYYY-MM-DD') from e
	return naive.replace(tzinfo=tz)


def to_timestamp(value: str, tz: tzinfo = UTC) -> datetime:
	"""Accept either a date-time or a bare date."""
	if len(value) == 10:
		return to_date(value, tz)
	return to_datetime(value, tz)


def resolve_time_zone(name: str) -> tzinfo:
	if name == 'UTC':
		return UTC
	try:
		return ZoneInfo(name)
	except (ZoneInfoNotFoundError, ValueError, OSError) as e:
		raise ValidationError(f'Unsupported time zone: {name}') from e
