import json
import logging
import re
import sys
import traceback
from datetime import UTC, datetime
from typing import Any

REDACTED = '[REDACTED]'

_APIKEY_QUERY_RE = re.compile(r'(apikey=)([^&\s]+)', re.IGNORECASE)


def redact(value: Any) -> Any:
	"""Strip API keys out of URLs, query strings and parameter mappings."""
	if isinstance(value, dict):
		return {k: REDACTED if 'key' in str(k).lower() else redact(v) for k, v in value.items()}
	if isinstance(value, (list, tuple)):
		return type(value)(redact(v) for v in value)
	if isinstance(value, str):
		return _APIKEY_QUERY_RE.sub(rf'\1{REDACTED}', value)
	return value


class CustomJSONEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, datetime):
			return o.isoformat()
		return super().default(o)


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.now(UTC).isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': redact(record.getMessage()),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		if hasattr(record, 'extra_data'):
			log_entry['data'] = redact(record.extra_data)

		return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


def setup_logging(level: str = 'INFO', json_output: bool = False) -> logging.Logger:
	"""Attach a stdout handler to the ``alphavantage`` logger.

	The library never calls this itself; applications opt in.
	"""
	package_logger = logging.getLogger('alphavantage')
	package_logger.handlers.clear()
	package_logger.setLevel(getattr(logging, level.upper()))

	logging.getLogger('httpx').setLevel(logging.WARNING)

	handler = logging.StreamHandler(sys.stdout)
	if json_output:
		handler.setFormatter(JSONFormatter())
	else:
		console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
		handler.setFormatter(logging.Formatter(console_format, datefmt='%H:%M:%S'))
	package_logger.addHandler(handler)
	return package_logger
