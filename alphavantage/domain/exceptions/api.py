from collections.abc import Mapping
from typing import Any


class AlphaVantageError(Exception):
	pass


class TransportError(AlphaVantageError):
	pass


class ServerError(AlphaVantageError):
	def __init__(self, status_code: int):
		self.status_code = status_code
		super().__init__(f'Alpha Vantage returned HTTP {status_code}')


class DeserializationError(AlphaVantageError):
	pass


class ApiError(DeserializationError):
	"""Upstream answered 200 with an error document instead of data."""

	def __init__(self, message: str, payload: Mapping[str, Any] | None = None):
		self.message = message
		self.payload = payload
		super().__init__(message)


class ThrottleError(ApiError):
	pass


class ValidationError(AlphaVantageError):
	pass
