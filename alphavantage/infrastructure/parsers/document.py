import json
from collections.abc import Mapping
from typing import IO, Any, TypeVar

import pydantic

from alphavantage.domain.exceptions.api import ApiError, DeserializationError, ThrottleError

ModelT = TypeVar('ModelT', bound=pydantic.BaseModel)


def load_document(stream: IO[bytes]) -> dict[str, Any]:
	try:
		document = json.load(stream)
	except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
		raise DeserializationError(f'Response is not valid JSON: {e}') from e

	if not isinstance(document, dict):
		raise DeserializationError(f'Expected a JSON object, got {type(document).__name__}')
	return document


def classify_error_payload(document: Mapping[str, Any]) -> ApiError | None:
	"""
	Alpha Vantage answers bad calls with HTTP 200 and a one-key document:
	- {"Note": "..."} or {"Information": "..."} when throttled
	- {"Error Message": "..."} for an invalid call or symbol
	"""
	note = document.get('Note') or document.get('Information')
	if isinstance(note, str) and note.strip():
		return ThrottleError(note.strip(), payload=document)

	error_message = document.get('Error Message')
	if isinstance(error_message, str) and error_message.strip():
		return ApiError(error_message.strip(), payload=document)

	return None


def validate(model: type[ModelT], document: Any) -> ModelT:
	try:
		return model.model_validate(document)
	except pydantic.ValidationError as e:
		if isinstance(document, Mapping) and (error := classify_error_payload(document)) is not None:
			raise error from e
		raise DeserializationError(f'Unexpected {model.__name__} payload: {e}') from e
