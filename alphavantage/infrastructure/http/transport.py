import io
import logging
from typing import IO

import httpx

from alphavantage.domain.exceptions.api import ServerError, TransportError
from alphavantage.monitoring.logger import redact

from .request import APIRequest

logger = logging.getLogger(__name__)


class Transport:
	"""Runs one GET per request through a shared httpx client."""

	def __init__(self, client: httpx.AsyncClient):
		self._client = client

	async def invoke(self, request: APIRequest) -> IO[bytes]:
		function = request.get('function')
		logger.debug(f'GET {request.url} {redact(dict(request.params))}')

		try:
			response = await self._client.get(request.url, params=list(request.params))
		except (httpx.RequestError, httpx.InvalidURL) as e:
			raise TransportError(f'{function} request failed: {e.__class__.__name__}') from e

		if response.status_code != httpx.codes.OK:
			raise ServerError(response.status_code)

		logger.debug(f'{function} answered {response.status_code} with {len(response.content)} bytes')
		return io.BytesIO(response.content)
