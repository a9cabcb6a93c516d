from dataclasses import dataclass

DEFAULT_BASE_URL = 'https://www.alphavantage.co/query'


@dataclass(frozen=True)
class APIRequest:
	url: str
	params: tuple[tuple[str, str], ...]

	def get(self, name: str) -> str | None:
		for key, value in self.params:
			if key == name:
				return value
		return None


class APIRequestBuilder:
	"""Addresses requests to the single Alpha Vantage query endpoint."""

	def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL):
		self.api_key = api_key
		self.base_url = base_url

	def create(self, function: str, params: list[tuple[str, str]] | None = None) -> APIRequest:
		query = [('function', function)]
		query.extend(params or [])
		query.append(('apikey', self.api_key))
		return APIRequest(url=self.base_url, params=tuple(query))
