from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from alphavantage.infrastructure.http.request import DEFAULT_BASE_URL


class Settings(BaseSettings):
	API_KEY: str = ''
	BASE_URL: str = DEFAULT_BASE_URL

	# Seconds, applied to connect, read, write and pool
	TIMEOUT: float = 10.0

	model_config = SettingsConfigDict(
		env_prefix='ALPHAVANTAGE_', env_file='.env', case_sensitive=False, extra='ignore'
	)


@lru_cache
def get_settings() -> Settings:
	return Settings()
