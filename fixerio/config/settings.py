from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	BASE_URL: str = 'http://api.fixer.io'

	# Transport-level timeout in seconds; None leaves the connection unbounded
	HTTP_TIMEOUT: float | None = None

	LOG_LEVEL: str = 'INFO'

	model_config = SettingsConfigDict(
		env_prefix='FIXERIO_', env_file='.env', case_sensitive=False, extra='ignore'
	)


@lru_cache
def get_settings() -> Settings:
	return Settings()
