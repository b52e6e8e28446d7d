from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
	DATABASE_URL: str = ''

	# Postgres connection parts, used when DATABASE_URL is empty
	DB_HOST: str = ''
	DB_PORT: int = 5432
	DB_USERNAME: str = ''
	DB_NAME: str = ''
	DB_PASSWORD: str = ''
	DB_SSLMODE: str = 'disable'

	SQLITE_FALLBACK_URL: str = 'sqlite+aiosqlite:///./exchanger.db'

	# Server
	SERVER_HOST: str = '0.0.0.0'
	SERVER_PORT: int = 8081

	# Rates
	QUOTE_CURRENCY: str = 'RUB'
	QUERY_TIMEOUT_SECONDS: float = 5.0
	RUN_MIGRATIONS: bool = False

	# Application
	APP_NAME: str = 'Currency Exchanger API'
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str = ''

	model_config = SettingsConfigDict(
		env_file=('config.env', '.env'), case_sensitive=False, extra='ignore'
	)

	@property
	def database_url(self) -> str:
		if self.DATABASE_URL:
			return self.DATABASE_URL
		if self.DB_HOST:
			url = URL.create(
				'postgresql+asyncpg',
				username=self.DB_USERNAME or None,
				password=self.DB_PASSWORD or None,
				host=self.DB_HOST,
				port=self.DB_PORT,
				database=self.DB_NAME or None,
				query={'ssl': self.DB_SSLMODE},
			)
			return url.render_as_string(hide_password=False)
		return self.SQLITE_FALLBACK_URL

	@property
	def query_timeout(self) -> float | None:
		return self.QUERY_TIMEOUT_SECONDS if self.QUERY_TIMEOUT_SECONDS > 0 else None


@lru_cache
def get_settings() -> Settings:
	return Settings()
