import logging
from typing import Annotated

from fastapi import Depends

from application.services import ExchangeService
from config.settings import Settings, get_settings
from infrastructure.persistence.database import Database
from infrastructure.persistence.repositories.base import ExchangeRateStorage
from infrastructure.persistence.repositories.exchange import SQLExchangeRateStorage

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	db: Database | None = None
	storage: ExchangeRateStorage | None = None


deps = AppDependencies()


async def init_dependencies(settings: Settings | None = None) -> None:
	"""Connect to the database and build the storage. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = settings or get_settings()

	deps.db = Database(settings.database_url)
	await deps.db.ping()

	if settings.RUN_MIGRATIONS:
		await deps.db.create_tables()
		logger.info('Database tables created')

	deps.storage = SQLExchangeRateStorage(
		deps.db.engine,
		quote_currency=settings.QUOTE_CURRENCY,
		query_timeout=settings.query_timeout,
	)
	logger.info(f'Dependencies initialized (quote currency {settings.QUOTE_CURRENCY})')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.db:
		await deps.db.close()
	deps.db = None
	deps.storage = None

	logger.info('Cleanup complete')


def get_storage() -> ExchangeRateStorage:
	if deps.storage is None:
		raise RuntimeError('Storage not initialized')
	return deps.storage


def get_exchange_service(
	storage: Annotated[ExchangeRateStorage, Depends(get_storage)],
) -> ExchangeService:
	return ExchangeService(storage=storage)
