import pytest
from sqlalchemy.exc import OperationalError

from api.dependencies import cleanup_dependencies, deps, get_storage, init_dependencies
from config.settings import Settings
from domain.exceptions.exchange import NoRatesError
from infrastructure.persistence.repositories.exchange import SQLExchangeRateStorage


@pytest.mark.asyncio
async def test_init_dependencies_builds_sql_storage(database_url):
    settings = Settings(
        _env_file=None,
        DATABASE_URL=database_url,
        RUN_MIGRATIONS=True,
        QUOTE_CURRENCY='USD',
        QUERY_TIMEOUT_SECONDS=1,
    )

    await init_dependencies(settings)
    try:
        storage = get_storage()
        assert isinstance(storage, SQLExchangeRateStorage)
        assert storage.quote_currency == 'USD'
        assert storage.query_timeout == 1

        with pytest.raises(NoRatesError):
            await storage.get_all_rates()
    finally:
        await cleanup_dependencies()

    assert deps.db is None
    assert deps.storage is None


@pytest.mark.asyncio
async def test_init_dependencies_fails_when_database_unreachable(tmp_path):
    settings = Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'rates.db'}",
    )

    try:
        with pytest.raises(OperationalError):
            await init_dependencies(settings)
    finally:
        await cleanup_dependencies()
