import pytest
import pytest_asyncio
from sqlalchemy import insert

from domain.exceptions.exchange import NoRatesError, RateNotFoundError
from domain.models.exchange import ExchangeRatePair, ExchangeRates
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.exchange import ExchangeRateDB
from infrastructure.persistence.repositories.base import ExchangeRateStorage


SEED_ROWS = [
    {'from_currency': 'USD', 'to_currency': 'RUB', 'rate': 90.5},
    {'from_currency': 'EUR', 'to_currency': 'RUB', 'rate': 100.2},
]


class FakeExchangeRateStorage(ExchangeRateStorage):
    """In-memory storage that counts calls and can be told to fail."""

    def __init__(self, rows: list[tuple[str, str, float]] | None = None,
                 quote_currency: str = 'RUB', error: Exception | None = None):
        self.rows = {(f, t): r for f, t, r in (rows or [])}
        self.quote_currency = quote_currency
        self.error = error
        self.calls: list[tuple] = []

    async def get_all_rates(self) -> ExchangeRates:
        self.calls.append(('get_all_rates',))
        if self.error:
            raise self.error
        rates = {f: r for (f, t), r in self.rows.items() if t == self.quote_currency}
        if not rates:
            raise NoRatesError(f'no exchange rates to {self.quote_currency} found')
        return ExchangeRates(quote_currency=self.quote_currency, rates=rates)

    async def get_rate_for_currency(self, from_currency: str, to_currency: str) -> ExchangeRatePair:
        self.calls.append(('get_rate_for_currency', from_currency, to_currency))
        if self.error:
            raise self.error
        try:
            rate = self.rows[(from_currency, to_currency)]
        except KeyError:
            raise RateNotFoundError(f'currency pair {from_currency} -> {to_currency} not found')
        return ExchangeRatePair(from_currency, to_currency, rate)


@pytest.fixture
def fake_storage():
    return FakeExchangeRateStorage(
        rows=[(r['from_currency'], r['to_currency'], r['rate']) for r in SEED_ROWS]
    )


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'rates.db'}"


@pytest_asyncio.fixture
async def database(database_url):
    db = Database(database_url)
    await db.create_tables()
    yield db
    await db.drop_tables()
    await db.close()


@pytest_asyncio.fixture
async def seeded_database(database):
    async with database.engine.begin() as conn:
        await conn.execute(insert(ExchangeRateDB), SEED_ROWS)
    return database


@pytest.fixture
def storage_factory():
    return FakeExchangeRateStorage
