import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from domain.exceptions.exchange import NoRatesError, RateNotFoundError, StorageError
from domain.models.exchange import ExchangeRatePair, ExchangeRates
from infrastructure.persistence.models.exchange import ExchangeRateDB
from infrastructure.persistence.repositories.base import ExchangeRateStorage

logger = logging.getLogger(__name__)

DEFAULT_QUOTE_CURRENCY = 'RUB'

# Failures translated into StorageError. Cancellation is left to propagate.
_LOOKUP_ERRORS = (SQLAlchemyError, TimeoutError, ValueError, TypeError)


def _decode_rate(value) -> float:
	rate = float(value)
	if rate < 0:
		raise ValueError(f'negative rate {rate}')
	return rate


class SQLExchangeRateStorage(ExchangeRateStorage):
	def __init__(
		self,
		engine: AsyncEngine,
		quote_currency: str = DEFAULT_QUOTE_CURRENCY,
		query_timeout: float | None = None,
	):
		self.engine = engine
		self.quote_currency = quote_currency
		self.query_timeout = query_timeout

	async def get_all_rates(self) -> ExchangeRates:
		op = 'storage.get_all_rates'
		stmt = select(ExchangeRateDB.from_currency, ExchangeRateDB.rate).where(
			ExchangeRateDB.to_currency == self.quote_currency
		)

		rates: dict[str, float] = {}
		try:
			async with asyncio.timeout(self.query_timeout):
				async with self.engine.connect() as conn:
					result = await conn.stream(stmt)
					try:
						async for currency, rate in result:
							rates[currency] = _decode_rate(rate)
					finally:
						await result.close()
		except _LOOKUP_ERRORS as e:
			logger.debug('%s: query for rates to %s failed: %r', op, self.quote_currency, e)
			raise StorageError(f'failed to load exchange rates: {e!r}') from e

		if not rates:
			logger.debug('%s: no exchange rates to %s found', op, self.quote_currency)
			raise NoRatesError(f'no exchange rates to {self.quote_currency} found')

		return ExchangeRates(quote_currency=self.quote_currency, rates=rates)

	async def get_rate_for_currency(self, from_currency: str, to_currency: str) -> ExchangeRatePair:
		op = 'storage.get_rate_for_currency'
		stmt = select(ExchangeRateDB.rate).where(
			ExchangeRateDB.from_currency == from_currency,
			ExchangeRateDB.to_currency == to_currency,
		)

		try:
			async with asyncio.timeout(self.query_timeout):
				async with self.engine.connect() as conn:
					result = await conn.execute(stmt)
					row = result.first()
			rate = None if row is None else _decode_rate(row.rate)
		except _LOOKUP_ERRORS as e:
			logger.debug(
				'%s: query for %s -> %s failed: %r', op, from_currency, to_currency, e
			)
			raise StorageError(
				f'failed to load exchange rate {from_currency} -> {to_currency}: {e!r}'
			) from e

		if rate is None:
			logger.debug('%s: no rate found for %s -> %s', op, from_currency, to_currency)
			raise RateNotFoundError(f'currency pair {from_currency} -> {to_currency} not found')

		return ExchangeRatePair(from_currency=from_currency, to_currency=to_currency, rate=rate)
