import logging

from domain.exceptions.exchange import (
	ExchangeError,
	InvalidCurrencyError,
	RateNotFoundError,
	StorageError,
)
from domain.models.exchange import ExchangeRatePair, ExchangeRates
from infrastructure.persistence.repositories.base import ExchangeRateStorage

logger = logging.getLogger(__name__)


def _log_context(operation: str, error: Exception, **inputs) -> dict:
	return {'extra_data': {'operation': operation, 'error': str(error), **inputs}}


class ExchangeService:
	"""Answers rate queries from storage and maps storage failures to client-facing errors.

	Failures are logged here, once, with the operation name and request inputs.
	"""

	def __init__(self, storage: ExchangeRateStorage):
		self.storage = storage

	async def get_exchange_rates(self) -> ExchangeRates:
		try:
			return await self.storage.get_all_rates()
		except ExchangeError as e:
			logger.error(
				f'GetExchangeRates failed: {e}',
				extra=_log_context('GetExchangeRates', e),
			)
			raise StorageError(f'failed to get exchange rates: {e}') from e

	async def get_exchange_rate_for_currency(
		self, from_currency: str, to_currency: str
	) -> ExchangeRatePair:
		op = 'GetExchangeRateForCurrency'
		pair = {'from_currency': from_currency, 'to_currency': to_currency}

		if not from_currency or not to_currency:
			error = InvalidCurrencyError('currency fields must not be empty')
			logger.warning(
				f'{op} rejected empty currency: {from_currency!r} -> {to_currency!r}',
				extra=_log_context(op, error, **pair),
			)
			raise error

		try:
			return await self.storage.get_rate_for_currency(from_currency, to_currency)
		except RateNotFoundError as e:
			logger.warning(
				f'{op} {from_currency} -> {to_currency}: {e}',
				extra=_log_context(op, e, **pair),
			)
			raise RateNotFoundError(
				f'currency pair {from_currency} -> {to_currency} not supported'
			) from e
		except ExchangeError as e:
			logger.error(
				f'{op} {from_currency} -> {to_currency} failed: {e}',
				extra=_log_context(op, e, **pair),
			)
			raise StorageError(
				f'failed to get exchange rate {from_currency} -> {to_currency}: {e}'
			) from e
