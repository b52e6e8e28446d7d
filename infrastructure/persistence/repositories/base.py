from abc import ABC, abstractmethod

from domain.models.exchange import ExchangeRatePair, ExchangeRates


class ExchangeRateStorage(ABC):
	"""Read access to stored exchange rates, independent of the database engine."""

	@abstractmethod
	async def get_all_rates(self) -> ExchangeRates:
		"""Return every currency's rate against the fixed quote currency.

		Raises:
			NoRatesError: the store holds no rates for the quote currency.
			StorageError: the lookup failed.
		"""

	@abstractmethod
	async def get_rate_for_currency(self, from_currency: str, to_currency: str) -> ExchangeRatePair:
		"""Return the directed rate for exactly ``from_currency -> to_currency``.

		No inverse or derived rate is ever substituted.

		Raises:
			RateNotFoundError: no row for the pair.
			StorageError: the lookup failed.
		"""
