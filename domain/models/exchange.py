from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class ExchangeRatePair:
	from_currency: str
	to_currency: str
	rate: float

	def __post_init__(self) -> None:
		if not self.from_currency or not self.to_currency:
			raise ValueError('currency codes must not be empty')
		if self.rate < 0:
			raise ValueError(f'rate must be non-negative, got {self.rate}')


@dataclass(frozen=True)
class ExchangeRates:
	"""Rates of every known currency expressed in one quote currency."""

	quote_currency: str
	rates: Mapping[str, float]

	def __post_init__(self) -> None:
		if not self.rates:
			raise ValueError('exchange rate set must not be empty')
		object.__setattr__(self, 'rates', MappingProxyType(dict(self.rates)))

	def as_dict(self) -> dict[str, float]:
		return dict(self.rates)
