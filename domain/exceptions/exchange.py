from enum import Enum


class ErrorKind(Enum):
	INVALID_ARGUMENT = 'INVALID_ARGUMENT'
	NOT_FOUND = 'NOT_FOUND'
	INTERNAL = 'INTERNAL'


class ExchangeError(Exception):
	kind: ErrorKind = ErrorKind.INTERNAL


class InvalidCurrencyError(ExchangeError):
	kind = ErrorKind.INVALID_ARGUMENT


class RateNotFoundError(ExchangeError):
	kind = ErrorKind.NOT_FOUND


class NoRatesError(RateNotFoundError):
	"""The all-rates query succeeded but matched no rows."""


class StorageError(ExchangeError):
	kind = ErrorKind.INTERNAL
