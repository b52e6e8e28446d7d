from .requests import CurrencyPairRequest
from .responses import ErrorResponse, ExchangeRateResponse, ExchangeRatesResponse

__all__ = [
	'CurrencyPairRequest',
	'ErrorResponse',
	'ExchangeRateResponse',
	'ExchangeRatesResponse',
]
