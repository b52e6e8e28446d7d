from pydantic import BaseModel, Field


class ExchangeRatesResponse(BaseModel):
	rates: dict[str, float] = Field(..., description='Rate of each currency in the quote currency')

	class ConfigDict:
		json_schema_extra = {'examples': [{'rates': {'USD': 90.5, 'EUR': 100.2}}]}


class ExchangeRateResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: float = Field(..., ge=0, description='Units of to_currency per one from_currency')

	class ConfigDict:
		json_schema_extra = {
			'example': {
				'from_currency': 'USD',
				'to_currency': 'RUB',
				'rate': 90.5,
			}
		}


class ErrorResponse(BaseModel):
	detail: str
	code: str
