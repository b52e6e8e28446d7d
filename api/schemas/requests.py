from pydantic import BaseModel, Field


class CurrencyPairRequest(BaseModel):
	# Emptiness is checked by the service so it maps to INVALID_ARGUMENT, not 422.
	from_currency: str = Field(default='', description='Source currency code')
	to_currency: str = Field(default='', description='Target currency code')

	class ConfigDict:
		json_schema_extra = {'example': {'from_currency': 'USD', 'to_currency': 'RUB'}}
