from typing import Annotated

from fastapi import APIRouter, Depends, status

from api.dependencies import get_exchange_service
from api.schemas import (
	CurrencyPairRequest,
	ErrorResponse,
	ExchangeRateResponse,
	ExchangeRatesResponse,
)
from application.services import ExchangeService

router = APIRouter(prefix='/api/v1', tags=['exchange'])


@router.get(
	'/rates',
	response_model=ExchangeRatesResponse,
	status_code=status.HTTP_200_OK,
	summary='Get all exchange rates',
	responses={500: {'model': ErrorResponse}},
)
async def get_exchange_rates(
	service: Annotated[ExchangeService, Depends(get_exchange_service)],
) -> ExchangeRatesResponse:
	result = await service.get_exchange_rates()
	return ExchangeRatesResponse(rates=result.as_dict())


@router.post(
	'/rate',
	response_model=ExchangeRateResponse,
	status_code=status.HTTP_200_OK,
	summary='Get exchange rate for a currency pair',
	responses={
		400: {'model': ErrorResponse},
		404: {'model': ErrorResponse},
		500: {'model': ErrorResponse},
	},
)
async def get_exchange_rate_for_currency(
	request: CurrencyPairRequest,
	service: Annotated[ExchangeService, Depends(get_exchange_service)],
) -> ExchangeRateResponse:
	result = await service.get_exchange_rate_for_currency(
		from_currency=request.from_currency, to_currency=request.to_currency
	)
	return ExchangeRateResponse(
		from_currency=result.from_currency,
		to_currency=result.to_currency,
		rate=result.rate,
	)
