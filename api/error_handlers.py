import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.exceptions.exchange import ErrorKind, ExchangeError

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
	ErrorKind.INVALID_ARGUMENT: status.HTTP_400_BAD_REQUEST,
	ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
	ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _describe_validation_errors(exc: RequestValidationError) -> str:
	parts = []
	for error in exc.errors():
		location = '.'.join(str(p) for p in error.get('loc', ()) if p != 'body') or 'body'
		parts.append(f"{location}: {error.get('msg', 'invalid value')}")
	return 'invalid request: ' + '; '.join(parts)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ExchangeError)
	async def exchange_error_handler(request: Request, exc: ExchangeError):
		# Already logged where it was raised.
		return JSONResponse(
			status_code=STATUS_BY_KIND[exc.kind],
			content={'detail': str(exc), 'code': exc.kind.value},
		)

	@app.exception_handler(RequestValidationError)
	async def validation_error_handler(request: Request, exc: RequestValidationError):
		detail = _describe_validation_errors(exc)
		logger.warning(f'{request.method} {request.url.path} rejected: {detail}')
		return JSONResponse(
			status_code=STATUS_BY_KIND[ErrorKind.INVALID_ARGUMENT],
			content={'detail': detail, 'code': ErrorKind.INVALID_ARGUMENT.value},
		)

	@app.exception_handler(Exception)
	async def global_exception_handler(request: Request, exc: Exception):
		logger.error(f'Unhandled exception: {exc}', exc_info=True)
		return JSONResponse(status_code=500, content={'detail': 'Internal server error'})
