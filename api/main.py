import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from api.dependencies import cleanup_dependencies, init_dependencies
from api.error_handlers import register_exception_handlers
from api.routes import exchange
from config.settings import get_settings
from infrastructure.monitoring.logger import setup_logging

logger = logging.getLogger(__name__)


settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
	setup_logging(settings.LOG_LEVEL, settings.LOG_DIRECTORY)
	logger.info('Starting Currency Exchanger API...')

	await init_dependencies(settings)
	logger.info('Application ready')

	yield

	logger.info('Shutting down...')
	await cleanup_dependencies()


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.include_router(exchange.router)
register_exception_handlers(app)


def run() -> None:
	logger.info(f'Starting server on {settings.SERVER_HOST}:{settings.SERVER_PORT}')
	uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT, log_level='info')


if __name__ == '__main__':
	run()
