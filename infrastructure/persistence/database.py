import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from infrastructure.persistence.models.exchange import Base

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, db_url: str):
        self.engine: AsyncEngine = create_async_engine(db_url, pool_pre_ping=True)

    async def ping(self) -> None:
        """Fail fast when the database is unreachable. No retries."""
        async with self.engine.connect() as conn:
            await conn.execute(text('SELECT 1'))
        logger.info('Database connection established')

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()
