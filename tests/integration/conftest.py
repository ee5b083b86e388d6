"""Fixtures for integration tests against PostgreSQL at DATABASE__URL."""

import pytest
import pytest_asyncio
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import create_async_engine

from forum.config import Settings
from forum.persistence.tables import metadata


@pytest_asyncio.fixture(autouse=True)
async def fresh_schema():
    """Recreate every table so each test starts from an empty database."""
    engine = create_async_engine(Settings().database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(metadata.drop_all)
            await conn.run_sync(metadata.create_all)
    except (OSError, DBAPIError) as e:
        await engine.dispose()
        pytest.skip(f"PostgreSQL not reachable: {e}")

    yield

    await engine.dispose()
