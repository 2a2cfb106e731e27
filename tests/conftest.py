"""Shared pytest fixtures for the Continent Stats test suite.

Provides:
- db_engine: in-memory SQLite async engine with all tables
- db_session: session bound to an outer transaction that rolls back at teardown
- seeded_session: db_session preloaded with the demo continents
- make_catalog: helper building geography + metrics from compact tuples
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from continent_stats.db.session import Base
import continent_stats.db.tables  # noqa: F401 — register ORM models on Base.metadata
from continent_stats.models.common import MetricKind
from continent_stats.repositories.geography import (
    ContinentRepository,
    CountryRepository,
    RegionRepository,
)
from continent_stats.repositories.metrics import MetricRepository
from scripts.seed import seed_demo


@pytest.fixture
def anyio_backend():
    """SQLAlchemy's async engine (aiosqlite) runs on asyncio only."""
    return "asyncio"


@pytest.fixture
async def db_engine():
    """Create an in-memory SQLite async engine with all tables."""
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
async def db_session(db_engine):
    """Provide a session whose outer transaction is never committed."""
    async with db_engine.connect() as conn:
        trans = await conn.begin()
        session = AsyncSession(bind=conn, expire_on_commit=False)

        yield session

        await session.close()
        await trans.rollback()


@pytest.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """db_session with the demo geography and metrics loaded."""
    await seed_demo(db_session)
    return db_session


@pytest.fixture
def make_catalog(db_session: AsyncSession):
    """Build a catalog from compact tuples.

    continents: [(continent_id, name)]
    regions:    [(region_id, continent_id)]
    countries:  [(country_id, region_id, net_exports, gov_spending, qol)]
    Metric values of None are left without a row.
    """

    async def _make(continents, regions=(), countries=()) -> None:
        continent_repo = ContinentRepository(db_session)
        region_repo = RegionRepository(db_session)
        country_repo = CountryRepository(db_session)
        metric_repo = MetricRepository(db_session)

        for continent_id, name in continents:
            await continent_repo.create(continent_id=continent_id, name=name)
        for region_id, continent_id in regions:
            await region_repo.create(
                region_id=region_id, name=f"Region {region_id}", continent_id=continent_id,
            )
        for country_id, region_id, net_exports, spending, qol in countries:
            await country_repo.create(
                country_id=country_id, name=f"Country {country_id}", region_id=region_id,
            )
            for kind, value in (
                (MetricKind.NET_EXPORTS, net_exports),
                (MetricKind.GOVERNMENT_SPENDING, spending),
                (MetricKind.QUALITY_OF_LIFE, qol),
            ):
                if value is not None:
                    await metric_repo.set_value(kind, country_id, value)

    return _make
