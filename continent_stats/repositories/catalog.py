"""SQL-backed catalog reader composed from the per-table repositories."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from continent_stats.models.common import MetricKind
from continent_stats.models.report import Continent
from continent_stats.repositories.base import AbstractCatalogReader
from continent_stats.repositories.geography import ContinentRepository, CountryRepository
from continent_stats.repositories.metrics import MetricRepository


class SqlCatalogReader(AbstractCatalogReader):
    """Read-only catalog access over a single AsyncSession."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._continents = ContinentRepository(session)
        self._countries = CountryRepository(session)
        self._metrics = MetricRepository(session)

    async def list_continents(self) -> list[Continent]:
        rows = await self._continents.list_all()
        return [Continent(continent_id=r.continent_id, name=r.name) for r in rows]

    async def list_country_ids_by_continent(self, continent_id: int) -> set[int]:
        return await self._countries.list_ids_by_continent(continent_id)

    async def get_metric(self, kind: MetricKind, country_id: int) -> float | None:
        return await self._metrics.get_value(kind, country_id)

    @asynccontextmanager
    async def continent_scope(self) -> AsyncIterator[None]:
        """Run one continent's reads inside a SAVEPOINT.

        A statement error aborts the enclosing transaction on PostgreSQL;
        rolling back to the savepoint keeps the session usable for the
        next continent.
        """
        async with self._session.begin_nested():
            yield
