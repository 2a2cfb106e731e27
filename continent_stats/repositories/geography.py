"""Geography repositories: continents, regions, countries.

Repos take AsyncSession, call add()/flush() only — never commit().
The session scope handles commit/rollback (Unit-of-Work).
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from continent_stats.db.tables import ContinentRow, CountryRow, RegionRow


class ContinentRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, continent_id: int, name: str) -> ContinentRow:
        row = ContinentRow(continent_id=continent_id, name=name)
        self._session.add(row)
        await self._session.flush()
        return row

    async def get_by_name(self, name: str) -> ContinentRow | None:
        result = await self._session.execute(
            select(ContinentRow).where(ContinentRow.name == name)
        )
        return result.scalars().first()

    async def list_all(self) -> list[ContinentRow]:
        """All continents, ascending by id."""
        result = await self._session.execute(
            select(ContinentRow).order_by(ContinentRow.continent_id)
        )
        return list(result.scalars().all())


class RegionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, region_id: int, name: str, continent_id: int) -> RegionRow:
        row = RegionRow(region_id=region_id, name=name, continent_id=continent_id)
        self._session.add(row)
        await self._session.flush()
        return row


class CountryRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, *, country_id: int, name: str, region_id: int) -> CountryRow:
        row = CountryRow(country_id=country_id, name=name, region_id=region_id)
        self._session.add(row)
        await self._session.flush()
        return row

    async def list_ids_by_continent(self, continent_id: int) -> set[int]:
        """Country ids linked to the continent through their region."""
        result = await self._session.execute(
            select(CountryRow.country_id)
            .join(RegionRow, CountryRow.region_id == RegionRow.region_id)
            .where(RegionRow.continent_id == continent_id)
        )
        return set(result.scalars().all())
