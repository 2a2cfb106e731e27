"""Tests for the seed script — verifies sample data can be loaded into DB."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from scripts.seed import SAMPLE_CONTINENTS, seed_demo
from continent_stats.models.common import MetricKind
from continent_stats.repositories.geography import ContinentRepository, CountryRepository
from continent_stats.repositories.metrics import MetricRepository


class TestSeedDemo:
    @pytest.mark.anyio
    async def test_creates_continents(self, db_session: AsyncSession) -> None:
        result = await seed_demo(db_session)
        assert result["created"] is True
        assert result["continent_count"] == len(SAMPLE_CONTINENTS)

        rows = await ContinentRepository(db_session).list_all()
        assert [r.name for r in rows] == ["Europa", "Noland", "Mixed", "Oceania"]

    @pytest.mark.anyio
    async def test_metric_rows_are_sparse(self, db_session: AsyncSession) -> None:
        result = await seed_demo(db_session)
        assert result["metric_row_count"] == 18

        repo = MetricRepository(db_session)
        assert await repo.get_value(MetricKind.GOVERNMENT_SPENDING, 101) is None
        assert await repo.get_value(MetricKind.QUALITY_OF_LIFE, 100) == 90.0

    @pytest.mark.anyio
    async def test_oceania_has_no_countries(self, db_session: AsyncSession) -> None:
        await seed_demo(db_session)
        oceania = await ContinentRepository(db_session).get_by_name("Oceania")
        ids = await CountryRepository(db_session).list_ids_by_continent(oceania.continent_id)
        assert ids == set()

    @pytest.mark.anyio
    async def test_idempotent(self, db_session: AsyncSession) -> None:
        await seed_demo(db_session)
        second = await seed_demo(db_session)
        assert second["created"] is False

        europa = await ContinentRepository(db_session).get_by_name("Europa")
        ids = await CountryRepository(db_session).list_ids_by_continent(europa.continent_id)
        assert ids == {100, 101}
        assert len(await ContinentRepository(db_session).list_all()) == len(SAMPLE_CONTINENTS)
