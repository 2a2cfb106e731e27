"""Tests for SqlCatalogReader — the engine's view of the database."""

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from continent_stats.models.common import MetricKind
from continent_stats.models.report import Continent
from continent_stats.repositories.catalog import SqlCatalogReader
from continent_stats.repositories.geography import ContinentRepository


class TestSqlCatalogReader:
    @pytest.mark.anyio
    async def test_list_continents_returns_models_in_id_order(
        self, make_catalog, db_session: AsyncSession,
    ) -> None:
        await make_catalog(continents=[(2, "Beta"), (1, "Alpha")])
        continents = await SqlCatalogReader(db_session).list_continents()
        assert continents == [
            Continent(continent_id=1, name="Alpha"),
            Continent(continent_id=2, name="Beta"),
        ]

    @pytest.mark.anyio
    async def test_country_ids_and_metrics(self, make_catalog, db_session: AsyncSession) -> None:
        await make_catalog(
            continents=[(1, "Europa")],
            regions=[(10, 1)],
            countries=[(100, 10, 100.0, None, 90.0)],
        )
        reader = SqlCatalogReader(db_session)

        assert await reader.list_country_ids_by_continent(1) == {100}
        assert await reader.get_metric(MetricKind.NET_EXPORTS, 100) == 100.0
        assert await reader.get_metric(MetricKind.GOVERNMENT_SPENDING, 100) is None
        assert await reader.get_metric(MetricKind.QUALITY_OF_LIFE, 100) == 90.0


class TestContinentScope:
    @pytest.mark.anyio
    async def test_failed_scope_rolls_back_its_writes(
        self, make_catalog, db_session: AsyncSession,
    ) -> None:
        await make_catalog(continents=[(1, "Europa")])
        reader = SqlCatalogReader(db_session)
        repo = ContinentRepository(db_session)

        with pytest.raises(RuntimeError):
            async with reader.continent_scope():
                await repo.create(continent_id=2, name="Halfway")
                raise RuntimeError("continent failed")

        assert await repo.get_by_name("Halfway") is None
        assert await reader.list_continents() == [Continent(continent_id=1, name="Europa")]

    @pytest.mark.anyio
    async def test_session_usable_after_failed_statement(
        self, make_catalog, db_session: AsyncSession,
    ) -> None:
        await make_catalog(
            continents=[(1, "Europa")],
            regions=[(10, 1)],
            countries=[(100, 10, 1.0, 2.0, 90.0)],
        )
        reader = SqlCatalogReader(db_session)

        with pytest.raises(OperationalError):
            async with reader.continent_scope():
                await db_session.execute(text("SELECT value FROM no_such_table"))

        async with reader.continent_scope():
            assert await reader.list_country_ids_by_continent(1) == {100}
