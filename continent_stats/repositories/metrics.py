"""Country metric repository.

One repository serves the three sparse metric tables; ``MetricKind`` selects
the table. ``get_value`` returns None when the country has no row.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from continent_stats.db.tables import GovernmentSpendingRow, NetExportsRow, QualityOfLifeRow
from continent_stats.models.common import MetricKind

_METRIC_TABLES: dict[MetricKind, type[NetExportsRow | GovernmentSpendingRow | QualityOfLifeRow]] = {
    MetricKind.NET_EXPORTS: NetExportsRow,
    MetricKind.GOVERNMENT_SPENDING: GovernmentSpendingRow,
    MetricKind.QUALITY_OF_LIFE: QualityOfLifeRow,
}


class MetricRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def set_value(self, kind: MetricKind, country_id: int, value: float) -> None:
        """Insert or replace the metric value for a country."""
        table = _METRIC_TABLES[kind]
        row = await self._session.get(table, country_id)
        if row is None:
            self._session.add(table(country_id=country_id, value=value))
        else:
            row.value = value
        await self._session.flush()

    async def get_value(self, kind: MetricKind, country_id: int) -> float | None:
        table = _METRIC_TABLES[kind]
        result = await self._session.execute(
            select(table.value).where(table.country_id == country_id)
        )
        return result.scalar_one_or_none()

