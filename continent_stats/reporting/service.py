"""Continent report service.

Runs the aggregator over a catalog reader, then renders the ordered
summaries. No error escapes a run. Per-continent failures are returned as
``ContinentReport.faults`` and forwarded to the optional ``on_fault``
callback; a failure to list continents is returned as
``ContinentReport.catalog_fault``. The worst outcome is an empty report.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from continent_stats.engine.aggregator import ContinentAggregator, FaultCallback
from continent_stats.engine.renderer import ReportConfig, ReportRenderer
from continent_stats.models.report import ContinentReport
from continent_stats.repositories.base import AbstractCatalogReader
from continent_stats.repositories.catalog import SqlCatalogReader

logger = logging.getLogger(__name__)


class ContinentReportService:
    """Orchestrates aggregation and rendering for one report run."""

    def __init__(
        self,
        reader: AbstractCatalogReader,
        config: ReportConfig | None = None,
        on_fault: FaultCallback | None = None,
    ) -> None:
        self._aggregator = ContinentAggregator(reader, on_fault=on_fault)
        self._renderer = ReportRenderer(config)

    async def generate_report(self) -> ContinentReport:
        aggregation = await self._aggregator.aggregate()
        rendered = self._renderer.render(aggregation.summaries)

        logger.info(
            "Continent report: %d summaries, %d dropped, %d faults",
            len(aggregation.summaries),
            len(aggregation.dropped_continents),
            len(aggregation.faults),
        )

        return ContinentReport(
            summaries=aggregation.summaries,
            rendered=rendered,
            faults=aggregation.faults,
            dropped_continents=aggregation.dropped_continents,
            catalog_fault=aggregation.catalog_fault,
        )


async def generate_report(
    session: AsyncSession,
    config: ReportConfig | None = None,
    on_fault: FaultCallback | None = None,
) -> ContinentReport:
    """Generate the continent report from the database behind ``session``."""
    service = ContinentReportService(
        SqlCatalogReader(session), config=config, on_fault=on_fault,
    )
    return await service.generate_report()
