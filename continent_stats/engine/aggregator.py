"""Continent aggregator — per-continent sums over eligible countries.

Processes continents strictly in ascending id order, countries within a
continent in ascending id order. Handles partial failure at continent
granularity:

- Missing metric: country skipped, nothing from it is accumulated.
- Zero eligible countries: continent dropped, no summary emitted.
- Any other exception: captured as a ContinentFault, continent dropped,
  run continues with the next continent. Each continent runs inside the
  reader's continent_scope so a failed read does not poison later ones.
- Continents cannot be listed: empty result carrying a CatalogFault.

No retries. Summaries already collected are never modified by a later fault.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from continent_stats.engine.metric_fetch import MetricFetcher
from continent_stats.engine.resolver import CountryResolver
from continent_stats.models.report import (
    CatalogFault,
    Continent,
    ContinentFault,
    ContinentSummary,
)
from continent_stats.repositories.base import AbstractCatalogReader

logger = logging.getLogger(__name__)

FaultCallback = Callable[[ContinentFault], None]


@dataclass
class _RunningTotals:
    net_exports: float = 0.0
    gov_spending: float = 0.0
    qol: float = 0.0
    count: int = 0


@dataclass(frozen=True)
class AggregationResult:
    """Output of one aggregation pass."""

    summaries: list[ContinentSummary] = field(default_factory=list)
    faults: list[ContinentFault] = field(default_factory=list)
    dropped_continents: list[str] = field(default_factory=list)
    catalog_fault: CatalogFault | None = None


class ContinentAggregator:
    """Drives the resolver and metric fetch for every continent."""

    def __init__(
        self,
        reader: AbstractCatalogReader,
        on_fault: FaultCallback | None = None,
    ) -> None:
        self._reader = reader
        self._resolver = CountryResolver(reader)
        self._fetcher = MetricFetcher(reader)
        self._on_fault = on_fault

    async def aggregate(self) -> AggregationResult:
        """Aggregate every continent and collect summaries and faults.

        Never raises. If continents cannot be enumerated the result is
        empty and carries a CatalogFault.
        """
        try:
            continents = await self._reader.list_continents()
        except Exception as exc:
            logger.exception("Listing continents failed: %s", exc)
            return AggregationResult(
                catalog_fault=CatalogFault(error_type=type(exc).__name__, cause=str(exc)),
            )

        result = AggregationResult()
        for continent in continents:
            try:
                async with self._reader.continent_scope():
                    summary = await self._aggregate_continent(continent)
            except Exception as exc:
                logger.exception(
                    "Continent %s (%s) failed: %s",
                    continent.name, continent.continent_id, exc,
                )
                self._record_fault(result, continent, exc)
                continue

            if summary is None:
                logger.info(
                    "Continent %s has no eligible countries; dropped",
                    continent.name,
                )
                result.dropped_continents.append(continent.name)
                continue

            result.summaries.append(summary)

        return result

    def _record_fault(
        self, result: AggregationResult, continent: Continent, exc: Exception,
    ) -> None:
        fault = ContinentFault(
            continent_id=continent.continent_id,
            continent_name=continent.name,
            error_type=type(exc).__name__,
            cause=str(exc),
        )
        result.faults.append(fault)
        if self._on_fault is None:
            return
        try:
            self._on_fault(fault)
        except Exception:
            logger.exception("Fault notifier failed for continent %s", continent.name)

    async def _aggregate_continent(self, continent: Continent) -> ContinentSummary | None:
        """Sum metrics over eligible countries. None if there are none."""
        totals = _RunningTotals()
        country_ids = await self._resolver.resolve(continent.continent_id)

        for country_id in sorted(country_ids):
            metrics = await self._fetcher.fetch(country_id)
            if not metrics.eligible:
                continue

            totals.net_exports += metrics.net_exports
            totals.gov_spending += metrics.gov_spending
            totals.qol += metrics.qol
            totals.count += 1

        if totals.count == 0:
            return None

        return ContinentSummary(
            continent_id=continent.continent_id,
            continent_name=continent.name,
            total_net_exports=totals.net_exports,
            total_gov_spending=totals.gov_spending,
            qol_sum=totals.qol,
            avg_qol=totals.qol / totals.count,
            country_count=totals.count,
        )
