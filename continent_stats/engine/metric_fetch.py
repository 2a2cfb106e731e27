"""Per-country metric fetch.

Looks up net exports, government spending and QoL independently. A missing
row is reported in ``CountryMetrics.missing``; it never raises. A country is
eligible only when all three values are present.
"""

import logging
from dataclasses import dataclass, field

from continent_stats.models.common import MetricKind
from continent_stats.repositories.base import AbstractCatalogReader

logger = logging.getLogger(__name__)

REQUIRED_METRICS: tuple[MetricKind, ...] = (
    MetricKind.NET_EXPORTS,
    MetricKind.GOVERNMENT_SPENDING,
    MetricKind.QUALITY_OF_LIFE,
)


@dataclass(frozen=True)
class CountryMetrics:
    """Result of fetching the three metrics for one country."""

    country_id: int
    values: dict[MetricKind, float] = field(default_factory=dict)
    missing: tuple[MetricKind, ...] = ()

    @property
    def eligible(self) -> bool:
        return not self.missing

    @property
    def net_exports(self) -> float:
        return self.values[MetricKind.NET_EXPORTS]

    @property
    def gov_spending(self) -> float:
        return self.values[MetricKind.GOVERNMENT_SPENDING]

    @property
    def qol(self) -> float:
        return self.values[MetricKind.QUALITY_OF_LIFE]


class MetricFetcher:
    """Fetches the required metrics for a country through the catalog reader."""

    def __init__(self, reader: AbstractCatalogReader) -> None:
        self._reader = reader

    async def fetch(self, country_id: int) -> CountryMetrics:
        values: dict[MetricKind, float] = {}
        missing: list[MetricKind] = []

        for kind in REQUIRED_METRICS:
            value = await self._reader.get_metric(kind, country_id)
            if value is None:
                missing.append(kind)
                continue
            values[kind] = value

        if missing:
            logger.debug(
                "Country %s missing metrics: %s",
                country_id, ", ".join(m.value for m in missing),
            )

        return CountryMetrics(
            country_id=country_id,
            values=values,
            missing=tuple(missing),
        )
