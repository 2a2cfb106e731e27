"""Abstract catalog reader used by the aggregation engine.

The engine only ever reads. Implementations return ``None`` from
``get_metric`` when a country has no row for that metric; exceptions are
reserved for genuine access failures.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from continent_stats.models.common import MetricKind
from continent_stats.models.report import Continent


class AbstractCatalogReader(ABC):
    """Read-only view over continents, regions, countries and metrics."""

    @abstractmethod
    async def list_continents(self) -> list[Continent]:
        """All continents, ascending by continent_id."""
        ...

    @abstractmethod
    async def list_country_ids_by_continent(self, continent_id: int) -> set[int]:
        ...

    @abstractmethod
    async def get_metric(self, kind: MetricKind, country_id: int) -> float | None:
        ...

    @asynccontextmanager
    async def continent_scope(self) -> AsyncIterator[None]:
        """Isolation scope for the reads of one continent.

        An access failure inside the scope must not affect reads made in
        later scopes. The default needs no isolation.
        """
        yield
