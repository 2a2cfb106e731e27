"""Report schemas — continents, per-continent summaries, and fault notices.

Everything here is transient: built and discarded within one report run.
"""

from pydantic import Field, model_validator

from continent_stats.models.common import ContinentStatsBase, QolLabel


class Continent(ContinentStatsBase):
    """A continent as enumerated by the data access layer."""

    continent_id: int
    name: str


class ContinentSummary(ContinentStatsBase):
    """Aggregated metrics for one continent.

    Only eligible countries (all three metrics present) contribute.
    A summary never exists for a continent with zero eligible countries.
    ``avg_qol`` is unrounded; rounding happens at render time.
    """

    continent_id: int
    continent_name: str
    total_net_exports: float
    total_gov_spending: float
    qol_sum: float
    avg_qol: float
    country_count: int = Field(..., ge=1)

    @model_validator(mode="after")
    def _check_average(self) -> "ContinentSummary":
        if self.avg_qol != self.qol_sum / self.country_count:
            raise ValueError("avg_qol must equal qol_sum / country_count")
        return self


class ContinentFault(ContinentStatsBase):
    """An unexpected failure captured at the continent boundary."""

    continent_id: int
    continent_name: str
    error_type: str
    cause: str


class CatalogFault(ContinentStatsBase):
    """Failure to enumerate continents. The run yields an empty report."""

    error_type: str
    cause: str


class RenderedSummary(ContinentStatsBase):
    """Output projection of a ContinentSummary."""

    continent_name: str
    total_net_exports: float
    total_gov_spending: float
    avg_qol: float = Field(..., description="Average QoL rounded to the configured precision.")
    label: QolLabel
    line: str


class ContinentReport(ContinentStatsBase):
    """Result of one report run: ordered summaries plus side-channel notices."""

    summaries: list[ContinentSummary] = Field(default_factory=list)
    rendered: list[RenderedSummary] = Field(default_factory=list)
    faults: list[ContinentFault] = Field(default_factory=list)
    dropped_continents: list[str] = Field(default_factory=list)
    catalog_fault: CatalogFault | None = None

    @property
    def lines(self) -> list[str]:
        """Rendered report lines in ascending continent-id order."""
        return [r.line for r in self.rendered]
