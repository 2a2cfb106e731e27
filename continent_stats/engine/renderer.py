"""Report renderer — projects summaries into labelled report lines.

Classification uses the unrounded average. Rounding is half-up to the
configured precision and only affects the rendered value. Non-finite
averages pass through unrounded.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from pydantic import Field

from continent_stats.config.settings import Settings
from continent_stats.models.common import ContinentStatsBase, QolLabel
from continent_stats.models.report import ContinentSummary, RenderedSummary

DEFAULT_GOOD_QOL_THRESHOLD = 80.0
DEFAULT_ROUNDING_PRECISION = 2


class ReportConfig(ContinentStatsBase):
    """Rendering knobs for the continent report."""

    good_qol_threshold: float = DEFAULT_GOOD_QOL_THRESHOLD
    rounding_precision: int = Field(default=DEFAULT_ROUNDING_PRECISION, ge=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReportConfig":
        return cls(
            good_qol_threshold=settings.GOOD_QOL_THRESHOLD,
            rounding_precision=settings.ROUNDING_PRECISION,
        )


class ReportRenderer:
    """Renders ContinentSummary records in the order given."""

    def __init__(self, config: ReportConfig | None = None) -> None:
        self._config = config or ReportConfig()

    @property
    def config(self) -> ReportConfig:
        return self._config

    def classify(self, avg_qol: float) -> QolLabel:
        if avg_qol >= self._config.good_qol_threshold:
            return QolLabel.GOOD
        return QolLabel.BELOW_THRESHOLD

    def round_qol(self, avg_qol: float) -> float:
        if not math.isfinite(avg_qol):
            return avg_qol
        quantum = Decimal(1).scaleb(-self._config.rounding_precision)
        return float(Decimal(repr(avg_qol)).quantize(quantum, rounding=ROUND_HALF_UP))

    def render_summary(self, summary: ContinentSummary) -> RenderedSummary:
        rounded = self.round_qol(summary.avg_qol)
        label = self.classify(summary.avg_qol)
        precision = self._config.rounding_precision
        line = (
            f"{summary.continent_name}: "
            f"net exports={summary.total_net_exports:.{precision}f}, "
            f"government spending={summary.total_gov_spending:.{precision}f}, "
            f"avg QoL={rounded:.{precision}f} ({label.value})"
        )
        return RenderedSummary(
            continent_name=summary.continent_name,
            total_net_exports=summary.total_net_exports,
            total_gov_spending=summary.total_gov_spending,
            avg_qol=rounded,
            label=label,
            line=line,
        )

    def render(self, summaries: list[ContinentSummary]) -> list[RenderedSummary]:
        return [self.render_summary(s) for s in summaries]
