"""Shared types, enums, and base models used across Continent Stats."""

from enum import StrEnum

from pydantic import BaseModel

# --- Shared enums ---


class MetricKind(StrEnum):
    """The three per-country metrics a country needs to be eligible."""

    NET_EXPORTS = "NET_EXPORTS"
    GOVERNMENT_SPENDING = "GOVERNMENT_SPENDING"
    QUALITY_OF_LIFE = "QUALITY_OF_LIFE"


class QolLabel(StrEnum):
    """Qualitative quality-of-life label shown in the report."""

    GOOD = "GOOD"
    BELOW_THRESHOLD = "below threshold"


# --- Base model ---


class ContinentStatsBase(BaseModel):
    """Base model with common configuration for all Continent Stats models."""

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "protected_namespaces": (),
    }
