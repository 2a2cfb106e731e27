"""Seed script — load sample geography and metrics into the database.

Creates four continents that exercise every aggregation path:
1. Europa: two countries, one missing government spending
2. Noland: countries exist but none has all three metrics
3. Mixed: three eligible countries with QoL 70, 75, 85
4. Oceania: a continent with no regions at all

Idempotent: safe to run multiple times; skips if Europa already exists.

Usage:
    python -m scripts.seed          # against DATABASE_URL from .env
    pytest tests/scripts/test_seed.py  # against aiosqlite in-memory
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from continent_stats.models.common import MetricKind
from continent_stats.repositories.geography import (
    ContinentRepository,
    CountryRepository,
    RegionRepository,
)
from continent_stats.repositories.metrics import MetricRepository

# ---------------------------------------------------------------------------
# Sample data
# (continent_id, name)
# ---------------------------------------------------------------------------

SAMPLE_CONTINENTS = [
    (1, "Europa"),
    (2, "Noland"),
    (3, "Mixed"),
    (4, "Oceania"),
]

# (region_id, name, continent_id)
SAMPLE_REGIONS = [
    (10, "Western Europa", 1),
    (20, "North Noland", 2),
    (21, "South Noland", 2),
    (30, "Mixed Lowlands", 3),
    (31, "Mixed Highlands", 3),
]

# (country_id, name, region_id, net_exports, gov_spending, qol)
# None marks a metric with no row.
SAMPLE_COUNTRIES = [
    (100, "Xland", 10, 100.0, 50.0, 90.0),
    (101, "Yland", 10, 40.0, None, 95.0),
    (200, "Nowhere", 20, None, 10.0, 60.0),
    (201, "Elsewhere", 21, 5.0, 5.0, None),
    (300, "Lowmark", 30, 10.0, 20.0, 70.0),
    (301, "Midmark", 30, -5.0, 30.0, 75.0),
    (310, "Highmark", 31, 25.0, 40.0, 85.0),
]

DEMO_SENTINEL_CONTINENT = "Europa"


async def seed_geography(session: AsyncSession) -> None:
    """Create the sample continents, regions and countries."""
    continents = ContinentRepository(session)
    regions = RegionRepository(session)
    countries = CountryRepository(session)

    for continent_id, name in SAMPLE_CONTINENTS:
        await continents.create(continent_id=continent_id, name=name)
    for region_id, name, continent_id in SAMPLE_REGIONS:
        await regions.create(region_id=region_id, name=name, continent_id=continent_id)
    for country_id, name, region_id, *_ in SAMPLE_COUNTRIES:
        await countries.create(country_id=country_id, name=name, region_id=region_id)


async def seed_metrics(session: AsyncSession) -> int:
    """Create metric rows for the sample countries. Returns rows written."""
    metrics = MetricRepository(session)
    written = 0
    for country_id, _name, _region_id, net_exports, spending, qol in SAMPLE_COUNTRIES:
        for kind, value in (
            (MetricKind.NET_EXPORTS, net_exports),
            (MetricKind.GOVERNMENT_SPENDING, spending),
            (MetricKind.QUALITY_OF_LIFE, qol),
        ):
            if value is None:
                continue
            await metrics.set_value(kind, country_id, value)
            written += 1
    return written


async def seed_demo(session: AsyncSession) -> dict:
    """Idempotent demo seed: geography + metrics.

    Returns dict with keys: created (bool), continent_count, metric_row_count.
    If the Europa continent already exists, returns created=False and skips.
    """
    existing = await ContinentRepository(session).get_by_name(DEMO_SENTINEL_CONTINENT)
    if existing is not None:
        return {"created": False, "continent_count": 0, "metric_row_count": 0}

    await seed_geography(session)
    written = await seed_metrics(session)

    return {
        "created": True,
        "continent_count": len(SAMPLE_CONTINENTS),
        "metric_row_count": written,
    }


# ---------------------------------------------------------------------------
# CLI entry point: python -m scripts.seed
# ---------------------------------------------------------------------------


async def _run_seed() -> None:
    """Run the seed against the real database (idempotent)."""
    from continent_stats.db.session import async_session_factory

    async with async_session_factory() as session:
        result = await seed_demo(session)

        if not result["created"]:
            print(f"Demo data already seeded ({DEMO_SENTINEL_CONTINENT} exists). Skipping.")
            return

        await session.commit()

        print("Seed complete.")
        print(f"  Continents:   {result['continent_count']}")
        print(f"  Metric rows:  {result['metric_row_count']}")


if __name__ == "__main__":
    asyncio.run(_run_seed())
