"""SQLAlchemy ORM table models for Continent Stats.

Geography hierarchy: continents -> regions -> countries.
Metric tables (net_exports, government_spending, quality_of_life) are sparse:
at most one row per country, keyed by country_id. A missing row is a
normal state, not an integrity error.
"""

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from continent_stats.db.session import Base

# ---------------------------------------------------------------------------
# Geography
# ---------------------------------------------------------------------------


class ContinentRow(Base):
    __tablename__ = "continents"

    continent_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


class RegionRow(Base):
    __tablename__ = "regions"

    region_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    continent_id: Mapped[int] = mapped_column(
        ForeignKey("continents.continent_id"), nullable=False, index=True,
    )


class CountryRow(Base):
    __tablename__ = "countries"

    country_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    region_id: Mapped[int] = mapped_column(
        ForeignKey("regions.region_id"), nullable=False, index=True,
    )


# ---------------------------------------------------------------------------
# Country metrics (sparse, one row per country at most)
# ---------------------------------------------------------------------------


class NetExportsRow(Base):
    """Net exports (exports minus imports) per country."""

    __tablename__ = "net_exports"

    country_id: Mapped[int] = mapped_column(
        ForeignKey("countries.country_id"), primary_key=True, autoincrement=False,
    )
    value: Mapped[float] = mapped_column(Float, nullable=False)


class GovernmentSpendingRow(Base):
    """Government spending per country."""

    __tablename__ = "government_spending"

    country_id: Mapped[int] = mapped_column(
        ForeignKey("countries.country_id"), primary_key=True, autoincrement=False,
    )
    value: Mapped[float] = mapped_column(Float, nullable=False)


class QualityOfLifeRow(Base):
    """Quality-of-life index per country."""

    __tablename__ = "quality_of_life"

    country_id: Mapped[int] = mapped_column(
        ForeignKey("countries.country_id"), primary_key=True, autoincrement=False,
    )
    value: Mapped[float] = mapped_column(Float, nullable=False)
