"""Initial schema — geography hierarchy and sparse country metrics.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_METRIC_TABLES = ("net_exports", "government_spending", "quality_of_life")


def upgrade() -> None:
    op.create_table(
        "continents",
        sa.Column("continent_id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(100), nullable=False),
    )
    op.create_table(
        "regions",
        sa.Column("region_id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "continent_id", sa.Integer,
            sa.ForeignKey("continents.continent_id"), nullable=False, index=True,
        ),
    )
    op.create_table(
        "countries",
        sa.Column("country_id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "region_id", sa.Integer,
            sa.ForeignKey("regions.region_id"), nullable=False, index=True,
        ),
    )
    for table_name in _METRIC_TABLES:
        op.create_table(
            table_name,
            sa.Column(
                "country_id", sa.Integer,
                sa.ForeignKey("countries.country_id"),
                primary_key=True, autoincrement=False,
            ),
            sa.Column("value", sa.Float, nullable=False),
        )


def downgrade() -> None:
    for table_name in reversed(_METRIC_TABLES):
        op.drop_table(table_name)
    op.drop_table("countries")
    op.drop_table("regions")
    op.drop_table("continents")
