"""Create cars table

Revision ID: 001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cars",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("brand", sa.String(length=50), nullable=False),
        sa.Column("model", sa.String(length=50), nullable=False),
        sa.Column("production_year", sa.Integer(), nullable=False),
        sa.Column("fuel_type", sa.String(length=20), nullable=False),
        sa.Column("transmission", sa.String(length=20), nullable=False),
        sa.Column("body_type", sa.String(length=20), nullable=False),
        sa.Column("engine_power_kw", sa.Integer(), nullable=False),
        sa.Column("fuel_consumption_liters_per_100km", sa.Float(), nullable=True),
        sa.Column("energy_consumption_kwh_per_100km", sa.Float(), nullable=True),
        sa.Column("price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("mileage_km", sa.Integer(), nullable=False),
        sa.Column("primary_image_path", sa.String(length=500), nullable=False),
        sa.Column("additional_image_paths", sa.JSON(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("features", sa.JSON(), nullable=False),
        sa.Column("location", sa.String(length=100), nullable=False),
        sa.Column("contact_info", sa.String(length=100), nullable=False),
        sa.Column("vin", sa.String(length=17), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cars_id"), "cars", ["id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_cars_id"), table_name="cars")
    op.drop_table("cars")
