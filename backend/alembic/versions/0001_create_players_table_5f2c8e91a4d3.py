"""Create players table

Revision ID: 5f2c8e91a4d3
Revises:
Create Date: 2026-10-17 10:12:41.208113

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5f2c8e91a4d3"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create players table with its range checks."""

    op.create_table(
        "players",
        sa.Column(
            "id",
            sa.BigInteger(),
            autoincrement=True,
            nullable=False,
            comment="Auto-incrementing primary key",
        ),
        sa.Column(
            "name", sa.String(length=12), nullable=False, comment="Character name"
        ),
        sa.Column(
            "title", sa.String(length=30), nullable=False, comment="Character title"
        ),
        sa.Column(
            "race", sa.String(length=16), nullable=False, comment="Character race"
        ),
        sa.Column(
            "profession",
            sa.String(length=16),
            nullable=False,
            comment="Character profession",
        ),
        sa.Column(
            "birthday",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Character registration date (years 2000-3000)",
        ),
        sa.Column(
            "banned",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
            comment="Whether the character is banned",
        ),
        sa.Column(
            "experience",
            sa.Integer(),
            nullable=False,
            comment="Experience points (0-10,000,000)",
        ),
        sa.Column(
            "level", sa.Integer(), nullable=False, comment="Level derived from experience"
        ),
        sa.Column(
            "until_next_level",
            sa.Integer(),
            nullable=False,
            comment="Experience still needed to reach the next level",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "experience >= 0 AND experience <= 10000000",
            name="ck_players_experience_range",
        ),
        sa.CheckConstraint("level >= 0", name="ck_players_level_non_negative"),
    )

    op.create_index("ix_players_name", "players", ["name"])
    op.create_index("idx_players_race_profession", "players", ["race", "profession"])
    op.create_index("idx_players_level", "players", ["level"])


def downgrade() -> None:
    """Drop players table."""
    op.drop_index("idx_players_level", table_name="players")
    op.drop_index("idx_players_race_profession", table_name="players")
    op.drop_index("ix_players_name", table_name="players")
    op.drop_table("players")
