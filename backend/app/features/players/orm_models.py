"""SQLAlchemy 2.0 ORM model for the players feature with Rich Domain Model pattern.

The model owns the rule that keeps derived progression fields in step with
experience; the service calls it before every write.
"""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime as SQLDateTime,
    Enum as SQLEnum,
    Index,
    Integer,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enums import Profession, Race
from app.core.models import Base
from .leveling import calculate_level, calculate_until_next_level


class PlayerORM(Base):
    """Player domain model (Rich Domain Model pattern).

    Combines data and behavior:
    - Database fields with type safety (SQLAlchemy 2.0 Mapped types)
    - Level progression derived from experience
    """

    __tablename__ = "players"
    __table_args__ = (
        Index("idx_players_race_profession", "race", "profession"),
        Index("idx_players_level", "level"),
    )

    # ========================================================================
    # DATABASE FIELDS
    # ========================================================================

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        comment="Auto-incrementing primary key",
    )

    name: Mapped[str] = mapped_column(
        String(12), nullable=False, index=True, comment="Character name"
    )

    title: Mapped[str] = mapped_column(
        String(30), nullable=False, comment="Character title"
    )

    race: Mapped[Race] = mapped_column(
        SQLEnum(Race, name="race", native_enum=False, length=16),
        nullable=False,
        comment="Character race",
    )

    profession: Mapped[Profession] = mapped_column(
        SQLEnum(Profession, name="profession", native_enum=False, length=16),
        nullable=False,
        comment="Character profession",
    )

    birthday: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=False,
        comment="Character registration date (years 2000-3000)",
    )

    banned: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Whether the character is banned",
    )

    experience: Mapped[int] = mapped_column(
        Integer, nullable=False, comment="Experience points (0-10,000,000)"
    )

    level: Mapped[int] = mapped_column(
        Integer, nullable=False, comment="Level derived from experience"
    )

    until_next_level: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Experience still needed to reach the next level",
    )

    # ========================================================================
    # DOMAIN LOGIC
    # ========================================================================

    def recalculate_level(self) -> None:
        """Recompute level and until_next_level from current experience."""
        self.level = calculate_level(self.experience)
        self.until_next_level = calculate_until_next_level(self.experience, self.level)

    def __repr__(self) -> str:
        return f"<PlayerORM(id={self.id}, name='{self.name}', level={self.level})>"
