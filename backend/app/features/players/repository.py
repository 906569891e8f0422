"""Repository pattern implementation for players feature.

Provides collection-like interface for accessing player domain objects.
Isolates data access logic from business logic following Martin Fowler's Repository Pattern.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

import structlog
from sqlalchemy import ColumnElement, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .orm_models import PlayerORM

logger = structlog.get_logger(__name__)


class PlayerRepositoryInterface(ABC):
    """Interface for player repository.

    Defines contract for data access operations.
    Enables mocking and potential swap of implementations.
    """

    @abstractmethod
    async def find_all(
        self,
        predicate: Optional[ColumnElement[bool]],
        order_by: Sequence[Any],
        offset: int,
        limit: int,
    ) -> list[PlayerORM]:
        """Get one page of players matching a predicate.

        :param predicate: Filter clause, or None to match every player
        :param order_by: Sort columns, applied in order
        :param offset: Number of matching rows to skip
        :param limit: Maximum rows to return
        :returns: List of matching players
        """
        pass

    @abstractmethod
    async def count(self, predicate: Optional[ColumnElement[bool]]) -> int:
        """Count players matching a predicate.

        :param predicate: Filter clause, or None to count every player
        :returns: Number of matching players
        """
        pass

    @abstractmethod
    async def get_by_id(self, player_id: int) -> Optional[PlayerORM]:
        """Get player by primary key.

        :param player_id: Player's database id
        :returns: PlayerORM if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, player: PlayerORM) -> PlayerORM:
        """Add new player to repository.

        :param player: Player domain object to add
        :returns: Created player with generated id populated
        """
        pass

    @abstractmethod
    async def save(self, player: PlayerORM) -> PlayerORM:
        """Save existing player changes.

        :param player: Player domain object with changes
        :returns: Updated player with refreshed state
        """
        pass

    @abstractmethod
    async def delete(self, player: PlayerORM) -> None:
        """Remove player from repository permanently.

        :param player: Player to delete
        """
        pass


class SQLAlchemyPlayerRepository(PlayerRepositoryInterface):
    """SQLAlchemy implementation of player repository."""

    def __init__(self, db: AsyncSession):
        """Initialize repository with database session.

        :param db: SQLAlchemy async session
        """
        self.db = db

    async def find_all(
        self,
        predicate: Optional[ColumnElement[bool]],
        order_by: Sequence[Any],
        offset: int,
        limit: int,
    ) -> list[PlayerORM]:
        """Get one page of players matching a predicate."""
        stmt = select(PlayerORM)
        if predicate is not None:
            stmt = stmt.where(predicate)
        stmt = stmt.order_by(*order_by).offset(offset).limit(limit)

        result = await self.db.execute(stmt)
        players = list(result.scalars().all())

        logger.debug(
            "players_listed", offset=offset, limit=limit, returned=len(players)
        )
        return players

    async def count(self, predicate: Optional[ColumnElement[bool]]) -> int:
        """Count players matching a predicate."""
        stmt = select(func.count()).select_from(PlayerORM)
        if predicate is not None:
            stmt = stmt.where(predicate)

        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def get_by_id(self, player_id: int) -> Optional[PlayerORM]:
        """Get player by primary key."""
        stmt = select(PlayerORM).where(PlayerORM.id == player_id)
        result = await self.db.execute(stmt)
        player = result.scalar_one_or_none()

        if player:
            logger.debug("player_retrieved", player_id=player_id, name=player.name)

        return player

    async def create(self, player: PlayerORM) -> PlayerORM:
        """Create new player record."""
        self.db.add(player)
        await self.db.commit()
        await self.db.refresh(player)

        logger.info(
            "player_created",
            player_id=player.id,
            name=player.name,
            level=player.level,
        )

        return player

    async def save(self, player: PlayerORM) -> PlayerORM:
        """Save existing player changes."""
        await self.db.commit()
        await self.db.refresh(player)

        logger.debug("player_saved", player_id=player.id)

        return player

    async def delete(self, player: PlayerORM) -> None:
        """Hard delete player."""
        player_id = player.id
        await self.db.delete(player)
        await self.db.commit()

        logger.info("player_deleted", player_id=player_id)
