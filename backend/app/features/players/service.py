"""Player service for handling player data operations.

Thin orchestration layer with the Repository Pattern:
- Field rules live in ``validation``
- Derived progression lives on the domain model (PlayerORM.recalculate_level)
- Query predicates are built by ``filters``
- All database access is delegated to the injected repository
- Transformers handle ORM → Pydantic conversions
"""

from datetime import datetime
from typing import Optional

import structlog

from app.core.decorators import service_error_handler
from app.core.enums import PlayerOrder
from app.core.exceptions import BadRequestError, NotFoundError
from . import validation
from .filters import PlayerFilter, build_player_predicate
from .orm_models import PlayerORM
from .repository import PlayerRepositoryInterface
from .schemas import PlayerCreate, PlayerResponse, PlayerUpdate
from .transformers import millis_to_datetime, player_orm_to_response

logger = structlog.get_logger(__name__)

DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3


def _parse_birthday(millis: Optional[int]) -> Optional[datetime]:
    if millis is None:
        return None
    try:
        return millis_to_datetime(millis)
    except ValueError as e:
        raise BadRequestError(
            "Birthday goes beyond what is bounds", field="birthday", value=millis
        ) from e


class PlayerService:
    """Service for handling player data operations (Thin Orchestration Layer).

    Responsibilities:
    - Validate inputs and raise typed service errors
    - Keep derived progression fields consistent before every write
    - Compose filter predicates for list and count queries
    - Transform between domain models and API schemas

    Does NOT:
    - Execute SQL queries directly (delegated to repository)
    - Know about HTTP status codes (translated by the app exception handlers)
    """

    def __init__(self, repository: PlayerRepositoryInterface):
        """Initialize player service with its repository.

        :param repository: Persistence collaborator for player records
        """
        self.repository = repository

    @service_error_handler("PlayerService")
    async def list_players(
        self,
        player_filter: PlayerFilter,
        page_number: int = DEFAULT_PAGE_NUMBER,
        page_size: int = DEFAULT_PAGE_SIZE,
        order: PlayerOrder = PlayerOrder.ID,
    ) -> list[PlayerResponse]:
        """Get one page of players matching the filter.

        Results are sorted ascending by ``order``; ties fall back to id so
        pages never overlap.

        :param player_filter: Optional filter parameters
        :param page_number: Zero-based page index
        :param page_size: Players per page
        :param order: Sort key
        :returns: Players on the requested page (empty when none match)
        :raises BadRequestError: If the page coordinates are invalid
        """
        if page_number < 0:
            raise BadRequestError(
                "Invalid page number! It cannot be negative",
                field="pageNumber",
                value=page_number,
            )
        if page_size < 1:
            raise BadRequestError(
                "Invalid page size! It must be at least 1",
                field="pageSize",
                value=page_size,
            )

        sort_column = getattr(PlayerORM, order.field_name)
        order_by = [sort_column]
        if order is not PlayerOrder.ID:
            order_by.append(PlayerORM.id)

        players = await self.repository.find_all(
            build_player_predicate(player_filter),
            order_by=order_by,
            offset=page_number * page_size,
            limit=page_size,
        )
        return [player_orm_to_response(player) for player in players]

    @service_error_handler("PlayerService")
    async def count_players(self, player_filter: PlayerFilter) -> int:
        """Count all players matching the filter, ignoring pagination."""
        return await self.repository.count(build_player_predicate(player_filter))

    @service_error_handler("PlayerService")
    async def create_player(self, payload: PlayerCreate) -> PlayerResponse:
        """Validate a full player payload and store it.

        :param payload: Player fields; every field except banned is required
        :returns: Stored player including its assigned id
        :raises BadRequestError: If any field rule is violated
        """
        birthday = _parse_birthday(payload.birthday)

        validation.check_name(payload.name)
        validation.check_title(payload.title)
        validation.check_race(payload.race)
        validation.check_profession(payload.profession)
        validation.check_birthday(birthday)
        validation.check_experience(payload.experience)

        player = PlayerORM(
            name=payload.name,
            title=payload.title,
            race=payload.race,
            profession=payload.profession,
            birthday=birthday,
            banned=payload.banned if payload.banned is not None else False,
            experience=payload.experience,
        )
        player.recalculate_level()

        created = await self.repository.create(player)
        return player_orm_to_response(created)

    async def _get_existing(self, player_id: int) -> PlayerORM:
        validation.check_id(player_id)

        player = await self.repository.get_by_id(player_id)
        if player is None:
            raise NotFoundError(
                "No player with this ID! Error 404!",
                service="PlayerService",
                context={"player_id": player_id},
            )
        return player

    @service_error_handler("PlayerService")
    async def get_player(self, player_id: int) -> PlayerResponse:
        """Get a single player.

        :raises BadRequestError: If the id is not positive
        :raises NotFoundError: If no player has this id
        """
        return player_orm_to_response(await self._get_existing(player_id))

    @service_error_handler("PlayerService")
    async def update_player(
        self, player_id: int, payload: PlayerUpdate
    ) -> PlayerResponse:
        """Apply the fields present in ``payload`` to an existing player.

        Absent fields are neither validated nor changed. Level and
        until_next_level are recomputed from the resulting experience.

        :param player_id: Id of the player to update
        :param payload: Partial player fields
        :returns: Updated player
        :raises BadRequestError: If the id or a present field is invalid
        :raises NotFoundError: If no player has this id
        """
        player = await self._get_existing(player_id)

        # Validate every present field before touching the loaded record
        if payload.name is not None:
            validation.check_name(payload.name)
        if payload.title is not None:
            validation.check_title(payload.title)
        if payload.race is not None:
            validation.check_race(payload.race)
        if payload.profession is not None:
            validation.check_profession(payload.profession)
        birthday = _parse_birthday(payload.birthday)
        if birthday is not None:
            validation.check_birthday(birthday)
        if payload.experience is not None:
            validation.check_experience(payload.experience)

        if payload.name is not None:
            player.name = payload.name
        if payload.title is not None:
            player.title = payload.title
        if payload.race is not None:
            player.race = payload.race
        if payload.profession is not None:
            player.profession = payload.profession
        if birthday is not None:
            player.birthday = birthday
        if payload.banned is not None:
            player.banned = payload.banned
        if payload.experience is not None:
            player.experience = payload.experience

        player.recalculate_level()

        saved = await self.repository.save(player)
        logger.info(
            "player_updated",
            player_id=player_id,
            fields=sorted(payload.model_fields_set),
        )
        return player_orm_to_response(saved)

    @service_error_handler("PlayerService")
    async def delete_player(self, player_id: int) -> None:
        """Permanently delete a player.

        :raises BadRequestError: If the id is not positive
        :raises NotFoundError: If no player has this id
        """
        player = await self._get_existing(player_id)
        await self.repository.delete(player)
