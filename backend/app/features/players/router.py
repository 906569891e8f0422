"""Player API endpoints.

Query and body keys keep their camelCase wire names. Service errors are
translated to HTTP responses by the handlers registered in ``app.main``.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
import structlog

from app.core.enums import PlayerOrder, Profession, Race
from .dependencies import PlayerServiceDep
from .filters import PlayerFilter
from .schemas import PlayerCreate, PlayerResponse, PlayerUpdate
from .service import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/players", tags=["players"])

# Widths of the bound columns; larger values cannot be sent to the database
INT_MIN, INT_MAX = -(2**31), 2**31 - 1
BIGINT_MIN, BIGINT_MAX = -(2**63), 2**63 - 1

PlayerId = Annotated[int, Path(ge=BIGINT_MIN, le=BIGINT_MAX)]


def get_player_filter(
    name: Optional[str] = Query(None, description="Substring of the name"),
    title: Optional[str] = Query(None, description="Substring of the title"),
    race: Optional[Race] = Query(None, description="Exact race"),
    profession: Optional[Profession] = Query(None, description="Exact profession"),
    after: Optional[int] = Query(
        None,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        description="Earliest birthday, epoch milliseconds (inclusive)",
    ),
    before: Optional[int] = Query(
        None,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        description="Latest birthday, epoch milliseconds (inclusive)",
    ),
    banned: Optional[bool] = Query(None, description="Banned flag"),
    min_experience: Optional[int] = Query(
        None, alias="minExperience", ge=INT_MIN, le=INT_MAX
    ),
    max_experience: Optional[int] = Query(
        None, alias="maxExperience", ge=INT_MIN, le=INT_MAX
    ),
    min_level: Optional[int] = Query(
        None, alias="minLevel", ge=INT_MIN, le=INT_MAX
    ),
    max_level: Optional[int] = Query(
        None, alias="maxLevel", ge=INT_MIN, le=INT_MAX
    ),
) -> PlayerFilter:
    """Collect the optional filter parameters shared by list and count."""
    return PlayerFilter(
        name=name,
        title=title,
        race=race,
        profession=profession,
        after=after,
        before=before,
        banned=banned,
        min_experience=min_experience,
        max_experience=max_experience,
        min_level=min_level,
        max_level=max_level,
    )


PlayerFilterDep = Annotated[PlayerFilter, Depends(get_player_filter)]


@router.get("", response_model=list[PlayerResponse])
async def list_players(
    player_service: PlayerServiceDep,
    player_filter: PlayerFilterDep,
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=0, le=INT_MAX),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=INT_MAX),
    order: PlayerOrder = Query(PlayerOrder.ID, description="Sort key"),
):
    """
    List players matching the filters, one page at a time.

    Every filter is optional; omitted filters don't constrain the result.
    Players are sorted ascending by ``order``.

    Examples:
        GET /rest/players?race=ELF&pageSize=10
        GET /rest/players?minExperience=100&maxExperience=200&order=LEVEL
    """
    return await player_service.list_players(
        player_filter,
        page_number=page_number,
        page_size=page_size,
        order=order,
    )


@router.get("/count", response_model=int)
async def count_players(
    player_service: PlayerServiceDep,
    player_filter: PlayerFilterDep,
):
    """Count players matching the filters (pagination does not apply)."""
    return await player_service.count_players(player_filter)


@router.post("", response_model=PlayerResponse)
async def create_player(payload: PlayerCreate, player_service: PlayerServiceDep):
    """Create a player; level and untilNextLevel are computed server-side."""
    return await player_service.create_player(payload)


@router.get("/{player_id}", response_model=PlayerResponse)
async def get_player(player_id: PlayerId, player_service: PlayerServiceDep):
    """Get a single player by id."""
    return await player_service.get_player(player_id)


@router.post("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: PlayerId, payload: PlayerUpdate, player_service: PlayerServiceDep
):
    """Update the fields present in the body; others stay unchanged."""
    return await player_service.update_player(player_id, payload)


@router.delete("/{player_id}", status_code=status.HTTP_200_OK)
async def delete_player(
    player_id: PlayerId, player_service: PlayerServiceDep
) -> Response:
    """Delete a player permanently."""
    await player_service.delete_player(player_id)
    logger.debug("player_delete_request_completed", player_id=player_id)
    return Response(status_code=status.HTTP_200_OK)
