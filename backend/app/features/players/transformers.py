"""Transformers for converting between layers in players feature.

This module provides transformation functions for:
- ORM models → Pydantic schemas (API responses)
- Epoch-millisecond timestamps ↔ timezone-aware datetimes
"""

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from .schemas import PlayerResponse

if TYPE_CHECKING:
    from .orm_models import PlayerORM

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def millis_to_datetime(millis: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime.

    :param millis: Milliseconds since the Unix epoch (may be negative)
    :returns: Matching UTC datetime
    :raises ValueError: If the timestamp is outside the representable range
    """
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise ValueError(f"Timestamp out of range: {millis}") from e


def datetime_to_millis(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _ONE_MILLISECOND


def player_orm_to_response(player: "PlayerORM") -> PlayerResponse:
    """Transform PlayerORM domain model to PlayerResponse API schema.

    :param player: Player domain model from database
    :returns: Player response schema for API
    """
    return PlayerResponse(
        id=player.id,
        name=player.name,
        title=player.title,
        race=player.race,
        profession=player.profession,
        birthday=datetime_to_millis(player.birthday),
        banned=player.banned,
        experience=player.experience,
        level=player.level,
        until_next_level=player.until_next_level,
    )
