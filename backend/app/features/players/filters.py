"""Query predicate builder for player list and count queries.

Every ``filter_*`` function returns either a SQL boolean clause or ``None``
when its parameter was not supplied. ``None`` fragments are dropped and the
rest are joined with AND, so a filter with no parameters matches everything.
"""

from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy import ColumnElement, and_

from app.core.enums import Profession, Race
from .orm_models import PlayerORM
from .transformers import millis_to_datetime


@dataclass(frozen=True)
class PlayerFilter:
    """Optional list/count parameters; ``None`` means "not constrained"."""

    name: Optional[str] = None
    title: Optional[str] = None
    race: Optional[Race] = None
    profession: Optional[Profession] = None
    after: Optional[int] = None
    before: Optional[int] = None
    banned: Optional[bool] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    min_level: Optional[int] = None
    max_level: Optional[int] = None


def _range(column: Any, lower: Any, upper: Any) -> Optional[ColumnElement[bool]]:
    if lower is None and upper is None:
        return None
    if lower is None:
        return column <= upper
    if upper is None:
        return column >= lower
    return column.between(lower, upper)


def filter_name(name: Optional[str]) -> Optional[ColumnElement[bool]]:
    if name is None:
        return None
    return PlayerORM.name.contains(name, autoescape=True)


def filter_title(title: Optional[str]) -> Optional[ColumnElement[bool]]:
    if title is None:
        return None
    return PlayerORM.title.contains(title, autoescape=True)


def filter_race(race: Optional[Race]) -> Optional[ColumnElement[bool]]:
    if race is None:
        return None
    return PlayerORM.race == race


def filter_profession(
    profession: Optional[Profession],
) -> Optional[ColumnElement[bool]]:
    if profession is None:
        return None
    return PlayerORM.profession == profession


def filter_experience(
    min_experience: Optional[int], max_experience: Optional[int]
) -> Optional[ColumnElement[bool]]:
    return _range(PlayerORM.experience, min_experience, max_experience)


def filter_level(
    min_level: Optional[int], max_level: Optional[int]
) -> Optional[ColumnElement[bool]]:
    return _range(PlayerORM.level, min_level, max_level)


def filter_birthday(
    after: Optional[int], before: Optional[int]
) -> Optional[ColumnElement[bool]]:
    """Bound birthday by epoch-millisecond timestamps (inclusive)."""
    return _range(
        PlayerORM.birthday,
        millis_to_datetime(after) if after is not None else None,
        millis_to_datetime(before) if before is not None else None,
    )


def filter_banned(banned: Optional[bool]) -> Optional[ColumnElement[bool]]:
    if banned is None:
        return None
    return PlayerORM.banned.is_(True) if banned else PlayerORM.banned.is_(False)


def build_player_predicate(
    player_filter: PlayerFilter,
) -> Optional[ColumnElement[bool]]:
    """Combine all supplied fragments into one conjunction.

    :param player_filter: Optional parameters from the request
    :returns: AND of the supplied fragments, or None when nothing was supplied
    """
    fragments = [
        fragment
        for fragment in (
            filter_name(player_filter.name),
            filter_title(player_filter.title),
            filter_race(player_filter.race),
            filter_profession(player_filter.profession),
            filter_experience(
                player_filter.min_experience, player_filter.max_experience
            ),
            filter_level(player_filter.min_level, player_filter.max_level),
            filter_birthday(player_filter.after, player_filter.before),
            filter_banned(player_filter.banned),
        )
        if fragment is not None
    ]

    if not fragments:
        return None
    if len(fragments) == 1:
        return fragments[0]
    return and_(*fragments)
