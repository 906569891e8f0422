"""Field rules for player records.

Each ``check_*`` function raises :class:`BadRequestError` when its field is
invalid and returns nothing otherwise. ``None`` is always tested first.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from app.core.enums import Profession, Race
from app.core.exceptions import BadRequestError

MAX_LENGTH_NAME = 12
MAX_LENGTH_TITLE = 30
MIN_EXPERIENCE = 0
MAX_EXPERIENCE = 10_000_000
MIN_BIRTHDAY_YEAR = 2000
MAX_BIRTHDAY_YEAR = 3000


def check_id(player_id: Optional[int]) -> None:
    if player_id is None or player_id <= 0:
        raise BadRequestError(
            "Invalid ID! The ID must be greater than zero!",
            field="id",
            value=player_id,
        )


def check_name(name: Optional[str]) -> None:
    if not name or len(name) > MAX_LENGTH_NAME:
        raise BadRequestError(
            "Invalid Name! The field cannot be empty and has a maximum size of 12 characters",
            field="name",
            value=name,
        )


def check_title(title: Optional[str]) -> None:
    if not title or len(title) > MAX_LENGTH_TITLE:
        raise BadRequestError(
            "Invalid Title! The field cannot be empty and has a maximum size of 30 characters",
            field="title",
            value=title,
        )


def _is_member(value: Any, enum_cls: type) -> bool:
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True


def check_race(race: Optional[Race]) -> None:
    if race is None or not _is_member(race, Race):
        raise BadRequestError("Invalid Race!", field="race", value=race)


def check_profession(profession: Optional[Profession]) -> None:
    if profession is None or not _is_member(profession, Profession):
        raise BadRequestError(
            "Invalid Profession!", field="profession", value=profession
        )


def check_birthday(birthday: Optional[datetime]) -> None:
    """Birthday must be present and fall within years 2000..3000 (UTC)."""
    if birthday is None:
        raise BadRequestError("Invalid Birthday!", field="birthday")

    if birthday.tzinfo is not None:
        birthday = birthday.astimezone(timezone.utc)
    if not MIN_BIRTHDAY_YEAR <= birthday.year <= MAX_BIRTHDAY_YEAR:
        raise BadRequestError(
            "Birthday goes beyond what is bounds",
            field="birthday",
            value=birthday.isoformat(),
        )


def check_experience(experience: Optional[int]) -> None:
    if experience is None or not MIN_EXPERIENCE <= experience <= MAX_EXPERIENCE:
        raise BadRequestError(
            "Invalid Experience!", field="experience", value=experience
        )
