from datetime import datetime, timedelta, timezone

import pytest

from app.core.enums import Profession, Race
from app.core.exceptions import BadRequestError, ErrorKind
from app.features.players import validation


@pytest.mark.parametrize("player_id", [0, -1, None])
def test_check_id_rejects_non_positive(player_id):
    """Ids must be greater than zero"""
    with pytest.raises(BadRequestError) as exc_info:
        validation.check_id(player_id)

    assert exc_info.value.kind is ErrorKind.BAD_REQUEST
    assert exc_info.value.message == "Invalid ID! The ID must be greater than zero!"


def test_check_id_accepts_positive():
    validation.check_id(1)


@pytest.mark.parametrize("name", [None, "", "x" * 13])
def test_check_name_rejects(name):
    with pytest.raises(BadRequestError, match="Invalid Name!"):
        validation.check_name(name)


@pytest.mark.parametrize("name", ["A", "x" * 12])
def test_check_name_accepts(name):
    validation.check_name(name)


@pytest.mark.parametrize("title", [None, "", "t" * 31])
def test_check_title_rejects(title):
    """Null title is reported as a rule violation, not a crash"""
    with pytest.raises(BadRequestError, match="Invalid Title!"):
        validation.check_title(title)


def test_check_title_accepts_max_length():
    validation.check_title("t" * 30)


def test_check_race_and_profession():
    validation.check_race(Race.ELF)
    validation.check_race("DWARF")
    validation.check_profession(Profession.NAZGUL)

    with pytest.raises(BadRequestError, match="Invalid Race!"):
        validation.check_race(None)
    with pytest.raises(BadRequestError, match="Invalid Race!"):
        validation.check_race("GOBLIN")
    with pytest.raises(BadRequestError, match="Invalid Profession!"):
        validation.check_profession(None)


@pytest.mark.parametrize(
    "birthday",
    [
        datetime(2000, 1, 1, tzinfo=timezone.utc),
        datetime(3000, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
        datetime(2024, 2, 29),
    ],
)
def test_check_birthday_accepts_years_2000_to_3000(birthday):
    validation.check_birthday(birthday)


@pytest.mark.parametrize(
    "birthday",
    [
        datetime(1999, 12, 31, 23, 59, 59, tzinfo=timezone.utc),
        datetime(3001, 1, 1, tzinfo=timezone.utc),
    ],
)
def test_check_birthday_rejects_out_of_range_years(birthday):
    with pytest.raises(BadRequestError, match="Birthday goes beyond what is bounds"):
        validation.check_birthday(birthday)


def test_check_birthday_uses_utc_year():
    """A local time that is still 1999 in UTC is rejected"""
    plus_three = timezone(timedelta(hours=3))

    with pytest.raises(BadRequestError):
        validation.check_birthday(datetime(2000, 1, 1, 1, 0, tzinfo=plus_three))


def test_check_birthday_rejects_none():
    with pytest.raises(BadRequestError, match="Invalid Birthday!"):
        validation.check_birthday(None)


@pytest.mark.parametrize("experience", [None, -1, 10_000_001])
def test_check_experience_rejects(experience):
    """Null experience is reported as a rule violation, not a crash"""
    with pytest.raises(BadRequestError, match="Invalid Experience!"):
        validation.check_experience(experience)


@pytest.mark.parametrize("experience", [0, 10_000_000])
def test_check_experience_accepts_bounds(experience):
    validation.check_experience(experience)
