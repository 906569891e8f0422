"""Service tests running real queries against an in-memory SQLite database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.enums import PlayerOrder, Profession, Race
from app.core.exceptions import NotFoundError
from app.core.models import Base
from app.features.players.filters import PlayerFilter
from app.features.players.repository import SQLAlchemyPlayerRepository
from app.features.players.schemas import PlayerCreate, PlayerUpdate
from app.features.players.service import PlayerService
from factories import millis

SEED = [
    ("Legolas", Race.ELF, Profession.ROGUE, 100),
    ("Gimli", Race.DWARF, Profession.WARRIOR, 150),
    ("Arwen", Race.ELF, Profession.CLERIC, 200),
    ("Aragorn", Race.HUMAN, Profession.PALADIN, 99),
    ("Elrond", Race.ELF, Profession.SORCERER, 201),
    ("Thranduil", Race.ELF, Profession.DRUID, 5000),
    ("Azog", Race.ORC, Profession.WARLOCK, 0),
]


@pytest.fixture
async def session():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as db:
        yield db

    await engine.dispose()


@pytest.fixture
async def service(session):
    player_service = PlayerService(SQLAlchemyPlayerRepository(session))
    for name, race, profession, experience in SEED:
        await player_service.create_player(
            PlayerCreate(
                name=name,
                title="Of the Fellowship",
                race=race,
                profession=profession,
                birthday=millis(2010, 3, 1),
                experience=experience,
            )
        )
    return player_service


async def test_ids_are_assigned_on_create(service):
    players = await service.list_players(PlayerFilter(), page_size=len(SEED))

    assert [p.id for p in players] == list(range(1, len(SEED) + 1))
    assert players[0].level == 1
    assert players[0].until_next_level == 200


async def test_paging_without_filters_covers_every_player(service):
    seen = []
    page_number = 0
    while True:
        page = await service.list_players(
            PlayerFilter(), page_number=page_number, page_size=3
        )
        if not page:
            break
        seen.extend(p.name for p in page)
        page_number += 1

    assert page_number == 3
    assert sorted(seen) == sorted(name for name, *_ in SEED)
    assert len(seen) == len(set(seen))
    assert await service.count_players(PlayerFilter()) == len(SEED)


async def test_race_filter_returns_only_that_race(service):
    elves = await service.list_players(PlayerFilter(race=Race.ELF), page_size=10)

    assert {p.name for p in elves} == {"Legolas", "Arwen", "Elrond", "Thranduil"}
    assert all(p.race is Race.ELF for p in elves)
    assert await service.count_players(PlayerFilter(race=Race.ELF)) == 4


async def test_experience_range_is_inclusive(service):
    players = await service.list_players(
        PlayerFilter(min_experience=100, max_experience=200),
        page_size=10,
        order=PlayerOrder.EXPERIENCE,
    )

    assert [p.experience for p in players] == [100, 150, 200]


async def test_combined_filters(service):
    player_filter = PlayerFilter(race=Race.ELF, name="l", min_level=1)

    players = await service.list_players(player_filter, page_size=10)

    assert {p.name for p in players} == {"Legolas", "Elrond", "Thranduil"}


async def test_substring_filter_matches_wildcards_literally(service):
    assert await service.count_players(PlayerFilter(name="%")) == 0
    assert await service.count_players(PlayerFilter(name="gol")) == 1


async def test_update_persists_recomputed_level(service):
    await service.update_player(2, PlayerUpdate(experience=300))

    player = await service.get_player(2)
    assert player.name == "Gimli"
    assert player.level == 2
    assert player.until_next_level == 300


async def test_delete_then_get_is_not_found(service):
    await service.delete_player(3)

    with pytest.raises(NotFoundError):
        await service.get_player(3)
    assert await service.count_players(PlayerFilter()) == len(SEED) - 1
