import pytest
from unittest.mock import AsyncMock, MagicMock

from app.features.players.filters import PlayerFilter, build_player_predicate
from app.features.players.orm_models import PlayerORM
from app.features.players.repository import SQLAlchemyPlayerRepository
from app.core.enums import Race
from factories import make_player


@pytest.fixture
def mock_db():
    return AsyncMock()


@pytest.fixture
def repository(mock_db):
    return SQLAlchemyPlayerRepository(mock_db)


async def test_create_player(repository, mock_db):
    """Create adds, commits and refreshes the new player"""
    player = make_player(id=None)
    mock_db.add = MagicMock()

    result = await repository.create(player)

    assert result is player
    mock_db.add.assert_called_once_with(player)
    mock_db.commit.assert_called_once()
    mock_db.refresh.assert_called_once_with(player)


async def test_get_by_id(repository, mock_db):
    expected = make_player(id=3)
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = expected
    mock_db.execute = AsyncMock(return_value=mock_result)

    result = await repository.get_by_id(3)

    assert result is expected
    stmt = mock_db.execute.call_args.args[0]
    assert "WHERE players.id = " in str(stmt)


async def test_get_by_id_missing(repository, mock_db):
    mock_result = MagicMock()
    mock_result.scalar_one_or_none.return_value = None
    mock_db.execute = AsyncMock(return_value=mock_result)

    assert await repository.get_by_id(3) is None


async def test_find_all_applies_predicate_order_and_page(repository, mock_db):
    players = [make_player(id=1), make_player(id=2)]
    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = players
    mock_db.execute = AsyncMock(return_value=mock_result)

    result = await repository.find_all(
        build_player_predicate(PlayerFilter(race=Race.ELF)),
        order_by=[PlayerORM.level, PlayerORM.id],
        offset=6,
        limit=3,
    )

    assert result == players
    sql = str(mock_db.execute.call_args.args[0])
    assert "WHERE players.race = " in sql
    assert "ORDER BY players.level, players.id" in sql
    assert "LIMIT" in sql
    assert "OFFSET" in sql


async def test_find_all_without_predicate(repository, mock_db):
    mock_result = MagicMock()
    mock_result.scalars.return_value.all.return_value = []
    mock_db.execute = AsyncMock(return_value=mock_result)

    result = await repository.find_all(None, order_by=[PlayerORM.id], offset=0, limit=3)

    assert result == []
    assert "WHERE" not in str(mock_db.execute.call_args.args[0])


async def test_count(repository, mock_db):
    mock_result = MagicMock()
    mock_result.scalar_one.return_value = 11
    mock_db.execute = AsyncMock(return_value=mock_result)

    total = await repository.count(
        build_player_predicate(PlayerFilter(min_level=2))
    )

    assert total == 11
    sql = str(mock_db.execute.call_args.args[0])
    assert "count(*)" in sql
    assert "players.level >=" in sql


async def test_save_commits_and_refreshes(repository, mock_db):
    player = make_player(id=4)

    result = await repository.save(player)

    assert result is player
    mock_db.commit.assert_called_once()
    mock_db.refresh.assert_called_once_with(player)


async def test_delete_is_permanent(repository, mock_db):
    player = make_player(id=4)

    await repository.delete(player)

    mock_db.delete.assert_called_once_with(player)
    mock_db.commit.assert_called_once()
