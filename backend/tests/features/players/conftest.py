"""Shared fixtures for players feature tests."""

from unittest.mock import AsyncMock

import pytest

from app.features.players.orm_models import PlayerORM
from app.features.players.repository import PlayerRepositoryInterface
from factories import millis


@pytest.fixture
def valid_payload():
    """Full, valid create payload using wire (camelCase) names."""
    return {
        "name": "Elrond",
        "title": "Lord of Rivendell",
        "race": "ELF",
        "profession": "SORCERER",
        "birthday": millis(2010, 3, 1),
        "banned": False,
        "experience": 1000,
    }


@pytest.fixture
def mock_repository():
    """Repository double whose create() assigns an id like the database."""
    repository = AsyncMock(spec=PlayerRepositoryInterface)

    async def _create(player: PlayerORM) -> PlayerORM:
        player.id = 42
        return player

    async def _save(player: PlayerORM) -> PlayerORM:
        return player

    repository.create.side_effect = _create
    repository.save.side_effect = _save
    return repository
