"""Players feature module.

This module provides player character management: filtered search,
creation, partial update, deletion and level progression.
"""

from .router import router as players_router
from .service import PlayerService
from .orm_models import PlayerORM
from .filters import PlayerFilter, build_player_predicate
from .schemas import PlayerCreate, PlayerUpdate, PlayerResponse
from .dependencies import get_player_service, PlayerServiceDep

__all__ = [
    # Router
    "players_router",
    # Service
    "PlayerService",
    # Models
    "PlayerORM",
    # Filters
    "PlayerFilter",
    "build_player_predicate",
    # Schemas
    "PlayerCreate",
    "PlayerUpdate",
    "PlayerResponse",
    # Dependencies
    "get_player_service",
    "PlayerServiceDep",
]
