"""Pydantic schemas for Player requests and responses.

JSON keys are camelCase (``untilNextLevel``) and ``birthday`` travels as an
epoch-millisecond integer in both directions.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.core.enums import Profession, Race


class PlayerPayload(BaseModel):
    """Player fields a caller may send.

    Every field is optional at the schema level; which ones are required is
    decided by the service so violations surface with their rule message.
    """

    name: Optional[str] = Field(None, description="Character name (1-12 chars)")
    title: Optional[str] = Field(None, description="Character title (1-30 chars)")
    race: Optional[Race] = Field(None, description="Character race")
    profession: Optional[Profession] = Field(None, description="Character profession")
    birthday: Optional[int] = Field(
        None, description="Registration date as epoch milliseconds (years 2000-3000)"
    )
    banned: Optional[bool] = Field(None, description="Whether the character is banned")
    experience: Optional[int] = Field(
        None, description="Experience points (0-10,000,000)"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerCreate(PlayerPayload):
    """Body of a create request."""


class PlayerUpdate(PlayerPayload):
    """Body of a partial update."""


class PlayerResponse(BaseModel):
    """Schema for player response data."""

    id: int = Field(..., description="Database ID")
    name: str
    title: str
    race: Race
    profession: Profession
    birthday: int = Field(..., description="Epoch milliseconds")
    banned: bool
    experience: int
    level: int = Field(..., description="Level derived from experience")
    until_next_level: int = Field(
        ..., description="Experience still needed to reach the next level"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
