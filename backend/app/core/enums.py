"""Shared enums used across features.

This module provides a single source of truth for enums used in both models and schemas.
"""

from enum import Enum


class Race(str, Enum):
    """Player character races."""

    HUMAN = "HUMAN"
    DWARF = "DWARF"
    ELF = "ELF"
    GIANT = "GIANT"
    ORC = "ORC"
    TROLL = "TROLL"
    HOBBIT = "HOBBIT"


class Profession(str, Enum):
    """Player character professions."""

    WARRIOR = "WARRIOR"
    ROGUE = "ROGUE"
    SORCERER = "SORCERER"
    CLERIC = "CLERIC"
    PALADIN = "PALADIN"
    NAZGUL = "NAZGUL"
    WARLOCK = "WARLOCK"
    DRUID = "DRUID"


class PlayerOrder(str, Enum):
    """Sort keys accepted by the player list endpoint."""

    ID = "ID"
    NAME = "NAME"
    EXPERIENCE = "EXPERIENCE"
    BIRTHDAY = "BIRTHDAY"
    LEVEL = "LEVEL"

    @property
    def field_name(self) -> str:
        """Name of the player attribute this key sorts by."""
        return self.value.lower()
