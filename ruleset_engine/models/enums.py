"""Enum definitions for the ruleset engine."""

from enum import StrEnum
from typing import Any, Optional


class MatchType(StrEnum):
    """Match policies for comparing a score's mods against a ruleset."""
    EXACT = "exact"
    AT_LEAST = "at_least"
    ANY_OF = "any_of"

    @classmethod
    def from_value(cls, value: Any) -> Optional["MatchType"]:
        """Return the member for ``value``, or None when it is not a recognised policy."""
        if isinstance(value, str) and value in cls._value2member_map_:
            return cls(value)
        return None


class SettingType(StrEnum):
    """Runtime value types a mod setting may hold."""
    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    CHOICE = "choice"


class GameMode(StrEnum):
    """Game variants a mod can be used in."""
    OSU = "osu"
    TAIKO = "taiko"
    CATCH = "catch"
    MANIA = "mania"
