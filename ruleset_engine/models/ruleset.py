"""
Ruleset dataclass and the result types produced by validation and matching.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ruleset_engine.config import DEFAULT_MATCH_TYPE
from ruleset_engine.models.enums import MatchType
from ruleset_engine.models.modifier import ModifierInstance, RulesetFormatError


def parse_mod_list(mods: Any) -> List[ModifierInstance]:
    """Parse a list of mod payloads (or a JSON array string) into instances."""
    if mods is None:
        return []
    if isinstance(mods, str):
        try:
            mods = json.loads(mods)
        except json.JSONDecodeError as e:
            raise RulesetFormatError(f"Failed to parse mods JSON: {e}")
    if not isinstance(mods, list):
        raise RulesetFormatError("Mods must be an array")
    return [ModifierInstance.from_dict(mod) for mod in mods]


@dataclass
class Ruleset:
    """Required mods combined under a match policy.

    ``match_type`` is kept as given so that an unrecognised policy can be
    reported by validation instead of failing at construction.
    """
    required_mods: List[ModifierInstance] = field(default_factory=list)
    match_type: str = MatchType.EXACT.value

    @property
    def policy(self) -> Optional[MatchType]:
        return MatchType.from_value(self.match_type)

    @property
    def acronyms(self) -> List[str]:
        return [mod.acronym for mod in self.required_mods]

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Ruleset":
        """Build a ruleset from a persisted ``{required_mods, ruleset_match_type}`` record."""
        if not isinstance(record, dict):
            raise RulesetFormatError("Ruleset must be an object")
        match_type = record.get("ruleset_match_type") or DEFAULT_MATCH_TYPE
        return cls(
            required_mods=parse_mod_list(record.get("required_mods")),
            match_type=str(match_type).lower(),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "required_mods": [mod.to_dict() for mod in self.required_mods],
            "ruleset_match_type": self.match_type,
        }


@dataclass(frozen=True)
class ConflictReport:
    """One violated conflict group and the acronyms that triggered it."""
    group: str
    acronyms: tuple

    def message(self) -> str:
        return (f"Conflicting mods detected: {', '.join(self.acronyms)} "
                f"cannot be used together ({self.group})")


@dataclass
class ValidationResult:
    """Outcome of ruleset validation. ``valid`` iff there are no errors."""
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}


@dataclass(frozen=True)
class MatchVerdict:
    """Whether a score qualifies for a ruleset, with a reason on failure."""
    qualifies: bool
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"qualifies": self.qualifies, "reason": self.reason}
