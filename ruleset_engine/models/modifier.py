"""
Modifier dataclasses: catalog definitions, setting specs and applied instances.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from ruleset_engine.models.enums import GameMode, SettingType


class RulesetFormatError(ValueError):
    """Raised when a mod or ruleset payload does not have the expected shape."""
    pass


@dataclass(frozen=True)
class ModifierDefinition:
    """A catalog entry for one mod acronym."""
    acronym: str
    name: str
    category: str
    allowed_settings: Tuple[str, ...] = ()
    modes: FrozenSet[GameMode] = frozenset(GameMode)

    def allows(self, setting_key: str) -> bool:
        return setting_key in self.allowed_settings


@dataclass(frozen=True)
class SettingSpec:
    """Type and range rules for one setting key.

    ``overrides`` maps a mod acronym to replacement ``default``/``minimum``/
    ``maximum``/``precision`` values for settings whose meaning depends on the
    owning mod (e.g. ``speed_change`` on HT vs DT).
    """
    key: str
    setting_type: SettingType
    label: str
    default: Any = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    precision: Optional[float] = None
    options: Tuple[Any, ...] = ()
    overrides: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def _resolve(self, acronym: Optional[str], attribute: str) -> Any:
        if acronym:
            override = self.overrides.get(acronym.upper(), {})
            if attribute in override:
                return override[attribute]
        return getattr(self, attribute)

    def default_for(self, acronym: Optional[str] = None) -> Any:
        return self._resolve(acronym, "default")

    def bounds_for(self, acronym: Optional[str] = None) -> Tuple[Optional[float], Optional[float]]:
        return self._resolve(acronym, "minimum"), self._resolve(acronym, "maximum")

    def precision_for(self, acronym: Optional[str] = None) -> Optional[float]:
        return self._resolve(acronym, "precision")


@dataclass
class ModifierInstance:
    """A mod as required by a ruleset or as applied to a played score.

    ``settings`` conventionally holds only values that differ from the catalog
    defaults, but applied mods may carry any current values.
    """
    acronym: str
    settings: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.acronym, str):
            self.acronym = self.acronym.strip().upper()

    @classmethod
    def from_dict(cls, data: Any) -> "ModifierInstance":
        """Parse a ``{"acronym": ..., "settings": {...}}`` payload entry."""
        if isinstance(data, ModifierInstance):
            return data
        if isinstance(data, str):
            return cls(acronym=data.strip().upper())
        if not isinstance(data, dict):
            raise RulesetFormatError(f"Mod entry must be an object, got {type(data).__name__}")

        acronym = data.get("acronym")
        if not acronym or not isinstance(acronym, str):
            raise RulesetFormatError("Mod entry is missing an acronym")

        settings = data.get("settings") or {}
        if not isinstance(settings, dict):
            raise RulesetFormatError(f"Mod {acronym.upper()}: settings must be an object")

        return cls(acronym=acronym.strip().upper(), settings=dict(settings))

    def to_dict(self) -> Dict[str, Any]:
        return {"acronym": self.acronym, "settings": dict(self.settings)}
