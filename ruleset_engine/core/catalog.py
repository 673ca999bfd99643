"""
Modifier Catalog - Read-only registry of mods, setting specs and conflict groups.
"""

from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple

from ruleset_engine.models.enums import GameMode, SettingType
from ruleset_engine.models.modifier import ModifierDefinition, SettingSpec
from ruleset_engine.utils.supported_mods import (
    SUPPORTED_MODS, SETTING_SPECS, CONFLICT_GROUPS, MODE_SPECIFIC_MODS,
)

_OVERRIDE_FIELDS = {'default': 'default', 'min': 'minimum', 'max': 'maximum', 'precision': 'precision'}


class ModifierCatalog:
    """Read-only registry of mods, setting specs and conflict groups.

    Built once from the static tables and shared by every component; nothing
    mutates it after construction.
    """

    def __init__(self,
                 mods: Optional[Dict[str, Dict]] = None,
                 setting_specs: Optional[Dict[str, Dict]] = None,
                 conflict_groups: Optional[List[Dict]] = None,
                 mode_specific_mods: Optional[Dict[str, List[str]]] = None):
        """
        Initialize the catalog.

        Args:
            mods: {acronym: {name, category, settings}} table, defaults to SUPPORTED_MODS
            setting_specs: {key: {type, label, default, min, max, ...}} table
            conflict_groups: [{name, mods}] list of mutually exclusive groups
            mode_specific_mods: {mode: [acronyms]} mods restricted to one mode
        """
        self._modifiers: Dict[str, ModifierDefinition] = {}
        self._setting_specs: Dict[str, SettingSpec] = {}
        self._conflict_groups: List[Tuple[str, frozenset]] = []

        self._load_setting_specs(SETTING_SPECS if setting_specs is None else setting_specs)
        self._load_modifiers(
            SUPPORTED_MODS if mods is None else mods,
            MODE_SPECIFIC_MODS if mode_specific_mods is None else mode_specific_mods,
        )
        self._load_conflict_groups(CONFLICT_GROUPS if conflict_groups is None else conflict_groups)

    @classmethod
    def default(cls) -> "ModifierCatalog":
        """Process-wide catalog built from the bundled tables."""
        return _default_catalog()

    def _load_setting_specs(self, setting_specs: Dict[str, Dict]) -> None:
        for key, spec_def in setting_specs.items():
            overrides = {}
            for acronym, override in spec_def.get('overrides', {}).items():
                overrides[acronym.upper()] = {
                    _OVERRIDE_FIELDS[name]: value for name, value in override.items()
                    if name in _OVERRIDE_FIELDS
                }
            self._setting_specs[key] = SettingSpec(
                key=key,
                setting_type=SettingType(spec_def.get('type', 'number')),
                label=spec_def.get('label', key),
                default=spec_def.get('default'),
                minimum=spec_def.get('min'),
                maximum=spec_def.get('max'),
                precision=spec_def.get('precision'),
                options=tuple(spec_def.get('options', ())),
                overrides=overrides,
            )

    def _load_modifiers(self, mods: Dict[str, Dict], mode_specific_mods: Dict[str, List[str]]) -> None:
        restricted: Dict[str, set] = {}
        for mode, acronyms in mode_specific_mods.items():
            for acronym in acronyms:
                restricted.setdefault(acronym.upper(), set()).add(GameMode(mode))

        for acronym, mod_def in mods.items():
            acronym = acronym.upper()
            self._modifiers[acronym] = ModifierDefinition(
                acronym=acronym,
                name=mod_def.get('name', acronym),
                category=mod_def.get('category', ''),
                allowed_settings=tuple(mod_def.get('settings', [])),
                modes=frozenset(restricted.get(acronym, GameMode)),
            )

    def _load_conflict_groups(self, conflict_groups: List[Dict]) -> None:
        for group in conflict_groups:
            members = frozenset(acronym.upper() for acronym in group['mods'])
            self._conflict_groups.append((group.get('name', ', '.join(sorted(members))), members))

    def lookup(self, acronym: Any) -> Optional[ModifierDefinition]:
        """Return the definition for ``acronym``, or None when it is not supported."""
        if not isinstance(acronym, str):
            return None
        return self._modifiers.get(acronym.upper())

    def is_supported(self, acronym: Any) -> bool:
        return self.lookup(acronym) is not None

    def setting_spec(self, key: str) -> Optional[SettingSpec]:
        return self._setting_specs.get(key)

    def conflict_groups(self) -> List[Tuple[str, frozenset]]:
        """Return ``(label, acronyms)`` pairs in catalog order."""
        return list(self._conflict_groups)

    def resolve_default(self, acronym: str, key: str) -> Any:
        """Default value of setting ``key`` when held by mod ``acronym``."""
        spec = self._setting_specs.get(key)
        return spec.default_for(acronym) if spec else None

    def resolve_bounds(self, acronym: str, key: str) -> Tuple[Optional[float], Optional[float]]:
        spec = self._setting_specs.get(key)
        return spec.bounds_for(acronym) if spec else (None, None)

    def mods_for_mode(self, mode: Any) -> List[ModifierDefinition]:
        """List mods usable in ``mode``, in catalog order. Raises ValueError for unknown modes."""
        game_mode = GameMode(str(mode).lower())
        return [mod for mod in self._modifiers.values() if game_mode in mod.modes]

    def conflicts_between(self, first: str, second: str) -> bool:
        pair = {first.upper(), second.upper()}
        if len(pair) < 2:
            return False
        return any(pair <= members for _, members in self._conflict_groups)

    def __contains__(self, acronym: Any) -> bool:
        return self.is_supported(acronym)

    def __iter__(self):
        return iter(self._modifiers.values())

    def __len__(self) -> int:
        return len(self._modifiers)

    def to_dict(self, mode: Optional[Any] = None) -> Dict[str, Any]:
        """Export mods, their settings with per-mod bounds, and conflict groups."""
        mods = self.mods_for_mode(mode) if mode else list(self._modifiers.values())
        exported = []
        for mod in mods:
            settings = []
            for key in mod.allowed_settings:
                spec = self._setting_specs.get(key)
                if spec is None:
                    continue
                minimum, maximum = spec.bounds_for(mod.acronym)
                settings.append({
                    "key": key,
                    "label": spec.label,
                    "type": spec.setting_type.value,
                    "default": spec.default_for(mod.acronym),
                    "min": minimum,
                    "max": maximum,
                    "precision": spec.precision_for(mod.acronym),
                    "options": list(spec.options),
                })
            exported.append({
                "acronym": mod.acronym,
                "name": mod.name,
                "category": mod.category,
                "modes": sorted(m.value for m in mod.modes),
                "settings": settings,
            })
        return {
            "mods": exported,
            "conflict_groups": [
                {"name": name, "mods": sorted(members)} for name, members in self._conflict_groups
            ],
        }


@lru_cache(maxsize=1)
def _default_catalog() -> ModifierCatalog:
    return ModifierCatalog()
