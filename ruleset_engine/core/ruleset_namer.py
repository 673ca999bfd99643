"""
Ruleset Namer - Canonical names and descriptions for rulesets.

Names follow the community convention of concatenated acronyms, e.g.
``HDHR``, ``DT(1.8x)``, ``DA(CS4OD8)``, with an ``AtLeast:`` or ``Any:``
prefix for the non-exact match types. The output must stay byte-compatible
with names already in use.
"""

from typing import Any, Dict, Optional, Sequence

from ruleset_engine.config import RULESET_NAME_MAX_LENGTH
from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.models.enums import MatchType
from ruleset_engine.models.modifier import ModifierInstance
from ruleset_engine.models.ruleset import parse_mod_list
from ruleset_engine.utils.values import display_value, format_number, is_number, round_half_up, values_equal


class SettingFormatter:
    """Renders one setting value as a short token, or None to omit it."""

    def format(self, value: Any, default: Any) -> Optional[str]:
        if values_equal(value, default):
            return None
        return self.render(value)

    def render(self, value: Any) -> Optional[str]:
        raise NotImplementedError


class SuffixFormatter(SettingFormatter):
    """``1.8`` -> ``1.8x``, ``240`` -> ``240ms``; an empty suffix gives the bare number."""

    def __init__(self, suffix: str = ""):
        self.suffix = suffix

    def render(self, value):
        return f"{format_number(value)}{self.suffix}"


class PercentFormatter(SettingFormatter):

    def render(self, value):
        if not is_number(value):
            return display_value(value)
        return f"{round_half_up(value * 100)}%"


class PrefixFormatter(SettingFormatter):
    """``CS`` + value; a None default means any explicit value is shown."""

    def __init__(self, prefix: str):
        self.prefix = prefix

    def render(self, value):
        if value is None:
            return None
        return f"{self.prefix}{format_number(value)}"


class EnumFormatter(SettingFormatter):
    """Maps enumerated values (indices or strings) to short codes."""

    def __init__(self, codes: Dict[Any, str], fallback: str):
        self.codes = codes
        self.fallback = fallback

    def render(self, value):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            return self.fallback
        return self.codes.get(value, self.fallback)


class FlagFormatter(SettingFormatter):
    """Boolean settings: word for a non-default True and/or non-default False."""

    def __init__(self, on: Optional[str] = None, off: Optional[str] = None):
        self.on = on
        self.off = off

    def render(self, value):
        return self.on if value else self.off


_MULTIPLIER = SuffixFormatter("x")
_PLAIN = SuffixFormatter()
_PERCENT = PercentFormatter()

SETTING_FORMATTERS: Dict[str, SettingFormatter] = {
    # Multipliers
    'speed_change': _MULTIPLIER,
    'initial_rate': _MULTIPLIER,
    'final_rate': _MULTIPLIER,
    'size_multiplier': _MULTIPLIER,
    'scroll_speed': _MULTIPLIER,
    'start_scale': _MULTIPLIER,
    'spin_speed': _MULTIPLIER,
    'strength': _MULTIPLIER,
    'max_cursor_size': _MULTIPLIER,
    'initial_size': _MULTIPLIER,

    # Percentages
    'minimum_accuracy': _PERCENT,
    'attraction_strength': _PERCENT,
    'repulsion_strength': _PERCENT,

    # Time
    'follow_delay': SuffixFormatter("ms"),

    # Enumerations
    'reflection': EnumFormatter({0: 'H', 1: 'V', 2: 'HV'}, fallback='H'),
    'style': EnumFormatter(
        {0: 'Lin', 1: 'Grav', 2: 'IO1', 3: 'IO2', 4: 'A1', 5: 'A2', 6: 'A3', 7: 'D1', 8: 'D2', 9: 'D3'},
        fallback='Lin',
    ),
    'accuracy_judge_mode': EnumFormatter({'Standard': 'Std', 'MaximumAchievable': 'MaxAch'}, fallback='Std'),
    'direction': EnumFormatter({'Clockwise': 'CW', 'Counterclockwise': 'CCW'}, fallback='CW'),

    # Difficulty Adjust
    'circle_size': PrefixFormatter('CS'),
    'drain_rate': PrefixFormatter('HP'),
    'overall_difficulty': PrefixFormatter('OD'),
    'approach_rate': PrefixFormatter('AR'),

    # Plain numbers
    'angle_sharpness': _PLAIN,
    'max_depth': _PLAIN,
    'final_volume_combo_count': _PLAIN,
    'max_size_combo_count': _PLAIN,
    'hidden_combo_count': _PLAIN,
    'seed': _PLAIN,

    # Flags
    'adjust_pitch': FlagFormatter(on='Pitch'),
    'restart': FlagFormatter(on='Restart'),
    'fail_on_slider_tail': FlagFormatter(on='FailTail'),
    'only_fade_approach_circles': FlagFormatter(on='FadeAC'),
    'combo_based_size': FlagFormatter(on='ComboSize', off='NoComboSize'),
    'metronome': FlagFormatter(on='Metro', off='NoMetro'),
    'start_muted': FlagFormatter(on='InvMute'),
    'enable_metronome': FlagFormatter(on='Metro', off='NoMetro'),
    'mute_hit_sounds': FlagFormatter(on='MuteHS', off='HitSounds'),
    'show_approach_circles': FlagFormatter(on='ShowAC', off='HideAC'),

    # Classic (all default to True)
    'no_slider_head_accuracy': FlagFormatter(off='SliderHead'),
    'classic_note_lock': FlagFormatter(off='ModernLock'),
    'always_play_tail_sample': FlagFormatter(off='NoTailSample'),
    'fade_hit_circle_early': FlagFormatter(off='NoEarlyFade'),
    'classic_health': FlagFormatter(off='ModernHealth'),
}

NAME_PREFIXES = {
    MatchType.AT_LEAST: "AtLeast:",
    MatchType.ANY_OF: "Any:",
    MatchType.EXACT: "",
}

DESCRIPTIONS = {
    MatchType.EXACT: "Must use exactly: {mods}",
    MatchType.AT_LEAST: "Must include all of: {mods} (extras allowed)",
    MatchType.ANY_OF: "Must include at least one of: {mods} (extras allowed)",
}


class RulesetNamer:
    """Deterministic display names for rulesets. Never fails or truncates."""

    def __init__(self, catalog: ModifierCatalog,
                 formatters: Optional[Dict[str, SettingFormatter]] = None):
        self._catalog = catalog
        self._formatters = SETTING_FORMATTERS if formatters is None else formatters

    def format_mod(self, mod: ModifierInstance) -> str:
        """``DT`` with default settings, ``DT(1.8x)`` otherwise."""
        tokens = []
        for key, value in mod.settings.items():
            formatter = self._formatters.get(key)
            if formatter is None:
                continue
            token = formatter.format(value, self._catalog.resolve_default(mod.acronym, key))
            if token:
                tokens.append(token)

        if tokens:
            return f"{mod.acronym}({''.join(tokens)})"
        return mod.acronym

    def name(self, required_mods: Any, match_type: Any = MatchType.AT_LEAST) -> str:
        mods = parse_mod_list(required_mods)
        if not mods:
            return "NoMod"

        mod_string = "".join(self.format_mod(mod) for mod in mods)
        policy = MatchType.from_value(match_type)
        return NAME_PREFIXES.get(policy, "") + mod_string

    def describe(self, required_mods: Any, match_type: Any = MatchType.AT_LEAST) -> str:
        mods = parse_mod_list(required_mods)
        if not mods:
            return "No mods required"

        policy = MatchType.from_value(match_type)
        if policy is None:
            return f"Invalid match type: {match_type}"
        return DESCRIPTIONS[policy].format(mods=", ".join(mod.acronym for mod in mods))

    def preview(self, required_mods: Any, match_type: Any = MatchType.AT_LEAST) -> Dict[str, Any]:
        """Name, description and a display-length sanity check."""
        mods = parse_mod_list(required_mods)
        name = self.name(mods, match_type)
        return {
            "name": name,
            "description": self.describe(mods, match_type),
            "is_valid": 0 < len(name) <= RULESET_NAME_MAX_LENGTH,
            "mod_count": len(mods),
        }

    @staticmethod
    def is_name_unique(name: str, existing_names: Optional[Sequence[str]] = None) -> bool:
        return name not in (existing_names or [])

