"""
Ruleset Namer Tests

Names must stay byte-compatible with the ones already shown on leaderboards,
so most assertions compare full strings.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from ruleset_engine.core.catalog import ModifierCatalog
from ruleset_engine.core.ruleset_namer import RulesetNamer, SuffixFormatter
from ruleset_engine.models.enums import MatchType
from ruleset_engine.models.modifier import ModifierInstance


namer = RulesetNamer(ModifierCatalog.default())


def _mod(acronym, **settings):
    return {"acronym": acronym, "settings": settings}


@pytest.mark.parametrize("mods,match_type,expected", [
    ([_mod("HD"), _mod("HR")], "exact", "HDHR"),
    ([_mod("DT", speed_change=1.8)], "at_least", "AtLeast:DT(1.8x)"),
    ([_mod("HD"), _mod("DT", speed_change=1.8)], "any_of", "Any:HDDT(1.8x)"),
    ([_mod("DT", speed_change=1.5)], "exact", "DT"),
    ([_mod("HT", speed_change=0.75)], "exact", "HT"),
    ([_mod("HT", speed_change=0.8)], "exact", "HT(0.8x)"),
    ([_mod("DT", speed_change=2.0)], "exact", "DT(2x)"),
    ([_mod("DT", speed_change=1.8, adjust_pitch=True)], "exact", "DT(1.8xPitch)"),
    ([_mod("DA", circle_size=4, overall_difficulty=8)], "exact", "DA(CS4OD8)"),
    ([_mod("DA", approach_rate=9.5)], "exact", "DA(AR9.5)"),
    ([_mod("AC", minimum_accuracy=0.95)], "exact", "AC(95%)"),
    ([_mod("AC", accuracy_judge_mode="MaximumAchievable")], "exact", "AC(MaxAch)"),
    ([_mod("FL", follow_delay=240, combo_based_size=False)], "exact", "FL(240msNoComboSize)"),
    ([_mod("MR", reflection=1)], "exact", "MR(V)"),
    ([_mod("BR", direction="Counterclockwise")], "exact", "BR(CCW)"),
    ([_mod("CL", classic_note_lock=False)], "exact", "CL(ModernLock)"),
    ([_mod("WD", final_rate=0.75)], "exact", "WD"),
    ([_mod("WD", initial_rate=1.2)], "exact", "WD(1.2x)"),
])
def test_names(mods, match_type, expected):
    assert namer.name(mods, match_type) == expected


def test_empty_ruleset_is_nomod():
    assert namer.name([], "exact") == "NoMod"
    assert namer.name(None) == "NoMod"


def test_default_match_type_is_at_least():
    assert namer.name([_mod("HD")]) == "AtLeast:HD"


def test_unknown_match_type_has_no_prefix():
    assert namer.name([_mod("HD")], "most") == "HD"


def test_name_preserves_ruleset_order():
    assert namer.name([_mod("HR"), _mod("HD")], MatchType.EXACT) == "HRHD"


def test_unknown_settings_are_omitted():
    assert namer.name([_mod("DT", not_a_setting=3)], "exact") == "DT"


def test_deterministic():
    mods = [_mod("HD"), _mod("DT", speed_change=1.8)]
    assert namer.name(mods, "exact") == namer.name(mods, "exact")


def test_custom_formatters():
    """The formatter table can be swapped per namer."""
    custom = RulesetNamer(ModifierCatalog.default(), formatters={"speed_change": SuffixFormatter("×")})
    assert custom.name([_mod("DT", speed_change=1.8)], "exact") == "DT(1.8×)"
    assert custom.name([_mod("DT", adjust_pitch=True)], "exact") == "DT"


def test_format_mod():
    assert namer.format_mod(ModifierInstance("NC", {"speed_change": 1.25})) == "NC(1.25x)"


# =============================================================================
# Descriptions and preview
# =============================================================================

def test_descriptions():
    mods = [_mod("HD"), _mod("HR")]
    assert namer.describe(mods, "exact") == "Must use exactly: HD, HR"
    assert namer.describe(mods, "at_least") == "Must include all of: HD, HR (extras allowed)"
    assert namer.describe(mods, "any_of") == "Must include at least one of: HD, HR (extras allowed)"
    assert namer.describe([], "exact") == "No mods required"
    assert namer.describe(mods, "most") == "Invalid match type: most"


def test_preview():
    preview = namer.preview([_mod("HD"), _mod("DT", speed_change=1.8)], "exact")
    assert preview == {
        "name": "HDDT(1.8x)",
        "description": "Must use exactly: HD, DT",
        "is_valid": True,
        "mod_count": 2,
    }


def test_preview_flags_overlong_names():
    """Names are never truncated; the preview reports them as too long."""
    mods = [_mod("DT", speed_change=1.75)] * 20
    preview = namer.preview(mods, "exact")
    assert len(preview["name"]) > 100
    assert preview["name"].startswith("DT(1.75x)DT(1.75x)")
    assert preview["is_valid"] is False


def test_is_name_unique():
    assert RulesetNamer.is_name_unique("HDHR", ["HDDT", "AtLeast:HDHR"])
    assert not RulesetNamer.is_name_unique("HDHR", ["HDHR"])
    assert RulesetNamer.is_name_unique("HDHR")
